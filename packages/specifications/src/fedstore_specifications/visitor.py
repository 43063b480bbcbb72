"""
Visitor over specification trees.

A specification tree is a closed set of node kinds: one attribute leaf and
the three logical composites. Backends translate a tree by subclassing
:class:`SpecificationVisitor` and implementing one method per node kind;
:meth:`SpecificationVisitor.visit` routes a node through ``accept``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from .ast import AttributeSpecification
    from .base import AndSpecification, NotSpecification, OrSpecification

R = TypeVar("R")


class SpecificationVisitor(ABC, Generic[R]):
    """Strategy interface for walking a specification tree."""

    def visit(self, spec: Any) -> R:
        """Dispatch ``spec`` to the method matching its node kind."""
        accept = getattr(spec, "accept", None)
        if accept is None:
            return self.visit_unknown(spec)
        result: R = accept(self)
        return result

    @abstractmethod
    def visit_attribute(self, spec: AttributeSpecification) -> R: ...

    @abstractmethod
    def visit_and(self, spec: AndSpecification) -> R: ...

    @abstractmethod
    def visit_or(self, spec: OrSpecification) -> R: ...

    @abstractmethod
    def visit_not(self, spec: NotSpecification) -> R: ...

    def visit_unknown(self, spec: Any) -> R:
        raise TypeError(f"Not a specification node: {type(spec).__name__}")
