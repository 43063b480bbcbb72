"""Translate specification trees into a single key-value predicate."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fedstore_specifications.visitor import SpecificationVisitor

from .exceptions import UnsupportedFilterShapeError
from .predicate import KeyValuePredicate

if TYPE_CHECKING:
    from fedstore_specifications.ast import AttributeSpecification
    from fedstore_specifications.base import (
        AndSpecification,
        NotSpecification,
        OrSpecification,
    )


class KeyValueFilterTranslator(SpecificationVisitor[KeyValuePredicate]):
    """
    Accepts exactly one attribute leaf.

    A hash scan can only test one comparison per key, so every logical
    node fails regardless of what its children look like.
    """

    def visit_attribute(self, spec: AttributeSpecification) -> KeyValuePredicate:
        return KeyValuePredicate.from_specification(spec)

    def visit_and(self, spec: AndSpecification) -> KeyValuePredicate:
        raise UnsupportedFilterShapeError("and")

    def visit_or(self, spec: OrSpecification) -> KeyValuePredicate:
        raise UnsupportedFilterShapeError("or")

    def visit_not(self, spec: NotSpecification) -> KeyValuePredicate:
        raise UnsupportedFilterShapeError("not")

    def visit_unknown(self, spec: Any) -> KeyValuePredicate:
        raise UnsupportedFilterShapeError(type(spec).__name__)


_TRANSLATOR = KeyValueFilterTranslator()


def translate(spec: Any) -> KeyValuePredicate:
    """Translate ``spec`` or raise :class:`UnsupportedFilterShapeError`."""
    return _TRANSLATOR.visit(spec)
