from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fedstore_core.domain.specification import ISpecification

if TYPE_CHECKING:
    from .visitor import SpecificationVisitor


class BaseSpecification(ISpecification):
    """Base class for specifications with logic operator support."""

    def __and__(self, other: ISpecification) -> AndSpecification:
        return AndSpecification(self, other)

    def __or__(self, other: ISpecification) -> OrSpecification:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification:
        return NotSpecification(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseSpecification):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"

    def merge(self, other: ISpecification) -> AndSpecification:
        """Merge with another specification using logical AND."""
        return AndSpecification(self, other)


class AndSpecification(BaseSpecification):
    """Logical AND composite specification."""

    def __init__(self, *specifications: ISpecification) -> None:
        self.specifications = specifications

    def accept(self, visitor: SpecificationVisitor[Any]) -> Any:
        return visitor.visit_and(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "and",
            "conditions": [spec.to_dict() for spec in self.specifications],
        }


class OrSpecification(BaseSpecification):
    """Logical OR composite specification."""

    def __init__(self, *specifications: ISpecification) -> None:
        self.specifications = specifications

    def accept(self, visitor: SpecificationVisitor[Any]) -> Any:
        return visitor.visit_or(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "or",
            "conditions": [spec.to_dict() for spec in self.specifications],
        }


class NotSpecification(BaseSpecification):
    """Logical NOT composite specification."""

    def __init__(self, specification: ISpecification) -> None:
        self.specification = specification

    def accept(self, visitor: SpecificationVisitor[Any]) -> Any:
        return visitor.visit_not(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "not",
            "conditions": [self.specification.to_dict()],
        }
