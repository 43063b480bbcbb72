"""KeyValuePredicate — the single comparison a key-value scan can evaluate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fedstore_specifications.operators import NULLARY_OPERATORS, SpecificationOperator

if TYPE_CHECKING:
    from fedstore_specifications.ast import AttributeSpecification


@dataclass(frozen=True)
class KeyValuePredicate:
    """
    Immutable ``field operator values`` triple.

    Attributes:
        field_name: Attribute the comparison applies to.
        operator: Comparison operator.
        values: Ordered operands; empty only for ``is_null``/``is_not_null``.
    """

    field_name: str
    operator: SpecificationOperator
    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.operator, SpecificationOperator):
            object.__setattr__(self, "operator", SpecificationOperator(self.operator))
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))
        if not self.values and self.operator not in NULLARY_OPERATORS:
            raise ValueError(
                f"Operator '{self.operator.value}' on '{self.field_name}' "
                f"requires at least one value"
            )

    @classmethod
    def from_specification(cls, spec: AttributeSpecification) -> KeyValuePredicate:
        return cls(field_name=spec.attr, operator=spec.op, values=spec.values)
