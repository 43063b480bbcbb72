from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import BaseSpecification
from .operators import NULLARY_OPERATORS, SpecificationOperator

if TYPE_CHECKING:
    from .visitor import SpecificationVisitor


class AttributeSpecification(BaseSpecification):
    """
    Specification that compares a single attribute.

    ``val`` is whatever the operator expects: a scalar for ``=``, a
    sequence for ``in``, nothing for ``is_null``. :attr:`values` gives the
    operands as a tuple regardless of shape.
    """

    def __init__(
        self,
        attr: str,
        op: SpecificationOperator | str,
        val: Any = None,
    ) -> None:
        self.attr = attr
        self.op = SpecificationOperator(op) if isinstance(op, str) else op
        self.val = val

    @property
    def values(self) -> tuple[Any, ...]:
        if self.op in NULLARY_OPERATORS and self.val is None:
            return ()
        if isinstance(self.val, list | tuple | set | frozenset):
            return tuple(self.val)
        return (self.val,)

    def accept(self, visitor: SpecificationVisitor[Any]) -> Any:
        return visitor.visit_attribute(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op.value,
            "attr": self.attr,
            "val": self.val,
        }
