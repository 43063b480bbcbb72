"""Specification pattern primitives."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ISpecification(Protocol):
    """
    Protocol for filter expressions handed to data stores.

    A specification is a node of a boolean expression tree. Stores either
    translate it through a visitor (``accept``) or ship its dictionary form
    (``to_dict``) to a backend driver.
    """

    def accept(self, visitor: Any) -> Any:
        """Dispatch to the visitor method matching this node kind."""
        ...

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dictionary representation of the specification.
        Useful for serializing criteria across process boundaries or to DB drivers.
        """
        ...
