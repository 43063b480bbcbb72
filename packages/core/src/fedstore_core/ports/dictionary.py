"""IEntityDictionary — type metadata shared by the federated stores."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IEntityDictionary(Protocol):
    """Maps entity classes and their relations to concrete types."""

    def bind_entity(self, entity_cls: type[Any]) -> None:
        """Register ``entity_cls`` as a known entity."""
        ...

    def is_bound(self, entity_cls: type[Any]) -> bool: ...

    def get_parameterized_type(
        self, parent: object | type[Any], relation_name: str
    ) -> type[Any]:
        """
        Return the entity class a relation of ``parent`` points to.

        ``parent`` may be an instance or a class. For to-many relations the
        element type is returned, not the collection type.
        """
        ...
