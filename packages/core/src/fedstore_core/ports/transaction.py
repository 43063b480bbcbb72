"""Transaction protocols for federated data stores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.specification import ISpecification
    from ..scope import RequestScope


@runtime_checkable
class IDataStoreTransaction(Protocol):
    """
    One unit of work against a single backing store.

    ``sorting`` and ``pagination`` are opaque option objects
    (see ``fedstore_specifications.Sorting`` / ``Pagination``).
    """

    def load_object(
        self,
        entity_cls: type[Any],
        entity_id: Any,
        filter_expression: ISpecification | None = None,
        scope: RequestScope | None = None,
    ) -> Any | None: ...

    def load_objects(
        self,
        entity_cls: type[Any],
        filter_expression: ISpecification | None = None,
        sorting: Any | None = None,
        pagination: Any | None = None,
        scope: RequestScope | None = None,
    ) -> list[Any]: ...

    def get_relation(
        self,
        relation_tx: IDataStoreTransaction,
        entity: Any,
        relation_name: str,
        filter_expression: ISpecification | None = None,
        sorting: Any | None = None,
        pagination: Any | None = None,
        scope: RequestScope | None = None,
    ) -> Any: ...

    def get_attribute(
        self, entity: Any, attribute_name: str, scope: RequestScope | None = None
    ) -> Any: ...

    def set_attribute(
        self,
        entity: Any,
        attribute_name: str,
        attribute_value: Any,
        scope: RequestScope | None = None,
    ) -> None: ...

    def update_to_many_relation(
        self,
        relation_tx: IDataStoreTransaction,
        entity: Any,
        relation_name: str,
        new_relationships: set[Any],
        deleted_relationships: set[Any],
        scope: RequestScope | None = None,
    ) -> None: ...

    def update_to_one_relation(
        self,
        relation_tx: IDataStoreTransaction,
        entity: Any,
        relation_name: str,
        relationship_value: Any,
        scope: RequestScope | None = None,
    ) -> None: ...

    def create_object(self, entity: Any, scope: RequestScope | None = None) -> None: ...

    def create_new_object(self, entity_cls: type[Any]) -> Any | None: ...

    def save(self, entity: Any, scope: RequestScope | None = None) -> None: ...

    def delete(self, entity: Any, scope: RequestScope | None = None) -> None: ...

    def flush(self, scope: RequestScope | None = None) -> None: ...

    def pre_commit(self) -> None: ...

    def commit(self, scope: RequestScope | None = None) -> None: ...

    def access_user(self, opaque_user: Any) -> Any | None: ...

    def close(self) -> None: ...


@runtime_checkable
class IMultiplexTransaction(Protocol):
    """Coordinator transaction that routes loads to the owning store."""

    def load_object(
        self,
        entity_cls: type[Any],
        entity_id: Any,
        filter_expression: ISpecification | None = None,
        scope: RequestScope | None = None,
    ) -> Any | None: ...

    def load_objects(
        self,
        entity_cls: type[Any],
        filter_expression: ISpecification | None = None,
        sorting: Any | None = None,
        pagination: Any | None = None,
        scope: RequestScope | None = None,
    ) -> list[Any]: ...


@runtime_checkable
class IBridgeableTransaction(Protocol):
    """
    A transaction able to resolve relations whose parent lives elsewhere.

    The multiplex coordinator calls these when a relation crosses store
    boundaries; ``mux_tx`` lets the store re-enter the coordinator.
    """

    def bridgeable_load_object(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        relation_name: str,
        lookup_id: Any,
        filter_expression: ISpecification | None,
        scope: RequestScope,
    ) -> Any | None: ...

    def bridgeable_load_objects(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        relation_name: str,
        filter_expression: ISpecification | None,
        sorting: Any | None,
        pagination: Any | None,
        scope: RequestScope,
    ) -> list[Any]: ...
