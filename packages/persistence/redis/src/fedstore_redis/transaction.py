"""RedisTransaction — read-only, bridgeable transaction over one Redis hash."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fedstore_core.ports.transaction import (
    IBridgeableTransaction,
    IDataStoreTransaction,
)
from fedstore_core.primitives.exceptions import (
    UnexpectedTypeError,
    UnsupportedOperationError,
)
from fedstore_specifications.operators import SpecificationOperator

from .translator import translate

if TYPE_CHECKING:
    from fedstore_core.domain.specification import ISpecification
    from fedstore_core.ports.transaction import IMultiplexTransaction
    from fedstore_core.scope import RequestScope

    from .predicate import KeyValuePredicate
    from .store import RedisDataStore

logger = logging.getLogger("fedstore.redis")

_OWNER_OPERATORS = frozenset({SpecificationOperator.EQ, SpecificationOperator.IN})


class RedisTransaction(IDataStoreTransaction, IBridgeableTransaction):
    """
    Loads the store's single entity type from its namespace hash.

    The only filter the hash layout can answer is "owned by one of these
    parents" (``<owner_field> = x`` or ``<owner_field> in [...]``). Writes
    are accepted and ignored; relations are only reachable by bridging.
    """

    def __init__(self, store: RedisDataStore) -> None:
        self._store = store

    # -- direct loads ---------------------------------------------------------

    def load_object(
        self,
        entity_cls: type[Any],
        entity_id: Any,
        filter_expression: ISpecification | None = None,
        scope: RequestScope | None = None,  # noqa: ARG002
    ) -> Any | None:
        self._check_type(entity_cls)
        engine = self._store.engine
        record_id = str(entity_id)

        if filter_expression is not None:
            owners = self._owner_ids(translate(filter_expression))
            if owners is None:
                return None
            key_codec = engine.codec.key_codec
            wanted = {key_codec.compose(owner, record_id) for owner in owners}
            matches = engine.fetch(self._store.namespace, wanted.__contains__)
        else:
            matches = engine.fetch(
                self._store.namespace,
                lambda key: engine.codec.parse_key(key).record_id == record_id,
            )
        return matches[0] if matches else None

    def load_objects(
        self,
        entity_cls: type[Any],
        filter_expression: ISpecification | None = None,
        sorting: Any | None = None,  # noqa: ARG002
        pagination: Any | None = None,  # noqa: ARG002
        scope: RequestScope | None = None,  # noqa: ARG002
    ) -> list[Any]:
        self._check_type(entity_cls)
        engine = self._store.engine

        if filter_expression is None:
            return engine.fetch(self._store.namespace, lambda _key: True)

        predicate = translate(filter_expression)
        owners = self._owner_ids(predicate)
        if owners is None:
            logger.error("Received bad filter: %s for type: %s", predicate, entity_cls)
            raise UnsupportedOperationError("Cannot filter object of that type")

        key_codec = engine.codec.key_codec
        prefixes = tuple(key_codec.scope_prefix(owner) for owner in owners)
        return engine.fetch(self._store.namespace, lambda key: key.startswith(prefixes))

    def get_attribute(
        self,
        entity: Any,
        attribute_name: str,
        scope: RequestScope | None = None,  # noqa: ARG002
    ) -> Any:
        return getattr(entity, attribute_name)

    # -- bridgeable -----------------------------------------------------------

    def bridgeable_load_object(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        relation_name: str,
        lookup_id: Any,
        filter_expression: ISpecification | None,
        scope: RequestScope,
    ) -> Any | None:
        return self._store.bridges.bridge_load_one(
            mux_tx, parent, relation_name, lookup_id, filter_expression, scope
        )

    def bridgeable_load_objects(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        relation_name: str,
        filter_expression: ISpecification | None,
        sorting: Any | None,
        pagination: Any | None,
        scope: RequestScope,
    ) -> list[Any]:
        return self._store.bridges.bridge_load_many(
            mux_tx,
            parent,
            relation_name,
            filter_expression,
            sorting,
            pagination,
            scope,
        )

    # -- unsupported operations -------------------------------------------------

    def get_relation(
        self,
        relation_tx: IDataStoreTransaction,  # noqa: ARG002
        entity: Any,  # noqa: ARG002
        relation_name: str,  # noqa: ARG002
        filter_expression: ISpecification | None = None,  # noqa: ARG002
        sorting: Any | None = None,  # noqa: ARG002
        pagination: Any | None = None,  # noqa: ARG002
        scope: RequestScope | None = None,  # noqa: ARG002
    ) -> Any:
        raise UnsupportedOperationError("No redis relationships currently supported.")

    # Writes are accepted and dropped: the hash is populated out of band.

    def set_attribute(
        self,
        entity: Any,  # noqa: ARG002
        attribute_name: str,  # noqa: ARG002
        attribute_value: Any,  # noqa: ARG002
        scope: RequestScope | None = None,  # noqa: ARG002
    ) -> None:
        pass

    def update_to_many_relation(
        self,
        relation_tx: IDataStoreTransaction,  # noqa: ARG002
        entity: Any,  # noqa: ARG002
        relation_name: str,  # noqa: ARG002
        new_relationships: set[Any],  # noqa: ARG002
        deleted_relationships: set[Any],  # noqa: ARG002
        scope: RequestScope | None = None,  # noqa: ARG002
    ) -> None:
        pass

    def update_to_one_relation(
        self,
        relation_tx: IDataStoreTransaction,  # noqa: ARG002
        entity: Any,  # noqa: ARG002
        relation_name: str,  # noqa: ARG002
        relationship_value: Any,  # noqa: ARG002
        scope: RequestScope | None = None,  # noqa: ARG002
    ) -> None:
        pass

    def create_object(self, entity: Any, scope: RequestScope | None = None) -> None:  # noqa: ARG002
        pass

    def create_new_object(self, entity_cls: type[Any]) -> Any | None:  # noqa: ARG002
        return None

    def save(self, entity: Any, scope: RequestScope | None = None) -> None:  # noqa: ARG002
        pass

    def delete(self, entity: Any, scope: RequestScope | None = None) -> None:  # noqa: ARG002
        pass

    def flush(self, scope: RequestScope | None = None) -> None:  # noqa: ARG002
        pass

    def pre_commit(self) -> None:
        pass

    def commit(self, scope: RequestScope | None = None) -> None:  # noqa: ARG002
        pass

    def access_user(self, opaque_user: Any) -> Any | None:  # noqa: ARG002
        return None

    def close(self) -> None:
        # The client belongs to whoever created the store.
        pass

    # -- internals ------------------------------------------------------------

    def _check_type(self, entity_cls: type[Any]) -> None:
        if entity_cls is not self._store.entity_cls:
            logger.debug("Tried to load unexpected object from redis: %s", entity_cls)
            raise UnexpectedTypeError(entity_cls, store="redis")

    def _owner_ids(self, predicate: KeyValuePredicate) -> tuple[str, ...] | None:
        """Owner ids selected by ``predicate``, or ``None`` if it is not an owner filter."""
        if predicate.field_name != self._store.owner_field:
            return None
        if predicate.operator not in _OWNER_OPERATORS:
            return None
        return tuple(str(value) for value in predicate.values)
