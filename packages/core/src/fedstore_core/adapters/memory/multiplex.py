"""MultiplexManager — routes entity loads to the store that owns them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ...ports.transaction import IBridgeableTransaction, IMultiplexTransaction
from ...primitives.exceptions import UnexpectedTypeError, UnsupportedOperationError

if TYPE_CHECKING:
    from ...domain.specification import ISpecification
    from ...ports.data_store import IDataStore
    from ...ports.dictionary import IEntityDictionary
    from ...ports.transaction import IDataStoreTransaction
    from ...scope import RequestScope

logger = logging.getLogger("fedstore.multiplex")


class _RecordingDictionary:
    """Forwards to a dictionary while remembering which classes were bound."""

    def __init__(self, dictionary: IEntityDictionary) -> None:
        self._dictionary = dictionary
        self.bound: list[type[Any]] = []

    def bind_entity(self, entity_cls: type[Any]) -> None:
        self.bound.append(entity_cls)
        self._dictionary.bind_entity(entity_cls)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._dictionary, name)


class MultiplexManager:
    """
    Coordinates several data stores behind one transaction.

    Each entity class belongs to the first store that binds it. Relations
    whose parent and target belong to different stores are resolved through
    the target store's bridgeable transaction.
    """

    def __init__(self, *stores: IDataStore) -> None:
        self._stores = stores
        self._owners: dict[type[Any], IDataStore] = {}

    def populate_entity_dictionary(self, dictionary: IEntityDictionary) -> None:
        for store in self._stores:
            recorder = _RecordingDictionary(dictionary)
            store.populate_entity_dictionary(recorder)  # type: ignore[arg-type]
            for entity_cls in recorder.bound:
                self._owners.setdefault(entity_cls, store)

        # Bridge tables reference entities of other stores, so they can only
        # be checked once every store has bound its classes.
        for store in self._stores:
            validate = getattr(store, "validate_bridges", None)
            if validate is not None:
                validate(dictionary)

    def owner_of(self, entity_cls: type[Any]) -> IDataStore | None:
        return self._owners.get(entity_cls)

    def begin_transaction(self) -> MultiplexTransaction:
        return MultiplexTransaction(self, read_only=False)

    def begin_read_transaction(self) -> MultiplexTransaction:
        return MultiplexTransaction(self, read_only=True)


class MultiplexTransaction(IMultiplexTransaction):
    """Lazily opens one transaction per store touched by the request."""

    def __init__(self, manager: MultiplexManager, *, read_only: bool) -> None:
        self._manager = manager
        self._read_only = read_only
        self._transactions: dict[int, IDataStoreTransaction] = {}

    def _transaction_for(self, entity_cls: type[Any]) -> IDataStoreTransaction:
        store = self._manager.owner_of(entity_cls)
        if store is None:
            raise UnexpectedTypeError(entity_cls, store="multiplex")
        key = id(store)
        if key not in self._transactions:
            self._transactions[key] = (
                store.begin_read_transaction()
                if self._read_only
                else store.begin_transaction()
            )
        return self._transactions[key]

    def load_object(
        self,
        entity_cls: type[Any],
        entity_id: Any,
        filter_expression: ISpecification | None = None,
        scope: RequestScope | None = None,
    ) -> Any | None:
        tx = self._transaction_for(entity_cls)
        return tx.load_object(entity_cls, entity_id, filter_expression, scope)

    def load_objects(
        self,
        entity_cls: type[Any],
        filter_expression: ISpecification | None = None,
        sorting: Any | None = None,
        pagination: Any | None = None,
        scope: RequestScope | None = None,
    ) -> list[Any]:
        tx = self._transaction_for(entity_cls)
        return list(
            tx.load_objects(entity_cls, filter_expression, sorting, pagination, scope)
        )

    def get_relation(
        self,
        parent: Any,
        relation_name: str,
        scope: RequestScope,
        *,
        lookup_id: Any | None = None,
        filter_expression: ISpecification | None = None,
        sorting: Any | None = None,
        pagination: Any | None = None,
    ) -> Any:
        """
        Resolve ``parent.<relation_name>``.

        With ``lookup_id`` a single related object (or ``None``) is returned,
        otherwise a list. Relations that stay inside one store go through
        that store's ``get_relation``.
        """
        target_cls = scope.dictionary.get_parameterized_type(parent, relation_name)
        parent_tx = self._transaction_for(type(parent))
        target_tx = self._transaction_for(target_cls)

        if parent_tx is target_tx:
            return parent_tx.get_relation(
                parent_tx,
                parent,
                relation_name,
                filter_expression,
                sorting,
                pagination,
                scope,
            )

        if not isinstance(target_tx, IBridgeableTransaction):
            raise UnsupportedOperationError(
                f"Store owning {target_cls.__qualname__} cannot bridge relations"
            )

        logger.debug(
            "Bridging %s.%s to %s",
            type(parent).__qualname__,
            relation_name,
            target_cls.__qualname__,
        )
        if lookup_id is not None:
            return target_tx.bridgeable_load_object(
                self, parent, relation_name, lookup_id, filter_expression, scope
            )
        return list(
            target_tx.bridgeable_load_objects(
                self,
                parent,
                relation_name,
                filter_expression,
                sorting,
                pagination,
                scope,
            )
        )

    def commit(self, scope: RequestScope | None = None) -> None:
        for tx in self._transactions.values():
            tx.flush(scope)
        for tx in self._transactions.values():
            tx.pre_commit()
        for tx in self._transactions.values():
            tx.commit(scope)

    def close(self) -> None:
        for tx in self._transactions.values():
            tx.close()
        self._transactions.clear()
