"""IDataStore — factory of transactions for one backing store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .dictionary import IEntityDictionary
    from .transaction import IDataStoreTransaction


@runtime_checkable
class IDataStore(Protocol):
    def populate_entity_dictionary(self, dictionary: IEntityDictionary) -> None:
        """Bind every entity class this store owns."""
        ...

    def begin_transaction(self) -> IDataStoreTransaction: ...

    def begin_read_transaction(self) -> IDataStoreTransaction: ...
