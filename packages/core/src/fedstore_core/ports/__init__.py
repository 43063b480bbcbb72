from .data_store import IDataStore
from .dictionary import IEntityDictionary
from .key_value import IKeyValueClient
from .transaction import (
    IBridgeableTransaction,
    IDataStoreTransaction,
    IMultiplexTransaction,
)

__all__ = [
    "IBridgeableTransaction",
    "IDataStore",
    "IDataStoreTransaction",
    "IEntityDictionary",
    "IKeyValueClient",
    "IMultiplexTransaction",
]
