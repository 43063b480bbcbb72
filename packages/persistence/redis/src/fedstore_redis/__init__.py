"""Redis key-value store for the fedstore toolkit."""

from __future__ import annotations

from .bridge import (
    BridgeDispatcher,
    BridgeRoute,
    BridgeStrategy,
    CollectionBridgeStrategy,
    DirectIdBridge,
    OwnerScopedBridge,
)
from .codec import KeyCodec, OwnerScopedKeyCodec, RecordCodec, RecordKey
from .connection import RedisConnectionManager
from .exceptions import (
    MalformedKeyError,
    RedisConnectionError,
    RedisError,
    RedisStoreError,
    UnsupportedFilterShapeError,
)
from .fetch import ScanFetchEngine
from .models import RedisAction
from .predicate import KeyValuePredicate
from .store import RedisDataStore, canonical_name
from .transaction import RedisTransaction
from .translator import KeyValueFilterTranslator, translate

__all__ = [
    # Store
    "RedisDataStore",
    "RedisTransaction",
    "RedisConnectionManager",
    "canonical_name",
    # Records
    "RedisAction",
    "RecordKey",
    "KeyCodec",
    "OwnerScopedKeyCodec",
    "RecordCodec",
    "ScanFetchEngine",
    # Filters
    "KeyValuePredicate",
    "KeyValueFilterTranslator",
    "translate",
    # Bridging
    "BridgeDispatcher",
    "BridgeRoute",
    "BridgeStrategy",
    "CollectionBridgeStrategy",
    "DirectIdBridge",
    "OwnerScopedBridge",
    # Exceptions
    "RedisError",
    "RedisConnectionError",
    "RedisStoreError",
    "MalformedKeyError",
    "UnsupportedFilterShapeError",
]
