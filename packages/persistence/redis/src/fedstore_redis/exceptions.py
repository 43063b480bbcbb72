"""Redis-specific exceptions for fedstore-redis."""

from __future__ import annotations

from typing import Any

from fedstore_core.primitives.exceptions import (
    PersistenceError,
    UnsupportedOperationError,
)


class RedisError(PersistenceError):
    """Base class for all Redis-related persistence errors."""


class RedisConnectionError(RedisError):
    """Raised when connectivity to Redis fails."""


class RedisStoreError(RedisError):
    """Raised when the Redis client fails while reading a namespace."""


class MalformedKeyError(RedisError):
    """Raised when a stored hash field does not follow the key layout.

    This is data corruption in the store, not a caller mistake.
    """

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Malformed record key {key!r}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MALFORMED_KEY",
            "key": self.key,
            "reason": self.reason,
        }


class UnsupportedFilterShapeError(UnsupportedOperationError):
    """Raised when a compound filter reaches a single-predicate backend."""

    def __init__(self, node_kind: str) -> None:
        self.node_kind = node_kind
        super().__init__(
            f"Unsupported filter shape '{node_kind}': only a single predicate "
            f"can be evaluated against the key-value store"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_FILTER_SHAPE",
            "node": self.node_kind,
        }
