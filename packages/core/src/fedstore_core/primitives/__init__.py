"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    BridgeConfigurationError,
    DataStoreError,
    DomainError,
    EntityNotFoundError,
    FedStoreError,
    InfrastructureError,
    NotFoundError,
    PersistenceError,
    RelationNotFoundError,
    UnexpectedTypeError,
    UnsupportedBridgeError,
    UnsupportedOperationError,
)

__all__ = [
    "BridgeConfigurationError",
    "DataStoreError",
    "DomainError",
    "EntityNotFoundError",
    "FedStoreError",
    "InfrastructureError",
    "NotFoundError",
    "PersistenceError",
    "RelationNotFoundError",
    "UnexpectedTypeError",
    "UnsupportedBridgeError",
    "UnsupportedOperationError",
]
