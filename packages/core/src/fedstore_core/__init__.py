"""fedstore-core — Foundation package for federated data stores.

Entity base, specification protocol, store/transaction ports and the
in-memory coordinator used to stitch stores together.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import EntityDictionary, MultiplexManager, MultiplexTransaction

# ── Domain ───────────────────────────────────────────────────────
from .domain import Entity, ISpecification

# ── Ports ────────────────────────────────────────────────────────
from .ports import (
    IBridgeableTransaction,
    IDataStore,
    IDataStoreTransaction,
    IEntityDictionary,
    IKeyValueClient,
    IMultiplexTransaction,
)

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
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
from .scope import RequestScope

__all__ = [
    # Adapters
    "EntityDictionary",
    "MultiplexManager",
    "MultiplexTransaction",
    # Domain
    "Entity",
    "ISpecification",
    # Ports
    "IBridgeableTransaction",
    "IDataStore",
    "IDataStoreTransaction",
    "IEntityDictionary",
    "IKeyValueClient",
    "IMultiplexTransaction",
    # Primitives
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
    # Scope
    "RequestScope",
]
