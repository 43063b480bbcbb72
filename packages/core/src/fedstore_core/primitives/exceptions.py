"""Domain and infrastructure exceptions for fedstore-core."""

from __future__ import annotations

from typing import Any


class FedStoreError(Exception):
    """Root exception for the entire fedstore toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class DomainError(FedStoreError):
    """Base class for all domain-related errors."""


class NotFoundError(DomainError):
    """Raised when an entity or resource is not found."""


class EntityNotFoundError(NotFoundError):
    """Raised when a specific entity cannot be found by ID."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id={entity_id!r} not found")


class InfrastructureError(FedStoreError):
    """Base class for all infrastructure-related errors."""


class PersistenceError(InfrastructureError):
    """Base class for all persistence-related errors."""


# ── Data store / transaction exceptions ─────────────────────────────


class DataStoreError(PersistenceError):
    """Base class for errors raised by data store transactions."""


class UnexpectedTypeError(DataStoreError, RuntimeError):
    """Raised when a store is asked for an entity type it does not own.

    Also a ``RuntimeError`` so federation layers that only know about
    generic runtime failures still surface it.
    """

    def __init__(self, entity_cls: type[Any], store: str | None = None) -> None:
        self.entity_cls = entity_cls
        self.store = store
        where = f" from {store}" if store else ""
        super().__init__(
            f"Tried to load unexpected object{where}: {entity_cls.__qualname__}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNEXPECTED_TYPE",
            "entity_type": self.entity_cls.__qualname__,
            "store": self.store,
        }


class UnsupportedOperationError(DataStoreError, NotImplementedError):
    """Raised for operations a store never supports by design."""


class UnsupportedBridgeError(DataStoreError, RuntimeError):
    """Raised when no bridge is registered for a (parent type, relation) pair."""

    def __init__(self, parent: object, relation_name: str) -> None:
        self.parent = parent
        self.relation_name = relation_name
        super().__init__(
            f"Unsupported bridging attempted from {type(parent).__qualname__} "
            f"to relation '{relation_name}'"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_BRIDGE",
            "parent_type": type(self.parent).__qualname__,
            "relation": self.relation_name,
        }


class BridgeConfigurationError(DataStoreError):
    """Raised when a bridge table is inconsistent with the entity dictionary."""


class RelationNotFoundError(NotFoundError):
    """Raised when an entity class has no relation with the given name."""

    def __init__(self, entity_cls: type[Any], relation_name: str) -> None:
        self.entity_cls = entity_cls
        self.relation_name = relation_name
        super().__init__(
            f"{entity_cls.__qualname__} has no relation named '{relation_name}'"
        )
