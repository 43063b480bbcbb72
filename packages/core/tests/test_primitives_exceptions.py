"""Tests for the core exception hierarchy."""

from __future__ import annotations

from fedstore_core.domain.entity import Entity
from fedstore_core.primitives.exceptions import (
    DataStoreError,
    EntityNotFoundError,
    FedStoreError,
    PersistenceError,
    RelationNotFoundError,
    UnexpectedTypeError,
    UnsupportedBridgeError,
    UnsupportedOperationError,
)


class Widget(Entity[str]):
    pass


def test_unexpected_type_is_a_runtime_error() -> None:
    err = UnexpectedTypeError(Widget, store="redis")

    assert isinstance(err, RuntimeError)
    assert isinstance(err, DataStoreError)
    assert isinstance(err, PersistenceError)
    assert "Widget" in str(err)
    assert "redis" in str(err)
    assert err.to_dict() == {
        "error": "UNEXPECTED_TYPE",
        "entity_type": "Widget",
        "store": "redis",
    }


def test_unsupported_operation_is_not_implemented() -> None:
    err = UnsupportedOperationError("nope")

    assert isinstance(err, NotImplementedError)
    assert isinstance(err, FedStoreError)
    assert err.to_dict() == {"error": "UnsupportedOperationError", "message": "nope"}


def test_unsupported_bridge_carries_parent_and_relation() -> None:
    parent = Widget(id="w1")
    err = UnsupportedBridgeError(parent, "gadgets")

    assert isinstance(err, RuntimeError)
    assert err.parent is parent
    assert err.relation_name == "gadgets"
    assert "gadgets" in str(err)
    assert err.to_dict()["parent_type"] == "Widget"


def test_not_found_errors() -> None:
    err = EntityNotFoundError("Widget", "w1")
    assert str(err) == "Widget with id='w1' not found"

    rel = RelationNotFoundError(Widget, "gadgets")
    assert rel.entity_cls is Widget
    assert "gadgets" in str(rel)
