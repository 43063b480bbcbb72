"""Shared fixtures for fedstore-redis tests.

The fixtures model the canonical layout: users live in some other store,
their actions live in one Redis hash keyed ``user<user id>:<action id>``.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from fedstore_core.adapters.memory import EntityDictionary, MultiplexManager
from fedstore_core.domain.entity import Entity
from fedstore_core.scope import RequestScope
from fedstore_redis import (
    BridgeDispatcher,
    DirectIdBridge,
    OwnerScopedBridge,
    RedisAction,
    RedisDataStore,
    canonical_name,
)

ACTIONS_NAMESPACE = canonical_name(RedisAction)

ACTIONS = {
    "userA1:r1": "buy milk",
    "userA2:r2": "walk dog",
    "userA1:r3": "call mom",
}


class User(Entity[str]):
    name: str = ""
    special_action_id: str | None = None
    special_action: RedisAction | None = None
    redis_actions: list[RedisAction] = []


class UserStore:
    """Stand-in for the relational store that owns ``User``."""

    def __init__(self) -> None:
        self.tx = MagicMock(name="user_tx")

    def populate_entity_dictionary(self, dictionary: Any) -> None:
        dictionary.bind_entity(User)

    def begin_transaction(self) -> Any:
        return self.tx

    def begin_read_transaction(self) -> Any:
        return self.tx


def make_client(entries: dict[Any, Any] | None = None) -> MagicMock:
    client = MagicMock(name="redis")
    client.hgetall.return_value = dict(ACTIONS if entries is None else entries)
    return client


def user_bridges() -> BridgeDispatcher:
    return (
        BridgeDispatcher()
        .register(User, "special_action", DirectIdBridge("special_action_id"))
        .register(User, "redis_actions", OwnerScopedBridge())
    )


@pytest.fixture
def client_factory():
    """Build a mock client over custom hash entries."""
    return make_client


@pytest.fixture
def client() -> MagicMock:
    return make_client()


@pytest.fixture
def user_cls() -> type[User]:
    return User


@pytest.fixture
def store(client: MagicMock) -> RedisDataStore:
    return RedisDataStore(client, bridges=user_bridges())


@pytest.fixture
def dictionary() -> EntityDictionary:
    return EntityDictionary()


@pytest.fixture
def scope(dictionary: EntityDictionary) -> RequestScope:
    return RequestScope(dictionary=dictionary)


@pytest.fixture
def manager(store: RedisDataStore, dictionary: EntityDictionary) -> MultiplexManager:
    manager = MultiplexManager(UserStore(), store)
    manager.populate_entity_dictionary(dictionary)
    return manager


@pytest.fixture
def mux(manager: MultiplexManager):
    tx = manager.begin_read_transaction()
    yield tx
    tx.close()


@pytest.fixture
def alice() -> User:
    return User(id="A1", name="Alice", special_action_id="r2")


@pytest.fixture
def carol() -> User:
    return User(id="A3", name="Carol")
