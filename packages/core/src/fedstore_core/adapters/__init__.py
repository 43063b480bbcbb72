"""Adapters: in-memory implementations for tests and single-process setups."""

from __future__ import annotations

from .memory import EntityDictionary, MultiplexManager, MultiplexTransaction

__all__ = [
    "EntityDictionary",
    "MultiplexManager",
    "MultiplexTransaction",
]
