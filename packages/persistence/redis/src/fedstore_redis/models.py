"""Entities materialized from Redis hashes."""

from __future__ import annotations

from fedstore_core.domain.entity import Entity


class RedisAction(Entity[str]):
    """An action record owned by a user; stored as ``user<owner>:<id> -> description``."""

    description: str
