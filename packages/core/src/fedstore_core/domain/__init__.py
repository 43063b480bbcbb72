"""Domain primitives: entities and specifications."""

from __future__ import annotations

from .entity import Entity
from .specification import ISpecification

__all__: list[str] = [
    "Entity",
    "ISpecification",
]
