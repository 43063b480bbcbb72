"""Entity base class with Generic ID support."""

from __future__ import annotations

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict

ID = TypeVar("ID", str, int, UUID)


class Entity(BaseModel, Generic[ID]):
    """Base class for every entity a data store can materialize.

    Generic over ``ID`` to support UUID, int, or str primary keys.

    Usage::

        class RedisAction(Entity[str]):
            description: str

        action = RedisAction(id="r1", description="buy milk")

    Relationship fields are ordinary pydantic fields annotated with the
    target entity type (``Other``, ``Other | None`` or ``list[Other]``);
    :class:`~fedstore_core.adapters.memory.EntityDictionary` reads those
    annotations to resolve relation targets.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: ID
