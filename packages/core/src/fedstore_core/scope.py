"""RequestScope — per-request context handed to every store call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .ports.dictionary import IEntityDictionary


@dataclass(frozen=True)
class RequestScope:
    """
    Immutable context of one federated request.

    Attributes:
        dictionary: Type-metadata service shared by every store.
        user: Opaque principal of the caller (``None`` for anonymous).
    """

    dictionary: IEntityDictionary
    user: Any | None = None
