"""IKeyValueClient — the slice of a key-value client the stores consume."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class IKeyValueClient(Protocol):
    """
    Read-only hash access.

    ``redis.Redis`` satisfies this protocol structurally. Keys and values
    are ``bytes`` unless the client was created with ``decode_responses``.
    """

    def hgetall(self, name: str) -> Mapping[bytes | str, bytes | str]:
        """Return the full field/value mapping stored under ``name``."""
        ...
