"""ScanFetchEngine — full-hash scan with a key predicate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Literal

from redis.exceptions import RedisError as RedisClientError

from .codec import to_text
from .exceptions import MalformedKeyError, RedisStoreError

if TYPE_CHECKING:
    from collections.abc import Callable

    from fedstore_core.ports.key_value import IKeyValueClient

    from .codec import RecordCodec

logger = logging.getLogger("fedstore.redis.fetch")

MalformedPolicy = Literal["raise", "skip"]


class ScanFetchEngine:
    """
    Reads a whole namespace hash and decodes the entries a predicate keeps.

    One ``HGETALL`` per call; results follow the store's iteration order,
    which Redis does not guarantee. The engine keeps no state between calls
    and never retries.

    ``on_malformed`` decides what an entry the codec cannot parse (or whose
    bytes are not UTF-8) does:
    ``"raise"`` aborts the fetch with :class:`MalformedKeyError`, ``"skip"``
    logs a warning and drops the entry.
    """

    def __init__(
        self,
        client: IKeyValueClient,
        codec: RecordCodec[Any],
        *,
        on_malformed: MalformedPolicy = "raise",
    ) -> None:
        if on_malformed not in ("raise", "skip"):
            raise ValueError(f"on_malformed must be 'raise' or 'skip', not {on_malformed!r}")
        self._client = client
        self._codec = codec
        self._on_malformed = on_malformed

    @property
    def codec(self) -> RecordCodec[Any]:
        return self._codec

    def fetch(self, namespace: str, predicate: Callable[[str], bool]) -> list[Any]:
        try:
            entries = self._client.hgetall(namespace)
        except RedisClientError as e:
            raise RedisStoreError(f"HGETALL {namespace} failed: {e}") from e

        logger.debug("Scanned %d entries under %s", len(entries), namespace)

        records: list[Any] = []
        for raw_key, raw_value in entries.items():
            try:
                key = to_text(raw_key)
                if predicate(key):
                    records.append(self._codec.decode(key, raw_value))
            except MalformedKeyError as e:
                if self._on_malformed == "raise":
                    raise
                logger.warning(
                    "Skipping malformed record %r in %s: %s", raw_key, namespace, e.reason
                )
        return records
