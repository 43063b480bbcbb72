"""Record key layout and hash entry <-> entity decoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

from .exceptions import MalformedKeyError

TModel = TypeVar("TModel", bound=BaseModel)


@dataclass(frozen=True)
class RecordKey:
    """Structured form of a hash field name.

    Attributes:
        namespace: Fixed per-relation prefix (``"user"``).
        owner_id: Identifier of the owning parent entity.
        record_id: Identifier of the record itself.
    """

    namespace: str
    owner_id: str
    record_id: str


@runtime_checkable
class KeyCodec(Protocol):
    """Strategy for laying out record keys of one bridged relation."""

    def owner_prefix(self, owner_id: Any) -> str:
        """Return the leading part shared by every key of ``owner_id``."""
        ...

    def scope_prefix(self, owner_id: Any) -> str:
        """Return ``owner_prefix`` plus the separator."""
        ...

    def compose(self, owner_id: Any, record_id: Any) -> str:
        """Return the full key of ``record_id`` owned by ``owner_id``."""
        ...

    def parse(self, raw: str) -> RecordKey: ...


class OwnerScopedKeyCodec(KeyCodec):
    """
    ``<namespace><owner_id><separator><record_id>`` keys.

    Parsing splits on the *first* separator, so record ids may themselves
    contain the separator (``user7:a:b`` has record id ``a:b``) while owner
    ids may not: building a prefix for such an owner raises ``ValueError``.
    """

    def __init__(self, namespace: str = "user", separator: str = ":") -> None:
        if not separator:
            raise ValueError("separator must not be empty")
        self.namespace = namespace
        self.separator = separator

    def owner_prefix(self, owner_id: Any) -> str:
        owner = str(owner_id)
        if self.separator in owner:
            raise ValueError(
                f"Owner id {owner!r} must not contain the separator {self.separator!r}"
            )
        return f"{self.namespace}{owner}"

    def scope_prefix(self, owner_id: Any) -> str:
        return f"{self.owner_prefix(owner_id)}{self.separator}"

    def compose(self, owner_id: Any, record_id: Any) -> str:
        return f"{self.scope_prefix(owner_id)}{record_id}"

    def parse(self, raw: str) -> RecordKey:
        head, sep, record_id = raw.partition(self.separator)
        if not sep:
            raise MalformedKeyError(raw, f"missing separator {self.separator!r}")
        if not head.startswith(self.namespace):
            raise MalformedKeyError(raw, f"missing namespace {self.namespace!r}")
        return RecordKey(
            namespace=self.namespace,
            owner_id=head[len(self.namespace) :],
            record_id=record_id,
        )

    def __repr__(self) -> str:
        return (
            f"OwnerScopedKeyCodec(namespace={self.namespace!r}, "
            f"separator={self.separator!r})"
        )


def to_text(raw: bytes | str) -> str:
    """Decode a Redis reply as UTF-8; undecodable bytes count as a malformed record."""
    if not isinstance(raw, bytes):
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedKeyError(repr(raw), "invalid utf-8") from e


class RecordCodec(Generic[TModel]):
    """Decodes one hash entry into ``model_cls``.

    The record id comes from the key, the value is stored verbatim in
    ``value_field``.
    """

    def __init__(
        self,
        model_cls: type[TModel],
        key_codec: KeyCodec | None = None,
        *,
        value_field: str = "description",
    ) -> None:
        self.model_cls = model_cls
        self.key_codec = key_codec or OwnerScopedKeyCodec()
        self.value_field = value_field

    def parse_key(self, key: bytes | str) -> RecordKey:
        return self.key_codec.parse(to_text(key))

    def decode(self, key: bytes | str, value: bytes | str) -> TModel:
        record_key = self.parse_key(key)
        return self.model_cls.model_validate(
            {"id": record_key.record_id, self.value_field: to_text(value)}
        )

    def encode_owner_prefix(self, owner_id: Any) -> str:
        return self.key_codec.owner_prefix(owner_id)
