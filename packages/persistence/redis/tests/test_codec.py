"""Tests for record key layout and entry decoding."""

from __future__ import annotations

import pytest

from fedstore_core.domain.entity import Entity
from fedstore_redis import (
    KeyCodec,
    MalformedKeyError,
    OwnerScopedKeyCodec,
    RecordCodec,
    RecordKey,
    RedisAction,
)


class Note(Entity[str]):
    body: str


@pytest.fixture
def key_codec() -> OwnerScopedKeyCodec:
    return OwnerScopedKeyCodec()


class TestOwnerScopedKeyCodec:
    def test_prefixes_and_compose(self, key_codec):
        assert key_codec.owner_prefix("A1") == "userA1"
        assert key_codec.scope_prefix("A1") == "userA1:"
        assert key_codec.compose("A1", "r1") == "userA1:r1"

    def test_parse(self, key_codec):
        assert key_codec.parse("userA1:r1") == RecordKey("user", "A1", "r1")

    def test_parse_splits_on_first_separator(self, key_codec):
        parsed = key_codec.parse("userA1:a:b")
        assert parsed.owner_id == "A1"
        assert parsed.record_id == "a:b"

    def test_parse_allows_empty_parts(self, key_codec):
        assert key_codec.parse("user:") == RecordKey("user", "", "")

    def test_missing_separator(self, key_codec):
        with pytest.raises(MalformedKeyError, match="missing separator") as exc_info:
            key_codec.parse("userA1")
        assert exc_info.value.key == "userA1"

    def test_missing_namespace(self, key_codec):
        with pytest.raises(MalformedKeyError, match="missing namespace"):
            key_codec.parse("adminA1:r1")

    def test_custom_layout(self):
        codec = OwnerScopedKeyCodec(namespace="acct-", separator="|")
        assert codec.compose(7, "x") == "acct-7|x"
        assert codec.parse("acct-7|x|y") == RecordKey("acct-", "7", "x|y")

    def test_owner_with_separator_rejected(self, key_codec):
        for build in (key_codec.owner_prefix, key_codec.scope_prefix):
            with pytest.raises(ValueError, match="must not contain the separator"):
                build("A:1")
        with pytest.raises(ValueError):
            key_codec.compose("A:1", "r1")

    def test_owner_check_uses_configured_separator(self):
        codec = OwnerScopedKeyCodec(separator="|")
        assert codec.compose("A:1", "r1") == "userA:1|r1"

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError):
            OwnerScopedKeyCodec(separator="")

    def test_satisfies_protocol(self, key_codec):
        assert isinstance(key_codec, KeyCodec)


class TestRecordCodec:
    def test_decode(self):
        codec = RecordCodec(RedisAction)
        assert codec.decode("userA1:r1", "buy milk") == RedisAction(
            id="r1", description="buy milk"
        )

    def test_decode_bytes(self):
        codec = RecordCodec(RedisAction)
        action = codec.decode(b"userA1:r1", "café".encode())
        assert action.id == "r1"
        assert action.description == "café"

    def test_decode_keeps_colons_in_record_id(self):
        action = RecordCodec(RedisAction).decode("userA1:a:b", "x")
        assert action.id == "a:b"

    def test_custom_value_field_and_key_codec(self):
        codec = RecordCodec(
            Note,
            OwnerScopedKeyCodec(namespace="team", separator="/"),
            value_field="body",
        )
        assert codec.decode("teamT1/n1", "hello") == Note(id="n1", body="hello")
        assert codec.encode_owner_prefix("T1") == "teamT1"

    def test_decode_invalid_utf8(self):
        codec = RecordCodec(RedisAction)
        with pytest.raises(MalformedKeyError, match="invalid utf-8"):
            codec.decode(b"userA1:\xff", "x")
        with pytest.raises(MalformedKeyError, match="invalid utf-8"):
            codec.decode("userA1:r1", b"\xff")

    def test_decode_malformed_key(self):
        with pytest.raises(MalformedKeyError):
            RecordCodec(RedisAction).decode("garbage", "x")

    def test_malformed_key_to_dict(self):
        err = MalformedKeyError("garbage", "missing separator ':'")
        assert str(err) == "Malformed record key 'garbage': missing separator ':'"
        assert err.to_dict() == {
            "error": "MALFORMED_KEY",
            "key": "garbage",
            "reason": "missing separator ':'",
        }
