"""Tests for EntityDictionary."""

from __future__ import annotations

from typing import Optional

import pytest

from fedstore_core.adapters.memory.dictionary import EntityDictionary
from fedstore_core.domain.entity import Entity
from fedstore_core.primitives.exceptions import RelationNotFoundError


class Tag(Entity[str]):
    label: str = ""


class Note(Entity[str]):
    text: str = ""


class Author(Entity[int]):
    name: str = ""
    favourite_tag_id: str | None = None
    favourite_tag: Tag | None = None
    pinned: Optional[Note] = None  # noqa: UP007
    tags: list[Tag] = []
    notes: tuple[Note, ...] = ()


class TestEntityDictionary:
    @pytest.fixture
    def dictionary(self) -> EntityDictionary:
        d = EntityDictionary()
        d.bind_entity(Author)
        d.bind_entity(Tag)
        return d

    def test_bind_entity(self, dictionary: EntityDictionary) -> None:
        assert dictionary.is_bound(Author)
        assert dictionary.is_bound(Tag)
        assert not dictionary.is_bound(Note)
        assert dictionary.bound_entities == frozenset({Author, Tag})

    @pytest.mark.parametrize(
        ("relation", "expected"),
        [
            ("favourite_tag", Tag),
            ("pinned", Note),
            ("tags", Tag),
            ("notes", Note),
        ],
    )
    def test_resolves_relation_from_annotations(
        self, dictionary: EntityDictionary, relation: str, expected: type
    ) -> None:
        assert dictionary.get_parameterized_type(Author, relation) is expected

    def test_accepts_instances(self, dictionary: EntityDictionary) -> None:
        author = Author(id=1, name="Ann")
        assert dictionary.get_parameterized_type(author, "tags") is Tag

    def test_unknown_relation(self, dictionary: EntityDictionary) -> None:
        with pytest.raises(RelationNotFoundError, match="no relation named 'missing'"):
            dictionary.get_parameterized_type(Author, "missing")

    def test_scalar_field_is_not_a_relation(self, dictionary: EntityDictionary) -> None:
        with pytest.raises(RelationNotFoundError):
            dictionary.get_parameterized_type(Author, "name")
        with pytest.raises(RelationNotFoundError):
            dictionary.get_parameterized_type(Author, "favourite_tag_id")

    def test_explicit_relation_takes_precedence(
        self, dictionary: EntityDictionary
    ) -> None:
        dictionary.bind_relation(Author, "tags", Note)
        dictionary.bind_relation(Author, "drafts", Note)

        assert dictionary.get_parameterized_type(Author, "tags") is Note
        assert dictionary.get_parameterized_type(Author, "drafts") is Note

    def test_clear(self, dictionary: EntityDictionary) -> None:
        dictionary.bind_relation(Author, "drafts", Note)
        dictionary.clear()

        assert not dictionary.is_bound(Author)
        with pytest.raises(RelationNotFoundError):
            dictionary.get_parameterized_type(Author, "drafts")
