"""Tests for Sorting and Pagination."""

from __future__ import annotations

import dataclasses

import pytest

from fedstore_specifications import Pagination, Sorting


def test_sorting_defaults_to_no_order():
    assert Sorting().order_by == ()
    assert Sorting().as_pairs() == []


def test_sorting_of_and_pairs():
    sorting = Sorting.of("-created_at", "name")

    assert sorting.order_by == ("-created_at", "name")
    assert sorting.as_pairs() == [("created_at", "desc"), ("name", "asc")]
    assert sorting.to_dict() == {"order_by": ["-created_at", "name"]}


def test_sorting_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Sorting.of("name").order_by = ()  # type: ignore[misc]


def test_pagination_defaults():
    pagination = Pagination()
    assert pagination.limit is None
    assert pagination.offset == 0
    assert pagination.to_dict() == {"offset": 0}


def test_pagination_to_dict_with_limit():
    assert Pagination(limit=10, offset=20).to_dict() == {"offset": 20, "limit": 10}


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [({"limit": -1}, "limit"), ({"offset": -5}, "offset")],
)
def test_pagination_rejects_negative_values(kwargs, message):
    with pytest.raises(ValueError, match=message):
        Pagination(**kwargs)
