"""Tests for the key-value filter translator."""

from __future__ import annotations

import pytest

from fedstore_core.primitives.exceptions import UnsupportedOperationError
from fedstore_redis import (
    KeyValueFilterTranslator,
    KeyValuePredicate,
    UnsupportedFilterShapeError,
    translate,
)
from fedstore_specifications import (
    AndSpecification,
    AttributeSpecification,
    SpecificationOperator,
)

OWNER = AttributeSpecification("user_id", SpecificationOperator.IN, ["A1"])
RECORD = AttributeSpecification("id", SpecificationOperator.EQ, "r1")


def test_single_leaf_translates():
    assert translate(OWNER) == KeyValuePredicate(
        "user_id", SpecificationOperator.IN, ("A1",)
    )


def test_string_operator_leaf_translates():
    spec = AttributeSpecification("user_id", "=", "A2")
    assert translate(spec) == KeyValuePredicate("user_id", "=", ("A2",))


@pytest.mark.parametrize(
    ("spec", "node"),
    [
        (OWNER & RECORD, "and"),
        (OWNER | RECORD, "or"),
        (~OWNER, "not"),
        # a single-child composite still is a composite
        (AndSpecification(OWNER), "and"),
        (~(OWNER | RECORD), "not"),
    ],
)
def test_compound_filters_are_rejected(spec, node):
    with pytest.raises(UnsupportedFilterShapeError) as exc_info:
        translate(spec)

    assert exc_info.value.node_kind == node
    assert exc_info.value.to_dict() == {
        "error": "UNSUPPORTED_FILTER_SHAPE",
        "node": node,
    }


def test_non_specification_is_rejected():
    with pytest.raises(UnsupportedFilterShapeError, match="'dict'"):
        translate({"op": "=", "attr": "user_id", "val": "A1"})


def test_shape_error_is_an_unsupported_operation():
    with pytest.raises(UnsupportedOperationError):
        translate(OWNER | RECORD)
    with pytest.raises(NotImplementedError):
        translate(OWNER | RECORD)


def test_translator_is_reusable():
    translator = KeyValueFilterTranslator()
    first = translator.visit(OWNER)
    second = translator.visit(OWNER)
    assert first == second
