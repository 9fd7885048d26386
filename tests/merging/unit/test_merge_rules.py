"""Merge engine tests."""

from __future__ import annotations

import pytest
from schema_algebra.merging.exclusive_variants import ExclusiveUnion
from schema_algebra.merging.merge_rules import merge, merge_exclusive, merge_override
from schema_algebra.schema_model.schema_errors import StructuralPreconditionError
from schema_algebra.schema_model.schema_nodes import (
    BOOLEAN,
    NEVER,
    NUMBER,
    STRING,
    Field,
    Sequence,
    Union,
    build_record,
)

PROPS = build_record({"name": STRING, "age": NUMBER, "visible": BOOLEAN})
NEW_PROPS = build_record({"age": STRING, "other": STRING})


def test_merge_override_takes_colliding_shapes_from_the_override() -> None:
    merged = merge_override(PROPS, NEW_PROPS)

    assert merged == build_record({"name": STRING, "age": STRING, "visible": BOOLEAN})
    assert merged.field_names == ("name", "age", "visible")


def test_merge_override_keeps_override_field_flags() -> None:
    merged = merge_override(PROPS, build_record({"age": Field(NUMBER, optional=True)}))

    assert merged.get_field("age").optional is True


def test_merge_assigns_and_appends_new_fields() -> None:
    merged = merge(PROPS, NEW_PROPS)

    assert merged == build_record(
        {"name": STRING, "age": STRING, "visible": BOOLEAN, "other": STRING}
    )
    assert merged.field_names == ("name", "age", "visible", "other")


@pytest.mark.parametrize(
    "record",
    [build_record({}), PROPS, NEW_PROPS, build_record({"items": Sequence(PROPS)})],
)
def test_merge_override_with_itself_is_identity(record) -> None:
    assert merge_override(record, record) == record


@pytest.mark.parametrize(
    ("left", "right"),
    [(PROPS, NEW_PROPS), (NEW_PROPS, PROPS), (PROPS, build_record({})), (PROPS, PROPS)],
)
def test_merge_field_names_are_the_union_of_both_sides(left, right) -> None:
    merged = merge(left, right)

    assert set(merged.field_names) == set(left.field_names) | set(right.field_names)


def test_merge_exclusive_builds_two_variants_with_impossible_fields() -> None:
    first = build_record({"a": BOOLEAN, "shared": NUMBER})
    second = build_record({"b": STRING, "shared": STRING})

    exclusive = merge_exclusive(first, second)

    assert isinstance(exclusive, ExclusiveUnion)
    assert isinstance(exclusive, Union)
    assert len(exclusive.members) == 2
    assert exclusive.first == build_record(
        {"a": BOOLEAN, "shared": NUMBER, "b": Field(NEVER, optional=True)}
    )
    assert exclusive.second == build_record(
        {"b": STRING, "shared": STRING, "a": Field(NEVER, optional=True)}
    )
    assert exclusive.first_exclusive == {"a"}
    assert exclusive.second_exclusive == {"b"}


@pytest.mark.parametrize("operation", [merge_override, merge, merge_exclusive])
def test_merges_reject_non_record_inputs(operation) -> None:
    with pytest.raises(StructuralPreconditionError):
        operation(PROPS, STRING)
    with pytest.raises(StructuralPreconditionError):
        operation(Sequence(STRING), PROPS)


def test_merges_do_not_mutate_inputs() -> None:
    merge(PROPS, NEW_PROPS)
    merge_exclusive(PROPS, NEW_PROPS)

    assert PROPS.field_names == ("name", "age", "visible")
    assert NEW_PROPS.field_names == ("age", "other")
