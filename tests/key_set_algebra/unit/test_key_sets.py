"""Key-set algebra tests."""

from __future__ import annotations

import pytest
from schema_algebra.key_set_algebra.key_sets import (
    complement,
    function_keys,
    intersect,
    key_set,
    key_union,
    non_function_keys,
    subtract,
    symmetric_difference,
)
from schema_algebra.schema_model.schema_errors import (
    StructuralPreconditionError,
    UnknownKeyError,
)
from schema_algebra.schema_model.schema_nodes import (
    CALLABLE,
    NUMBER,
    STRING,
    Sequence,
    build_record,
)

PROPS = build_record({"name": STRING, "age": NUMBER, "visible": STRING})
DEFAULTS = build_record({"age": NUMBER, "other": STRING})


def test_intersect_is_symmetric() -> None:
    assert intersect(PROPS, DEFAULTS) == {"age"}
    assert intersect(DEFAULTS, PROPS) == {"age"}


def test_subtract_depends_on_argument_order() -> None:
    assert subtract(PROPS, DEFAULTS) == {"name", "visible"}
    assert subtract(DEFAULTS, PROPS) == {"other"}


def test_symmetric_difference_keeps_names_in_exactly_one_side() -> None:
    assert symmetric_difference({"1", "2", "3"}, {"2", "3", "4"}) == {"1", "4"}
    assert symmetric_difference(PROPS, DEFAULTS) == symmetric_difference(DEFAULTS, PROPS)


def test_key_union_combines_both_sides() -> None:
    assert key_union(PROPS, DEFAULTS) == {"name", "age", "visible", "other"}


def test_complement_returns_names_outside_the_subset() -> None:
    assert complement({"1", "2", "3"}, {"2", "3"}) == {"1"}
    assert complement(PROPS, build_record({"age": NUMBER})) == {"name", "visible"}


def test_complement_does_not_collapse_to_empty_set() -> None:
    # A degenerate A \ A definition would always be empty.
    assert complement(PROPS, set()) == {"name", "age", "visible"}


def test_complement_rejects_names_outside_universe() -> None:
    with pytest.raises(UnknownKeyError) as excinfo:
        complement(PROPS, {"age", "missing"})

    assert excinfo.value.missing == ("missing",)


def test_non_record_schema_is_rejected() -> None:
    with pytest.raises(StructuralPreconditionError):
        key_set(Sequence(STRING))
    with pytest.raises(StructuralPreconditionError):
        intersect(STRING, PROPS)


def test_bare_string_is_not_treated_as_name_collection() -> None:
    with pytest.raises(StructuralPreconditionError):
        key_set("name")


def test_function_keys_split_callables_from_data() -> None:
    mixed = build_record({"name": STRING, "set_name": CALLABLE})

    assert function_keys(mixed) == {"set_name"}
    assert non_function_keys(mixed) == {"name"}
