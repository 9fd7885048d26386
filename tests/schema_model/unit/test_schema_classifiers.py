"""Shape classifier tests."""

from __future__ import annotations

from schema_algebra.schema_model.schema_classifiers import (
    is_callable,
    is_constructor,
    is_never,
    is_typed_array,
    non_nullable,
    non_undefined,
    of_kinds,
)
from schema_algebra.schema_model.schema_nodes import (
    BOOLEAN,
    CALLABLE,
    NEVER,
    NULL,
    NUMBER,
    STRING,
    UNDEFINED,
    Opaque,
    OpaqueKind,
    Sequence,
    build_record,
    union_of,
)


def test_of_kinds_accepts_primitives_and_fully_covered_unions() -> None:
    is_string_or_number = of_kinds("string", "number")

    assert is_string_or_number(STRING)
    assert is_string_or_number(union_of(STRING, NUMBER))
    assert not is_string_or_number(BOOLEAN)
    assert not is_string_or_number(union_of(STRING, BOOLEAN))
    assert not is_string_or_number(Sequence(STRING))
    assert not is_string_or_number(build_record({"name": STRING}))


def test_opaque_tags_are_classified_by_kind() -> None:
    constructor = Opaque(OpaqueKind.CONSTRUCTOR, name="Date")
    typed_array = Opaque(OpaqueKind.TYPED_ARRAY, name="Float64Array")

    assert is_callable(CALLABLE)
    assert not is_callable(constructor)
    assert is_constructor(constructor)
    assert is_typed_array(typed_array)


def test_non_undefined_only_strips_undefined() -> None:
    assert non_undefined(union_of(STRING, NULL, UNDEFINED)) == union_of(STRING, NULL)
    assert non_undefined(UNDEFINED) == NEVER


def test_non_nullable_strips_null_and_undefined() -> None:
    assert non_nullable(union_of(STRING, NULL, UNDEFINED)) == STRING
    assert non_nullable(NULL) == NEVER
    assert is_never(non_nullable(union_of(NULL, UNDEFINED)))
    assert non_nullable(CALLABLE) == CALLABLE
