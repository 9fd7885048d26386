"""Schema rendering tests."""

from __future__ import annotations

import json

import pytest
import yaml
from schema_algebra.deep_transform.deep_traversal import deep_partial
from schema_algebra.schema_declarations.declaration_loader import parse_declarations
from schema_algebra.schema_declarations.declaration_writer import (
    format_schema,
    render_text,
    to_declaration,
)
from schema_algebra.schema_model.schema_nodes import (
    CALLABLE,
    NEVER,
    NULL,
    NUMBER,
    STRING,
    Field,
    Opaque,
    OpaqueKind,
    Sequence,
    build_record,
    union_of,
)

NESTED = build_record({"first": build_record({"second": build_record({"name": STRING})})})


def test_render_text_marks_optional_fields() -> None:
    assert render_text(deep_partial(NESTED)) == "{first?: {second?: {name?: string}}}"


def test_render_text_covers_every_variant() -> None:
    record = build_record(
        {
            "id": Field(NUMBER, readonly=True),
            "tags": Sequence(union_of(STRING, NULL), readonly=True),
            "note": Field(STRING, nullable=True),
            "run": CALLABLE,
            "never": NEVER,
        }
    )

    assert render_text(record) == (
        "{readonly id: number, tags: readonly (null | string)[], "
        "note: string | null, run: callable, never: never}"
    )


def test_to_declaration_uses_shorthands_for_plain_fields() -> None:
    record = build_record({"name": STRING, "age": Field(NUMBER, optional=True)})

    declaration = to_declaration(record)

    assert declaration == {
        "type": "record",
        "fields": {"name": "string", "age": {"shape": "number", "optional": True}},
    }


def test_declaration_output_is_read_back_to_an_equal_schema() -> None:
    schema = build_record(
        {
            "items": Sequence(build_record({"id": NUMBER}), readonly=True),
            "status": Field(union_of(STRING, NULL), optional=True, nullable=True),
            "created": Opaque(OpaqueKind.CONSTRUCTOR, name="Date"),
            "run": CALLABLE,
            "blocked": Field(NEVER, optional=True),
        }
    )
    text = format_schema(schema, "yaml")

    catalog = parse_declarations({"schemas": {"Derived": yaml.safe_load(text)}})

    assert catalog.get("Derived") == schema


def test_json_format_is_valid_json() -> None:
    rendered = format_schema(build_record({"name": STRING}), "json")

    assert json.loads(rendered) == {"type": "record", "fields": {"name": "string"}}


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported output format"):
        format_schema(STRING, "xml")


def test_nullable_field_with_null_member_renders_null_once() -> None:
    record = build_record(
        {
            "note": Field(union_of(STRING, NULL), nullable=True),
            "gone": Field(NULL, nullable=True),
        }
    )

    assert render_text(record) == "{note: null | string, gone: null}"
