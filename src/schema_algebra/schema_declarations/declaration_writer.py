"""Rendering of schemas back to declaration data and compact text."""

from __future__ import annotations

import json
from typing import Any

import yaml

from schema_algebra.schema_model.schema_nodes import (
    NULL,
    Field,
    Opaque,
    OpaqueKind,
    Primitive,
    Record,
    Schema,
    Sequence,
    Union,
)

from .declaration_loader import FIELD_FLAGS

OUTPUT_FORMATS = ("yaml", "json", "text")


def to_declaration(schema: Schema) -> Any:
    """Return plain data that `parse_declarations` reads back to an equal schema."""
    if isinstance(schema, Primitive):
        return schema.kind.value
    if isinstance(schema, Opaque):
        if schema.kind is OpaqueKind.CALLABLE and schema.name is None:
            return "opaque"
        declaration: dict[str, Any] = {"type": "opaque", "kind": schema.kind.value}
        if schema.name is not None:
            declaration["name"] = schema.name
        return declaration
    if isinstance(schema, Sequence):
        declaration = {"type": "sequence", "element": to_declaration(schema.element)}
        if schema.readonly:
            declaration["readonly"] = True
        return declaration
    if isinstance(schema, Union):
        if not schema.members:
            return "never"
        return {
            "type": "union",
            "members": [to_declaration(member) for member in _ordered_members(schema)],
        }
    if isinstance(schema, Record):
        return {
            "type": "record",
            "fields": {name: _field_declaration(value) for name, value in schema.fields},
        }
    raise TypeError(f"Unsupported schema node: {schema!r}")


def render_text(schema: Schema) -> str:
    """Render a one-line notation such as `{first?: {name: string}}`."""
    if isinstance(schema, Primitive):
        return schema.kind.value
    if isinstance(schema, Opaque):
        return schema.name or schema.kind.value
    if isinstance(schema, Sequence):
        element = render_text(schema.element)
        if isinstance(schema.element, Union) and len(schema.element.members) > 1:
            element = f"({element})"
        return f"readonly {element}[]" if schema.readonly else f"{element}[]"
    if isinstance(schema, Union):
        if not schema.members:
            return "never"
        return " | ".join(render_text(member) for member in _ordered_members(schema))
    if isinstance(schema, Record):
        return "{" + ", ".join(_render_field(name, value) for name, value in schema.fields) + "}"
    raise TypeError(f"Unsupported schema node: {schema!r}")


def format_schema(schema: Schema, output_format: str) -> str:
    """Serialize a schema for display in the requested output format."""
    if output_format == "text":
        return render_text(schema)
    declaration = to_declaration(schema)
    if output_format == "json":
        return json.dumps(declaration, indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(declaration, sort_keys=False).rstrip("\n")
    raise ValueError(f"Unsupported output format: {output_format}")


def _field_declaration(value: Field) -> Any:
    flags = {
        flag: True
        for flag, enabled in (
            ("optional", value.optional),
            ("nullable", value.nullable),
            ("readonly", value.readonly),
        )
        if enabled
    }
    shape = to_declaration(value.shape)
    shadows_flags = isinstance(shape, dict) and any(flag in shape for flag in FIELD_FLAGS)
    if not flags and not shadows_flags:
        return shape
    return {"shape": shape, **flags}


def _render_field(name: str, value: Field) -> str:
    prefix = "readonly " if value.readonly else ""
    marker = "?" if value.optional else ""
    shape = render_text(value.shape)
    if value.nullable and not _admits_null(value.shape):
        shape = f"{shape} | null"
    return f"{prefix}{name}{marker}: {shape}"


def _admits_null(shape: Schema) -> bool:
    if isinstance(shape, Union):
        return NULL in shape.members
    return shape == NULL


def _ordered_members(schema: Union) -> list[Schema]:
    return sorted(schema.members, key=render_text)
