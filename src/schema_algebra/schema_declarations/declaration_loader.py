"""Schema declaration file loader."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from schema_algebra.schema_model.schema_errors import SchemaAlgebraError
from schema_algebra.schema_model.schema_nodes import (
    CALLABLE,
    NEVER,
    Field,
    Opaque,
    OpaqueKind,
    Primitive,
    PrimitiveKind,
    Record,
    Schema,
    Sequence,
    union_of,
)

LOGGER = logging.getLogger(__name__)

FIELD_FLAGS = ("optional", "nullable", "readonly")
_PRIMITIVE_NAMES = frozenset(kind.value for kind in PrimitiveKind)


class DeclarationError(Exception):
    """Raised when a schema declaration file is invalid."""


@dataclass(frozen=True)
class SchemaCatalog:
    """Named schemas in declaration order."""

    path: Path | None
    schemas: Mapping[str, Schema]

    def get(self, name: str) -> Schema:
        try:
            return self.schemas[name]
        except KeyError as exc:
            available = ", ".join(self.schemas) or "none"
            raise DeclarationError(
                f"Unknown schema '{name}'. Declared schemas: {available}."
            ) from exc

    def get_record(self, name: str) -> Record:
        schema = self.get(name)
        if not isinstance(schema, Record):
            raise DeclarationError(f"Schema '{name}' is not a record.")
        return schema


def load_declarations(declarations_path: Path | str) -> SchemaCatalog:
    """Load and resolve a YAML/JSON schema declaration file."""
    path = Path(declarations_path)
    if not path.exists():
        raise DeclarationError(f"Declaration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DeclarationError(f"Failed to parse declaration file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise DeclarationError("Declaration file root must be a mapping.")

    catalog = parse_declarations(parsed, path=path)
    LOGGER.debug("Loaded %d schema declaration(s) from %s", len(catalog.schemas), path)
    return catalog


def parse_declarations(document: Mapping[str, Any], *, path: Path | None = None) -> SchemaCatalog:
    """Resolve every entry of the `schemas` section, following `ref` links."""
    section = _require_mapping(document.get("schemas"), "schemas")
    for name in section:
        if not isinstance(name, str) or not name.strip():
            raise DeclarationError("Schema names must be non-empty strings.")
    resolver = _Resolver(section)
    try:
        schemas = {name: resolver.resolve(name) for name in section}
    except SchemaAlgebraError as exc:
        raise DeclarationError(str(exc)) from exc
    return SchemaCatalog(path=path, schemas=schemas)


class _Resolver:
    def __init__(self, declarations: Mapping[str, Any]) -> None:
        self._declarations = declarations
        self._resolved: dict[str, Schema] = {}
        self._resolving: list[str] = []

    def resolve(self, name: str) -> Schema:
        if name in self._resolved:
            return self._resolved[name]
        if name not in self._declarations:
            raise DeclarationError(f"Unknown schema reference: {name}")
        if name in self._resolving:
            cycle = " -> ".join([*self._resolving[self._resolving.index(name) :], name])
            raise DeclarationError(f"Cyclic schema reference: {cycle}")
        self._resolving.append(name)
        try:
            schema = self.parse_shape(self._declarations[name], name)
        finally:
            self._resolving.pop()
        self._resolved[name] = schema
        return schema

    def parse_shape(self, node: Any, label: str) -> Schema:
        if node is None:
            return Primitive(PrimitiveKind.NULL)
        if isinstance(node, str):
            return self._parse_shorthand(node.strip(), label)
        if not isinstance(node, Mapping):
            raise DeclarationError(f"{label}: shape must be a string or a mapping.")

        if "ref" in node:
            return self.resolve(_require_non_empty_string(node["ref"], f"{label}.ref"))

        shape_type = _require_non_empty_string(node.get("type"), f"{label}.type")
        if shape_type in _PRIMITIVE_NAMES:
            return Primitive(PrimitiveKind(shape_type))
        if shape_type == "never":
            return NEVER
        if shape_type == "opaque":
            return self._parse_opaque(node, label)
        if shape_type == "record":
            return self._parse_record(node, label)
        if shape_type == "sequence":
            if "element" not in node:
                raise DeclarationError(f"{label}: sequence requires an element.")
            return Sequence(
                element=self.parse_shape(node["element"], f"{label}[]"),
                readonly=_optional_bool(node.get("readonly"), f"{label}.readonly"),
            )
        if shape_type == "union":
            members = node.get("members")
            if not isinstance(members, list):
                raise DeclarationError(f"{label}.members must be a list.")
            return union_of(
                *(
                    self.parse_shape(member, f"{label}|{index}")
                    for index, member in enumerate(members)
                )
            )
        raise DeclarationError(f"{label}: unsupported shape type '{shape_type}'.")

    def _parse_shorthand(self, token: str, label: str) -> Schema:
        if token in _PRIMITIVE_NAMES:
            return Primitive(PrimitiveKind(token))
        if token in ("opaque", "callable"):
            return CALLABLE
        if token == "never":
            return NEVER
        if token in self._declarations:
            return self.resolve(token)
        raise DeclarationError(f"{label}: unknown shape '{token}'.")

    def _parse_opaque(self, node: Mapping[str, Any], label: str) -> Opaque:
        raw_kind = node.get("kind", OpaqueKind.CALLABLE.value)
        try:
            kind = OpaqueKind(raw_kind)
        except ValueError as exc:
            raise DeclarationError(f"{label}.kind: unsupported opaque kind '{raw_kind}'.") from exc
        name = node.get("name")
        if name is not None and not isinstance(name, str):
            raise DeclarationError(f"{label}.name must be a string.")
        return Opaque(kind=kind, name=name)

    def _parse_record(self, node: Mapping[str, Any], label: str) -> Record:
        raw_fields = node.get("fields")
        if raw_fields is None:
            raw_fields = {}
        fields = _require_mapping(raw_fields, f"{label}.fields")
        return Record(
            tuple(
                (str(name), self._parse_field(value, f"{label}.{name}"))
                for name, value in fields.items()
            )
        )

    def _parse_field(self, node: Any, label: str) -> Field:
        if not isinstance(node, Mapping):
            return Field(shape=self.parse_shape(node, label))
        if "shape" in node:
            field_flags = FIELD_FLAGS
            shape_node = node["shape"]
        else:
            # An inline sequence keeps `readonly` for itself.
            field_flags = tuple(
                flag
                for flag in FIELD_FLAGS
                if not (flag == "readonly" and node.get("type") == "sequence")
            )
            shape_node = {key: value for key, value in node.items() if key not in field_flags}
        flags = {flag: _optional_bool(node.get(flag), f"{label}.{flag}") for flag in field_flags}
        return Field(shape=self.parse_shape(shape_node, label), **flags)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DeclarationError(f"Declaration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise DeclarationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise DeclarationError(f"{field_name} must not be empty.")
    return stripped


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DeclarationError(f"{field_name} must be a boolean.")
    return value
