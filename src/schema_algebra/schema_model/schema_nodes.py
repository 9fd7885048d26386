"""Schema model entities.

A schema is an immutable tree built from five node variants: ``Primitive``,
``Record``, ``Sequence``, ``Opaque`` and ``Union``. Nodes are frozen
dataclasses, so a derived schema may share any subtree with its source.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from .schema_errors import DuplicateFieldError, UnknownKeyError


class PrimitiveKind(str, Enum):
    """Leaf value kinds."""

    NULL = "null"
    UNDEFINED = "undefined"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"


class OpaqueKind(str, Enum):
    """Tags for leaves that are never decomposed."""

    CALLABLE = "callable"
    CONSTRUCTOR = "constructor"
    TYPED_ARRAY = "typed_array"
    OTHER = "other"


@dataclass(frozen=True)
class Primitive:
    """Primitive leaf shape."""

    kind: PrimitiveKind

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", PrimitiveKind(self.kind))


@dataclass(frozen=True)
class Opaque:
    """Callable or otherwise externally opaque leaf."""

    kind: OpaqueKind = OpaqueKind.CALLABLE
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", OpaqueKind(self.kind))


@dataclass(frozen=True)
class Sequence:
    """Homogeneous ordered collection of one element shape."""

    element: Schema
    readonly: bool = False


def _flatten_members(members: Iterable[Schema]) -> frozenset[Schema]:
    flattened: set[Schema] = set()
    for member in members:
        if isinstance(member, Union):
            flattened.update(member.members)
        else:
            flattened.add(member)
    return frozenset(flattened)


@dataclass(frozen=True)
class Union:
    """Alternative among member shapes. The empty union is the impossible shape.

    Nested union members are flattened into this union.
    """

    members: frozenset[Schema] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", _flatten_members(self.members))


@dataclass(frozen=True)
class Field:
    """Named slot of a record; the name lives on the owning record."""

    shape: Schema
    optional: bool = False
    nullable: bool = False
    readonly: bool = False


@dataclass(frozen=True, eq=False)
class Record:
    """Fixed set of uniquely named fields.

    Enumeration follows declaration order; equality and hashing do not.
    """

    fields: tuple[tuple[str, Field], ...] = ()

    def __post_init__(self) -> None:
        pairs = tuple((name, value) for name, value in self.fields)
        seen: set[str] = set()
        for name, value in pairs:
            if not isinstance(name, str):
                raise TypeError(f"Record field names must be strings, got {name!r}.")
            if not isinstance(value, Field):
                raise TypeError(f"Record field {name!r} must be a Field, got {value!r}.")
            if name in seen:
                raise DuplicateFieldError(f"Duplicate record field: {name}")
            seen.add(name)
        object.__setattr__(self, "fields", pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return dict(self.fields) == dict(other.fields)

    def __hash__(self) -> int:
        return hash(frozenset(self.fields))

    @property
    def field_names(self) -> tuple[str, ...]:
        """Return field names in declaration order."""
        return tuple(name for name, _ in self.fields)

    @property
    def field_map(self) -> dict[str, Field]:
        """Return a fresh name-to-field mapping."""
        return dict(self.fields)

    def has_field(self, name: str) -> bool:
        return any(existing == name for existing, _ in self.fields)

    def get_field(self, name: str) -> Field:
        for existing, value in self.fields:
            if existing == name:
                return value
        raise UnknownKeyError((name,))


Schema = Primitive | Record | Sequence | Opaque | Union

NULL = Primitive(PrimitiveKind.NULL)
UNDEFINED = Primitive(PrimitiveKind.UNDEFINED)
STRING = Primitive(PrimitiveKind.STRING)
NUMBER = Primitive(PrimitiveKind.NUMBER)
BOOLEAN = Primitive(PrimitiveKind.BOOLEAN)
SYMBOL = Primitive(PrimitiveKind.SYMBOL)
CALLABLE = Opaque(OpaqueKind.CALLABLE)
NEVER = Union()


def union_of(*members: Schema) -> Schema:
    """Build a flattened, de-duplicated union; a single member stands for itself."""
    collected = _flatten_members(members)
    if len(collected) == 1:
        return next(iter(collected))
    return Union(frozenset(collected))


def build_record(
    fields: Mapping[str, Schema | Field] | Iterable[tuple[str, Schema | Field]],
) -> Record:
    """Build a record, wrapping bare shapes into required, non-nullable fields."""
    items = fields.items() if isinstance(fields, Mapping) else fields
    return Record(
        tuple(
            (name, value if isinstance(value, Field) else Field(shape=value))
            for name, value in items
        )
    )
