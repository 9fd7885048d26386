"""Record projection by key membership or by field value shape."""

from __future__ import annotations

from collections.abc import Iterable

from schema_algebra.key_set_algebra.key_sets import (
    KeySource,
    complement,
    intersect,
    key_set,
    keys_by_value,
    subtract,
)
from schema_algebra.schema_model.schema_classifiers import ShapePredicate
from schema_algebra.schema_model.schema_errors import (
    StructuralPreconditionError,
    UnknownKeyError,
)
from schema_algebra.schema_model.schema_nodes import Record, Schema


def pick_by_key(record: Schema, names: Iterable[str]) -> Record:
    """Keep exactly the named fields; every name must exist on the record."""
    source = _require_record(record, "pick_by_key")
    wanted = key_set(names)
    unknown = wanted - frozenset(source.field_names)
    if unknown:
        raise UnknownKeyError(unknown)
    return _select(source, wanted)


def omit_by_key(record: Schema, names: Iterable[str]) -> Record:
    """Drop the named fields; names the record does not have are ignored."""
    source = _require_record(record, "omit_by_key")
    return _select(source, frozenset(source.field_names) - key_set(names))


def pick_by_value(record: Schema, predicate: ShapePredicate) -> Record:
    """Keep the fields whose shape satisfies `predicate`."""
    source = _require_record(record, "pick_by_value")
    return _select(source, keys_by_value(source, predicate))


def omit_by_value(record: Schema, predicate: ShapePredicate) -> Record:
    """Drop the fields whose shape satisfies `predicate`."""
    source = _require_record(record, "omit_by_value")
    return _select(source, frozenset(source.field_names) - keys_by_value(source, predicate))


def object_intersect(record: Schema, other: KeySource) -> Record:
    """Fields of `record` whose names also appear in `other`."""
    source = _require_record(record, "object_intersect")
    return _select(source, intersect(source, other))


def object_subtract(record: Schema, other: KeySource) -> Record:
    """Fields of `record` whose names do not appear in `other`."""
    source = _require_record(record, "object_subtract")
    return _select(source, subtract(source, other))


def object_complement(record: Schema, subset: KeySource) -> Record:
    """Fields of `record` outside `subset`, which must only name fields of `record`."""
    source = _require_record(record, "object_complement")
    return _select(source, complement(source, subset))


def _select(source: Record, names: frozenset[str]) -> Record:
    return Record(tuple((name, value) for name, value in source.fields if name in names))


def _require_record(schema: Schema, operation: str) -> Record:
    if not isinstance(schema, Record):
        raise StructuralPreconditionError(
            f"{operation} requires a record schema, got {type(schema).__name__}."
        )
    return schema
