"""Set operations over record field-name universes."""

from __future__ import annotations

from collections.abc import Iterable

from schema_algebra.schema_model.schema_classifiers import ShapePredicate, is_callable
from schema_algebra.schema_model.schema_errors import (
    StructuralPreconditionError,
    UnknownKeyError,
)
from schema_algebra.schema_model.schema_nodes import Opaque, Primitive, Record, Sequence, Union

KeySource = Record | Iterable[str]


def key_set(source: KeySource) -> frozenset[str]:
    """Return the field-name set of a record, or normalize an explicit name collection."""
    if isinstance(source, Record):
        return frozenset(source.field_names)
    if isinstance(source, (Primitive, Sequence, Opaque, Union)):
        raise StructuralPreconditionError(
            f"Key-set algebra requires a record, got {type(source).__name__}."
        )
    if isinstance(source, str):
        raise StructuralPreconditionError("Key sets must be collections of names, not a string.")
    names = frozenset(source)
    for name in names:
        if not isinstance(name, str):
            raise StructuralPreconditionError(f"Field names must be strings, got {name!r}.")
    return names


def intersect(a: KeySource, b: KeySource) -> frozenset[str]:
    """Names present in both sources."""
    return key_set(a) & key_set(b)


def subtract(a: KeySource, b: KeySource) -> frozenset[str]:
    """Names present in `a` and absent from `b`."""
    return key_set(a) - key_set(b)


def complement(a: KeySource, a1: KeySource) -> frozenset[str]:
    """Names of `a` outside its sub-collection `a1`.

    Raises `UnknownKeyError` when `a1` names something `a` does not have.
    """
    universe = key_set(a)
    subset = key_set(a1)
    unknown = subset - universe
    if unknown:
        raise UnknownKeyError(unknown, context="complement universe")
    return universe - subset


def key_union(a: KeySource, b: KeySource) -> frozenset[str]:
    return key_set(a) | key_set(b)


def symmetric_difference(a: KeySource, b: KeySource) -> frozenset[str]:
    """Names present in exactly one source."""
    return subtract(key_union(a, b), intersect(a, b))


def keys_by_value(record: Record, predicate: ShapePredicate) -> frozenset[str]:
    """Names of the fields whose shape satisfies `predicate`."""
    if not isinstance(record, Record):
        raise StructuralPreconditionError(
            f"Value-based key selection requires a record, got {type(record).__name__}."
        )
    return frozenset(name for name, value in record.fields if predicate(value.shape))


def function_keys(record: Record) -> frozenset[str]:
    return keys_by_value(record, is_callable)


def non_function_keys(record: Record) -> frozenset[str]:
    return keys_by_value(record, lambda shape: not is_callable(shape))
