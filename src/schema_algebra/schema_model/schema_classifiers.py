"""Single-step shape classifiers used as projection predicates."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .schema_nodes import (
    Opaque,
    OpaqueKind,
    Primitive,
    PrimitiveKind,
    Record,
    Schema,
    Sequence,
    Union,
    union_of,
)

ShapePredicate = Callable[[Schema], bool]

NULLISH_KINDS = frozenset({PrimitiveKind.NULL, PrimitiveKind.UNDEFINED})


def is_primitive(shape: Schema) -> bool:
    return isinstance(shape, Primitive)


def is_record(shape: Schema) -> bool:
    return isinstance(shape, Record)


def is_sequence(shape: Schema) -> bool:
    return isinstance(shape, Sequence)


def is_union(shape: Schema) -> bool:
    return isinstance(shape, Union)


def is_never(shape: Schema) -> bool:
    """Return True for the empty union."""
    return isinstance(shape, Union) and not shape.members


def is_opaque(shape: Schema) -> bool:
    return isinstance(shape, Opaque)


def is_callable(shape: Schema) -> bool:
    return isinstance(shape, Opaque) and shape.kind is OpaqueKind.CALLABLE


def is_constructor(shape: Schema) -> bool:
    return isinstance(shape, Opaque) and shape.kind is OpaqueKind.CONSTRUCTOR


def is_typed_array(shape: Schema) -> bool:
    return isinstance(shape, Opaque) and shape.kind is OpaqueKind.TYPED_ARRAY


def of_kinds(*kinds: PrimitiveKind | str) -> ShapePredicate:
    """Return a predicate accepting shapes assignable to the given primitive kinds.

    A union is assignable when every member is; the empty union is assignable
    to anything.
    """
    accepted = frozenset(PrimitiveKind(kind) for kind in kinds)

    def _predicate(shape: Schema) -> bool:
        if isinstance(shape, Primitive):
            return shape.kind in accepted
        if isinstance(shape, Union):
            return all(_predicate(member) for member in shape.members)
        return False

    return _predicate


def without_kinds(shape: Schema, kinds: Iterable[PrimitiveKind]) -> Schema:
    """Drop primitive alternatives of the given kinds from the top of a shape."""
    excluded = frozenset(kinds)
    if not excluded:
        return shape
    if isinstance(shape, Primitive):
        return union_of() if shape.kind in excluded else shape
    if isinstance(shape, Union):
        return union_of(
            *(
                member
                for member in shape.members
                if not (isinstance(member, Primitive) and member.kind in excluded)
            )
        )
    return shape


def non_undefined(shape: Schema) -> Schema:
    return without_kinds(shape, (PrimitiveKind.UNDEFINED,))


def non_nullable(shape: Schema) -> Schema:
    return without_kinds(shape, NULLISH_KINDS)
