"""Record merge rules built on key-set algebra and projection."""

from __future__ import annotations

import logging

from schema_algebra.key_set_algebra.key_sets import intersect, subtract
from schema_algebra.projection.field_projection import pick_by_key
from schema_algebra.schema_model.schema_errors import StructuralPreconditionError
from schema_algebra.schema_model.schema_nodes import NEVER, Field, Record, Schema

from .exclusive_variants import ExclusiveUnion

LOGGER = logging.getLogger(__name__)


def merge_override(base: Schema, override: Schema) -> Record:
    """Keep the fields of `base`, taking the shape of `override` where names collide.

    Fields only `override` declares are dropped.
    """
    left = _require_record(base, "merge_override")
    right = _require_record(override, "merge_override")
    kept = pick_by_key(left, subtract(left, right)).field_map
    replaced = pick_by_key(right, intersect(right, left)).field_map
    merged = Record(
        tuple(
            (name, replaced[name] if name in replaced else kept[name])
            for name in left.field_names
        )
    )
    LOGGER.debug("merge_override replaced %d of %d fields", len(replaced), len(left.fields))
    return merged


def merge(base: Schema, addition: Schema) -> Record:
    """Assign `addition` onto `base`: override collisions and append new fields."""
    left = _require_record(base, "merge")
    right = _require_record(addition, "merge")
    overridden = merge_override(left, right)
    appended = pick_by_key(right, subtract(right, left))
    LOGGER.debug("merge appended %d field(s)", len(appended.fields))
    return Record(overridden.fields + appended.fields)


def merge_exclusive(first: Schema, second: Schema) -> ExclusiveUnion:
    """Build the two-variant union of records whose exclusive fields never mix.

    Each variant carries its own fields plus every field exclusive to the
    other side, forced to the impossible shape.
    """
    left = _require_record(first, "merge_exclusive")
    right = _require_record(second, "merge_exclusive")
    left_only = subtract(left, right)
    right_only = subtract(right, left)
    first_variant = _with_impossible_fields(left, right, right_only)
    second_variant = _with_impossible_fields(right, left, left_only)
    LOGGER.debug(
        "merge_exclusive built variants with %d and %d exclusive field(s)",
        len(left_only),
        len(right_only),
    )
    return ExclusiveUnion.between(
        first=first_variant,
        second=second_variant,
        first_exclusive=left_only,
        second_exclusive=right_only,
    )


def _with_impossible_fields(own: Record, other: Record, forbidden: frozenset[str]) -> Record:
    blocked = tuple(
        (name, Field(shape=NEVER, optional=True))
        for name in other.field_names
        if name in forbidden
    )
    return Record(own.fields + blocked)


def _require_record(schema: Schema, operation: str) -> Record:
    if not isinstance(schema, Record):
        raise StructuralPreconditionError(
            f"{operation} requires record schemas, got {type(schema).__name__}."
        )
    return schema
