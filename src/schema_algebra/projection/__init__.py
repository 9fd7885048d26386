"""Projection engine exports."""

from .field_projection import (
    object_complement,
    object_intersect,
    object_subtract,
    omit_by_key,
    omit_by_value,
    pick_by_key,
    pick_by_value,
)

__all__ = [
    "pick_by_key",
    "omit_by_key",
    "pick_by_value",
    "omit_by_value",
    "object_intersect",
    "object_subtract",
    "object_complement",
]
