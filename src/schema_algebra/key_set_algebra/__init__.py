"""Key-set algebra exports."""

from .key_sets import (
    KeySource,
    complement,
    function_keys,
    intersect,
    key_set,
    key_union,
    keys_by_value,
    non_function_keys,
    subtract,
    symmetric_difference,
)

__all__ = [
    "KeySource",
    "key_set",
    "intersect",
    "subtract",
    "complement",
    "key_union",
    "symmetric_difference",
    "keys_by_value",
    "function_keys",
    "non_function_keys",
]
