"""Merge engine exports."""

from .exclusive_variants import ExclusiveUnion
from .merge_rules import merge, merge_exclusive, merge_override

__all__ = [
    "ExclusiveUnion",
    "merge",
    "merge_exclusive",
    "merge_override",
]
