"""Deep transform engine exports."""

from .deep_traversal import (
    deep_non_nullable,
    deep_partial,
    deep_readonly,
    deep_required,
    deep_transform,
)
from .transform_rules import RuleBehavior, TransformRule, behavior_for

__all__ = [
    "TransformRule",
    "RuleBehavior",
    "behavior_for",
    "deep_transform",
    "deep_readonly",
    "deep_partial",
    "deep_required",
    "deep_non_nullable",
]
