"""Leaf rules applied by the deep transform traversal."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from schema_algebra.schema_model.schema_nodes import Field, PrimitiveKind


class TransformRule(str, Enum):
    """Supported deep transform rules."""

    READONLY = "readonly"
    PARTIAL = "partial"
    REQUIRED = "required"
    NON_NULLABLE = "non_nullable"


@dataclass(frozen=True)
class RuleBehavior:
    """What one rule does to every slot and field it visits.

    `stripped_kinds` are removed from a field shape or sequence element before
    descending into it.
    """

    stripped_kinds: frozenset[PrimitiveKind] = frozenset()
    optional: bool | None = None
    nullable: bool | None = None
    readonly: bool | None = None

    def apply_flags(self, value: Field) -> Field:
        changes: dict[str, bool] = {}
        if self.optional is not None:
            changes["optional"] = self.optional
        if self.nullable is not None:
            changes["nullable"] = self.nullable
        if self.readonly is not None:
            changes["readonly"] = self.readonly
        return replace(value, **changes)


_BEHAVIORS: dict[TransformRule, RuleBehavior] = {
    TransformRule.READONLY: RuleBehavior(readonly=True),
    TransformRule.PARTIAL: RuleBehavior(optional=True),
    TransformRule.REQUIRED: RuleBehavior(
        stripped_kinds=frozenset({PrimitiveKind.UNDEFINED}),
        optional=False,
    ),
    TransformRule.NON_NULLABLE: RuleBehavior(
        stripped_kinds=frozenset({PrimitiveKind.NULL, PrimitiveKind.UNDEFINED}),
        nullable=False,
    ),
}


def behavior_for(rule: TransformRule | str) -> RuleBehavior:
    """Resolve a rule name or enum member to its behavior."""
    return _BEHAVIORS[TransformRule(rule)]
