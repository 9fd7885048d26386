"""Recursive traversal applying one deep transform rule to a whole schema."""

from __future__ import annotations

from dataclasses import replace

from schema_algebra.schema_model.schema_classifiers import without_kinds
from schema_algebra.schema_model.schema_nodes import (
    Opaque,
    Primitive,
    Record,
    Schema,
    Sequence,
    Union,
    union_of,
)

from .transform_rules import RuleBehavior, TransformRule, behavior_for


def deep_transform(schema: Schema, rule: TransformRule | str) -> Schema:
    """Apply `rule` to every field at every nesting depth of `schema`.

    Opaque and primitive leaves are returned unchanged. Records keep their
    field order, unions are rebuilt member by member.
    """
    return _visit(schema, behavior_for(rule))


def deep_readonly(schema: Schema) -> Schema:
    return deep_transform(schema, TransformRule.READONLY)


def deep_partial(schema: Schema) -> Schema:
    return deep_transform(schema, TransformRule.PARTIAL)


def deep_required(schema: Schema) -> Schema:
    return deep_transform(schema, TransformRule.REQUIRED)


def deep_non_nullable(schema: Schema) -> Schema:
    return deep_transform(schema, TransformRule.NON_NULLABLE)


def _visit(schema: Schema, behavior: RuleBehavior) -> Schema:
    if isinstance(schema, (Opaque, Primitive)):
        return schema
    if isinstance(schema, Record):
        return Record(
            tuple(
                (
                    name,
                    behavior.apply_flags(
                        replace(value, shape=_visit_slot(value.shape, behavior))
                    ),
                )
                for name, value in schema.fields
            )
        )
    if isinstance(schema, Sequence):
        readonly = schema.readonly if behavior.readonly is None else behavior.readonly
        return Sequence(element=_visit_slot(schema.element, behavior), readonly=readonly)
    if isinstance(schema, Union):
        return union_of(*(_visit(member, behavior) for member in schema.members))
    return schema


def _visit_slot(shape: Schema, behavior: RuleBehavior) -> Schema:
    return _visit(without_kinds(shape, behavior.stripped_kinds), behavior)
