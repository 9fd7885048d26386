"""Schema model exports."""

from .schema_classifiers import (
    NULLISH_KINDS,
    ShapePredicate,
    is_callable,
    is_constructor,
    is_never,
    is_opaque,
    is_primitive,
    is_record,
    is_sequence,
    is_typed_array,
    is_union,
    non_nullable,
    non_undefined,
    of_kinds,
    without_kinds,
)
from .schema_errors import (
    DuplicateFieldError,
    ExclusivityViolationError,
    SchemaAlgebraError,
    StructuralPreconditionError,
    UnknownKeyError,
)
from .schema_nodes import (
    BOOLEAN,
    CALLABLE,
    NEVER,
    NULL,
    NUMBER,
    STRING,
    SYMBOL,
    UNDEFINED,
    Field,
    Opaque,
    OpaqueKind,
    Primitive,
    PrimitiveKind,
    Record,
    Schema,
    Sequence,
    Union,
    build_record,
    union_of,
)

__all__ = [
    "BOOLEAN",
    "CALLABLE",
    "NEVER",
    "NULL",
    "NULLISH_KINDS",
    "NUMBER",
    "STRING",
    "SYMBOL",
    "UNDEFINED",
    "Field",
    "Opaque",
    "OpaqueKind",
    "Primitive",
    "PrimitiveKind",
    "Record",
    "Schema",
    "Sequence",
    "Union",
    "build_record",
    "union_of",
    "ShapePredicate",
    "is_callable",
    "is_constructor",
    "is_never",
    "is_opaque",
    "is_primitive",
    "is_record",
    "is_sequence",
    "is_typed_array",
    "is_union",
    "non_nullable",
    "non_undefined",
    "of_kinds",
    "without_kinds",
    "SchemaAlgebraError",
    "UnknownKeyError",
    "StructuralPreconditionError",
    "DuplicateFieldError",
    "ExclusivityViolationError",
]
