"""Schema algebra error taxonomy."""

from __future__ import annotations

from collections.abc import Iterable


class SchemaAlgebraError(Exception):
    """Base class for failures raised by schema derivations."""


class UnknownKeyError(SchemaAlgebraError):
    """Raised when an operation references field names absent from a record."""

    def __init__(self, missing: Iterable[str], *, context: str = "record") -> None:
        self.missing = tuple(sorted(missing))
        names = ", ".join(repr(name) for name in self.missing)
        super().__init__(f"Unknown field name(s) for {context}: {names}")


class StructuralPreconditionError(SchemaAlgebraError):
    """Raised when an operation receives a schema variant it is not defined for."""


class DuplicateFieldError(SchemaAlgebraError):
    """Raised when a record is built with the same field name twice."""


class ExclusivityViolationError(SchemaAlgebraError):
    """Raised when an instance does not conform to exactly one exclusive variant."""
