"""Tagged two-variant union produced by exclusive merges."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from schema_algebra.key_set_algebra.key_sets import key_set
from schema_algebra.schema_model.schema_classifiers import is_never
from schema_algebra.schema_model.schema_errors import ExclusivityViolationError
from schema_algebra.schema_model.schema_nodes import Record, Union


@dataclass(frozen=True)
class ExclusiveUnion(Union):
    """Union of two record variants whose exclusive fields must never mix.

    `members` is always derived from `first` and `second`, so it holds a
    single record when both variants are equal; `variants` always has two.
    """

    first: Record = field(default_factory=Record)
    second: Record = field(default_factory=Record)
    first_exclusive: frozenset[str] = frozenset()
    second_exclusive: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", frozenset({self.first, self.second}))
        object.__setattr__(self, "first_exclusive", frozenset(self.first_exclusive))
        object.__setattr__(self, "second_exclusive", frozenset(self.second_exclusive))

    @classmethod
    def between(
        cls,
        *,
        first: Record,
        second: Record,
        first_exclusive: Iterable[str],
        second_exclusive: Iterable[str],
    ) -> ExclusiveUnion:
        return cls(
            first=first,
            second=second,
            first_exclusive=frozenset(first_exclusive),
            second_exclusive=frozenset(second_exclusive),
        )

    @property
    def variants(self) -> tuple[Record, Record]:
        return (self.first, self.second)

    def conforming_variants(self, field_names: Iterable[str]) -> tuple[Record, ...]:
        """Return the variants an instance carrying `field_names` satisfies."""
        names = key_set(field_names)
        return tuple(variant for variant in self.variants if _conforms(variant, names))

    def select_variant(self, field_names: Iterable[str]) -> Record:
        """Return the single variant an instance conforms to.

        Raises `ExclusivityViolationError` when exclusive fields of both sides
        are present or no variant accepts the instance. When only shared fields
        are carried and both variants accept them, the first variant is chosen.
        """
        names = key_set(field_names)
        from_first = names & self.first_exclusive
        from_second = names & self.second_exclusive
        if from_first and from_second:
            raise ExclusivityViolationError(
                "Instance mixes exclusive fields "
                f"{sorted(from_first)} and {sorted(from_second)}."
            )
        conforming = self.conforming_variants(names)
        if not conforming:
            raise ExclusivityViolationError(
                f"Instance fields {sorted(names)} conform to neither exclusive variant."
            )
        return conforming[0]


def _conforms(variant: Record, names: frozenset[str]) -> bool:
    allowed = {name for name, value in variant.fields if not is_never(value.shape)}
    required = {
        name
        for name, value in variant.fields
        if not value.optional and not is_never(value.shape)
    }
    return required <= names and names <= allowed
