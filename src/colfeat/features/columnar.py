# src/colfeat/features/columnar.py
# -----------------------------------------------------------------------------
# Canonical identity for features extracted from columnar data.
#
# A feature derived from one column is named   <field>@<base>
# A conjunction of two columns is named        CONJ[<first>,<second>]@<base>
#
# Contracts
#   • The canonical name is fully determined by provenance + base name; a
#     ColumnarFeature can only be built through the naming functions below.
#   • Conjunction field order is significant (no sorting/normalisation).
#   • Nothing here validates or escapes input: empty names or names containing
#     "@" / "CONJ[" yield well-formed but possibly colliding names. Callers that
#     care run the guards in colfeat.checks.guards.
#   • Equality, hashing and ordering come from the wrapped Feature (name/value);
#     provenance never changes them.
# -----------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from colfeat.features.base import Feature

__all__ = [
    "CONJUNCTION",
    "JOINER",
    "SimpleProvenance",
    "ConjunctionProvenance",
    "Provenance",
    "generate_simple_name",
    "generate_conjunction_name",
    "generate_name",
    "ColumnarFeature",
    "new_simple_feature",
    "new_conjunction_feature",
]

CONJUNCTION = "CONJ"
JOINER = "@"


@dataclass(frozen=True, slots=True)
class SimpleProvenance:
    """Feature produced by a single column."""

    field_name: str

    @property
    def first_field_name(self) -> str:
        return ""

    @property
    def second_field_name(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class ConjunctionProvenance:
    """Feature produced by an ordered pair of columns."""

    first_field_name: str
    second_field_name: str

    @property
    def field_name(self) -> str:
        return CONJUNCTION


Provenance = Union[SimpleProvenance, ConjunctionProvenance]


def generate_simple_name(field_name: str, name: str) -> str:
    """Canonical name of a single-column feature: ``field_name@name``."""
    return field_name + JOINER + name


def generate_conjunction_name(first_field_name: str, second_field_name: str, name: str) -> str:
    """
    Canonical name of a two-column conjunction feature.

    ``CONJ[first,second]@name``. Swapping the fields yields a different name.
    """
    return CONJUNCTION + "[" + first_field_name + "," + second_field_name + "]" + JOINER + name


def generate_name(provenance: Provenance, name: str) -> str:
    """Dispatch to the naming function matching ``provenance``."""
    if isinstance(provenance, ConjunctionProvenance):
        return generate_conjunction_name(
            provenance.first_field_name, provenance.second_field_name, name
        )
    return generate_simple_name(provenance.field_name, name)


@dataclass(frozen=True, slots=True, eq=False)
class ColumnarFeature:
    """
    A Feature with column provenance attached.

    The canonical name is always derived from ``provenance`` and
    ``base_name``; it cannot be passed in.

    Attributes
    ----------
    provenance : SimpleProvenance | ConjunctionProvenance
        Column(s) the feature was derived from.
    base_name : str
        Label chosen by the extractor (the part after the joiner).
    value : float
        Feature magnitude.
    feature : Feature
        Canonical name and value, computed at construction.
    """

    provenance: Provenance
    base_name: str
    value: float
    feature: Feature = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(
            self, "feature", Feature(generate_name(self.provenance, self.base_name), self.value)
        )

    @classmethod
    def from_provenance(cls, provenance: Provenance, name: str, value: float) -> ColumnarFeature:
        return cls(provenance, name, value)

    @classmethod
    def simple(cls, field_name: str, name: str, value: float) -> ColumnarFeature:
        return cls.from_provenance(SimpleProvenance(field_name), name, value)

    @classmethod
    def conjunction(
        cls, first_field_name: str, second_field_name: str, name: str, value: float
    ) -> ColumnarFeature:
        return cls.from_provenance(
            ConjunctionProvenance(first_field_name, second_field_name), name, value
        )

    # -- accessors -----------------------------------------------------------
    @property
    def name(self) -> str:
        return self.feature.name

    @property
    def field_name(self) -> str:
        """Source column, or ``CONJ`` for conjunctions."""
        return self.provenance.field_name

    @property
    def first_field_name(self) -> str:
        """First column of a conjunction; empty for single-column features."""
        return self.provenance.first_field_name

    @property
    def second_field_name(self) -> str:
        """Second column of a conjunction; empty for single-column features."""
        return self.provenance.second_field_name

    @property
    def is_conjunction(self) -> bool:
        return isinstance(self.provenance, ConjunctionProvenance)

    # -- Feature contract ----------------------------------------------------
    @staticmethod
    def _unwrap(other: Any) -> Feature | None:
        if isinstance(other, ColumnarFeature):
            return other.feature
        if isinstance(other, Feature):
            return other
        return None

    def __eq__(self, other: Any) -> bool:
        o = self._unwrap(other)
        if o is None:
            return NotImplemented
        return self.feature == o

    def __hash__(self) -> int:
        return hash(self.feature)

    def __lt__(self, other: Any) -> bool:
        o = self._unwrap(other)
        if o is None:
            return NotImplemented
        return self.feature < o

    def __le__(self, other: Any) -> bool:
        o = self._unwrap(other)
        if o is None:
            return NotImplemented
        return self.feature <= o

    def __gt__(self, other: Any) -> bool:
        o = self._unwrap(other)
        if o is None:
            return NotImplemented
        return self.feature > o

    def __ge__(self, other: Any) -> bool:
        o = self._unwrap(other)
        if o is None:
            return NotImplemented
        return self.feature >= o

    def __repr__(self) -> str:
        return (
            f"ColumnarFeature(name={self.name!r}, value={self.value!r}, "
            f"provenance={self.provenance!r})"
        )


def new_simple_feature(field_name: str, name: str, value: float) -> ColumnarFeature:
    """Build a single-column feature named ``field_name@name``."""
    return ColumnarFeature.simple(field_name, name, value)


def new_conjunction_feature(
    first_field_name: str, second_field_name: str, name: str, value: float
) -> ColumnarFeature:
    """Build a conjunction feature named ``CONJ[first,second]@name``."""
    return ColumnarFeature.conjunction(first_field_name, second_field_name, name, value)
