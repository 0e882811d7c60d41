# src/colfeat/features/base.py
# -----------------------------------------------------------------------------
# Generic feature value: a (name, value) pair.
#
# Contract
#   • Equality is on (name, value); hashing agrees with equality.
#   • Ordering is on name only, so sorted collections of features for one row
#     are keyed by the feature name.
#   • Instances are immutable; rescaling returns a new Feature.
# -----------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, eq=False)
class Feature:
    """A named numeric feature."""

    name: str
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def with_value(self, value: float) -> Feature:
        """Return a copy of this feature carrying ``value``."""
        return Feature(self.name, value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name, self.value))

    def __lt__(self, other: Feature) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return self.name < other.name

    def __le__(self, other: Feature) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return self.name <= other.name

    def __gt__(self, other: Feature) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return self.name > other.name

    def __ge__(self, other: Feature) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return self.name >= other.name

    def __repr__(self) -> str:
        return f"Feature(name={self.name!r}, value={self.value!r})"
