# src/colfeat/common/contracts.py
# -----------------------------------------------------------------------------
# Pydantic models describing naming requests read from YAML configs.
# Identifiers are checked here, at the config boundary; the encoder itself
# accepts any string.
# -----------------------------------------------------------------------------
from __future__ import annotations

import math

from pydantic import BaseModel, Field, StrictStr, field_validator

from colfeat.features.columnar import ColumnarFeature


def _non_empty(v: str, what: str) -> str:
    if v == "":
        raise ValueError(f"{what} is empty")
    return v


class SimpleNameRequest(BaseModel):
    """A single-column feature to be named."""

    field_name: StrictStr = Field(..., description="Source column")
    name: StrictStr = Field(..., description="Base feature label")
    value: float = 1.0

    @field_validator("field_name")
    @classmethod
    def _field_non_empty(cls, v: str) -> str:
        return _non_empty(v, "field_name")

    @field_validator("value")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"value must be finite, got {v!r}")
        return v

    def to_feature(self) -> ColumnarFeature:
        return ColumnarFeature.simple(self.field_name, self.name, self.value)


class ConjunctionNameRequest(BaseModel):
    """A conjunction of two columns to be named (order preserved)."""

    first_field_name: StrictStr
    second_field_name: StrictStr
    name: StrictStr
    value: float = 1.0

    @field_validator("first_field_name", "second_field_name")
    @classmethod
    def _fields_non_empty(cls, v: str) -> str:
        return _non_empty(v, "conjunction field name")

    @field_validator("value")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"value must be finite, got {v!r}")
        return v

    def to_feature(self) -> ColumnarFeature:
        return ColumnarFeature.conjunction(
            self.first_field_name, self.second_field_name, self.name, self.value
        )


class NamingConfig(BaseModel):
    """
    YAML-backed set of naming requests.

    simple:        list of {field_name, name, value?}
    conjunctions:  list of {first_field_name, second_field_name, name, value?}
    output:        optional default output path (.csv or .parquet)
    """

    simple: list[SimpleNameRequest] = Field(default_factory=list)
    conjunctions: list[ConjunctionNameRequest] = Field(default_factory=list)
    output: StrictStr | None = None

    def to_features(self) -> list[ColumnarFeature]:
        """Simple requests first, then conjunctions, each in config order."""
        return [r.to_feature() for r in self.simple] + [r.to_feature() for r in self.conjunctions]
