# src/colfeat/features/frame.py
# -----------------------------------------------------------------------------
# Tabular view of feature lists (for diagnostics and flat-file storage).
#
# features_to_frame : one row per feature, provenance spelled out in columns.
# frame_to_features : rebuild features from (name, value) alone; provenance is
#                     recovered from the name grammar.
# -----------------------------------------------------------------------------
from __future__ import annotations

from collections.abc import Iterable

import pandas as pd
from pandas import StringDtype

from colfeat.features.columnar import ColumnarFeature
from colfeat.features.parse import feature_from_name

FRAME_COLUMNS: list[str] = [
    "name",
    "value",
    "field_name",
    "first_field_name",
    "second_field_name",
]

_STRING_COLUMNS = ("name", "field_name", "first_field_name", "second_field_name")


def ensure_required_columns(df: pd.DataFrame, required: Iterable[str]) -> None:
    """Raise ValueError listing any required columns absent from ``df``."""
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def features_to_frame(features: Iterable[ColumnarFeature]) -> pd.DataFrame:
    """
    Flatten features into a DataFrame with columns ``FRAME_COLUMNS``.

    Row order follows the input; string columns use pandas StringDtype and
    ``value`` is float64.
    """
    rows = [
        (f.name, f.value, f.field_name, f.first_field_name, f.second_field_name)
        for f in features
    ]
    df = pd.DataFrame.from_records(rows, columns=FRAME_COLUMNS)
    for col in _STRING_COLUMNS:
        df[col] = df[col].astype(StringDtype())
    df["value"] = df["value"].astype("float64")
    return df


def frame_to_features(
    df: pd.DataFrame,
    *,
    name_col: str = "name",
    value_col: str = "value",
) -> list[ColumnarFeature]:
    """
    Rebuild ColumnarFeatures from a frame holding at least names and values.

    Any provenance columns present are ignored; provenance is re-derived from
    the canonical name.

    Raises
    ------
    ValueError
        If ``name_col`` or ``value_col`` is missing, or a non-empty value is
        not a number.
    FeatureNameError
        If a name does not follow either naming grammar.
    """
    ensure_required_columns(df, [name_col, value_col])
    names = df[name_col].astype(str).tolist()
    values = _parse_values(df[value_col], value_col)
    return [feature_from_name(n, v) for n, v in zip(names, values)]


def _is_blank(v: object) -> bool:
    return isinstance(v, str) and v.strip() == ""


def _parses_as_float(v: object) -> bool:
    try:
        float(v)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return False
    return True


def _parse_values(raw: pd.Series, value_col: str) -> list[float]:
    """Float values from ``raw``; empty cells become NaN, anything else must parse."""
    values = pd.to_numeric(raw, errors="coerce").astype("float64")
    # "nan"/"inf" strings coerce to NaN/inf legitimately; recheck the NaNs only
    suspect = values.isna() & raw.notna()
    bad = [v for v in raw[suspect].tolist() if not _is_blank(v) and not _parses_as_float(v)]
    if bad:
        raise ValueError(
            f"Column {value_col!r} has {len(bad)} values that are not numbers "
            f"(showing up to 10): {bad[:10]}"
        )
    return values.tolist()
