# src/colfeat/features/parse.py
# -----------------------------------------------------------------------------
# Recover provenance from a canonical feature name.
#
# split_feature_name(name)      : (provenance, base) from either grammar
# feature_from_name(name, val)  : rebuild a ColumnarFeature from name + value
# is_conjunction_name(name)     : cheap prefix/grammar test
#
# Behavior
# --------
# - "CONJ[a,b]@base" is a conjunction when `a` has no ',' or ']' and `b` has
#   no ']'. Everything else splits at the first "@" as a single-column name.
# - A name with no "@" at all is not a columnar name -> FeatureNameError.
# - Names built from field names containing reserved tokens may not round-trip;
#   the grammar is ambiguous there and we do not try to resolve it.
# -----------------------------------------------------------------------------
from __future__ import annotations

import re

from colfeat.features.columnar import (
    CONJUNCTION,
    JOINER,
    ColumnarFeature,
    ConjunctionProvenance,
    Provenance,
    SimpleProvenance,
)

_CONJ_RE = re.compile(
    r"^" + re.escape(CONJUNCTION) + r"\[([^,\]]*),([^\]]*)\]" + re.escape(JOINER) + r"(.*)$",
    re.DOTALL,
)


class FeatureNameError(ValueError):
    """Raised when a string does not follow either canonical naming grammar."""


def is_conjunction_name(name: str) -> bool:
    return _CONJ_RE.match(name) is not None


def split_feature_name(name: str) -> tuple[Provenance, str]:
    """
    Split a canonical name into its provenance and base name.

    Returns
    -------
    (provenance, base) : tuple[SimpleProvenance | ConjunctionProvenance, str]

    Raises
    ------
    FeatureNameError
        If the name contains no joiner.
    """
    m = _CONJ_RE.match(name)
    if m:
        return ConjunctionProvenance(m.group(1), m.group(2)), m.group(3)
    field, sep, base = name.partition(JOINER)
    if not sep:
        raise FeatureNameError(f"Not a columnar feature name (no {JOINER!r} joiner): {name!r}")
    return SimpleProvenance(field), base


def feature_from_name(name: str, value: float) -> ColumnarFeature:
    """Rebuild a ColumnarFeature from a stored (name, value) pair."""
    provenance, base = split_feature_name(name)
    return ColumnarFeature.from_provenance(provenance, base, value)
