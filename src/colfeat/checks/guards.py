# src/colfeat/checks/guards.py
# -----------------------------------------------------------------------------
# Purpose
# -------
# Opt-in guards a calling pipeline can run around feature naming:
#   1) Reserved tokens in field/base names ("@", "CONJ", brackets, commas).
#   2) Canonical-name collisions between differently-provenanced features.
#   3) Non-finite feature values.
#
# The encoder in colfeat.features.columnar never calls these; naming stays
# total and unchecked on the hot path.
# -----------------------------------------------------------------------------
from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from colfeat.features.columnar import CONJUNCTION, JOINER, ColumnarFeature, Provenance

__all__ = [
    "RESERVED_TOKENS",
    "list_reserved_token_names",
    "ensure_well_formed_field_names",
    "find_name_collisions",
    "ensure_no_name_collisions",
    "ensure_finite_values",
]

RESERVED_TOKENS: tuple[str, ...] = (JOINER, ",", "[", "]")


def list_reserved_token_names(names: Iterable[str]) -> list[str]:
    """
    Return the names that could make canonical names ambiguous.

    A name is flagged when it is empty, equals the conjunction sentinel
    ``CONJ``, or contains any of ``RESERVED_TOKENS``.
    """
    out: list[str] = []
    for n in names:
        if n == "" or n == CONJUNCTION or any(tok in n for tok in RESERVED_TOKENS):
            out.append(n)
    return out


def ensure_well_formed_field_names(names: Iterable[str]) -> None:
    """
    Enforce that field names cannot produce ambiguous canonical names.

    Raises
    ------
    ValueError
        If any name is empty, equals ``CONJ`` or contains a reserved token.
    """
    offenders = list_reserved_token_names(names)
    if offenders:
        raise ValueError(
            "Field names must be non-empty, must not equal "
            f"{CONJUNCTION!r} and must not contain any of {list(RESERVED_TOKENS)}. "
            f"Found {len(offenders)} offenders: {sorted(offenders)}"
        )


def find_name_collisions(features: Iterable[ColumnarFeature]) -> dict[str, list[Provenance]]:
    """
    Map each canonical name produced by more than one provenance to those
    provenances (first-seen order). Repeats of the same provenance are fine.
    """
    seen: dict[str, list[Provenance]] = {}
    for f in features:
        provs = seen.setdefault(f.name, [])
        if f.provenance not in provs:
            provs.append(f.provenance)
    return {name: provs for name, provs in seen.items() if len(provs) > 1}


def ensure_no_name_collisions(features: Iterable[ColumnarFeature]) -> None:
    """
    Raises
    ------
    ValueError
        If two different provenances produced the same canonical name.
    """
    collisions = find_name_collisions(features)
    if collisions:
        examples = dict(list(collisions.items())[:10])
        raise ValueError(
            f"Canonical feature names collide across provenances: {len(collisions)} names "
            f"(showing up to 10): {examples}"
        )


def ensure_finite_values(features: Iterable[ColumnarFeature]) -> None:
    """Raise ValueError if any feature value is NaN or infinite."""
    feats = list(features)
    if not feats:
        return
    values = np.fromiter((f.value for f in feats), dtype=float, count=len(feats))
    bad = ~np.isfinite(values)
    if bad.any():
        names = [feats[i].name for i in np.flatnonzero(bad)[:10]]
        raise ValueError(
            f"Feature values must be finite. Found {int(bad.sum())} non-finite "
            f"(showing up to 10): {names}"
        )
