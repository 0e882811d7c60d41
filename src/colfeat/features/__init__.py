# src/colfeat/features/__init__.py

"""
This package groups the feature identity modules:
- base.py     : generic (name, value) Feature
- columnar.py : provenance-aware ColumnarFeature and the canonical naming rules
- parse.py    : recovering provenance from a canonical name
- frame.py    : pandas view of feature lists

Design notes
------------
* Two features are the same feature iff their canonical names are equal.
* Naming never validates or escapes; see ``colfeat.checks.guards`` for opt-in
  hygiene checks.
"""

from __future__ import annotations

from .base import Feature
from .columnar import (
    CONJUNCTION,
    JOINER,
    ColumnarFeature,
    ConjunctionProvenance,
    Provenance,
    SimpleProvenance,
    generate_conjunction_name,
    generate_name,
    generate_simple_name,
    new_conjunction_feature,
    new_simple_feature,
)
from .parse import FeatureNameError, feature_from_name, is_conjunction_name, split_feature_name

__all__ = [
    "CONJUNCTION",
    "JOINER",
    "Feature",
    "ColumnarFeature",
    "SimpleProvenance",
    "ConjunctionProvenance",
    "Provenance",
    "generate_simple_name",
    "generate_conjunction_name",
    "generate_name",
    "new_simple_feature",
    "new_conjunction_feature",
    "FeatureNameError",
    "split_feature_name",
    "feature_from_name",
    "is_conjunction_name",
]
