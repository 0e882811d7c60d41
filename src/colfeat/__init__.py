# src/colfeat/__init__.py
# -----------------------------------------------------------------------------
# Public surface of colfeat: canonical identity for columnar features.
# -----------------------------------------------------------------------------
from __future__ import annotations

from colfeat.features import (
    CONJUNCTION,
    JOINER,
    ColumnarFeature,
    ConjunctionProvenance,
    Feature,
    FeatureNameError,
    SimpleProvenance,
    feature_from_name,
    generate_conjunction_name,
    generate_simple_name,
    new_conjunction_feature,
    new_simple_feature,
    split_feature_name,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CONJUNCTION",
    "JOINER",
    "Feature",
    "ColumnarFeature",
    "SimpleProvenance",
    "ConjunctionProvenance",
    "FeatureNameError",
    "generate_simple_name",
    "generate_conjunction_name",
    "new_simple_feature",
    "new_conjunction_feature",
    "split_feature_name",
    "feature_from_name",
]
