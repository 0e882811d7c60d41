# src/colfeat/common/config.py
# -----------------------------------------------------------------------------
# YAML config loading for the CLI.
# -----------------------------------------------------------------------------
from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import ValidationError

from colfeat.common.contracts import NamingConfig


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from `path` (empty docs return {})."""
    with Path(path).open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return cast(dict[str, Any], data)


def load_naming_config(path: Path) -> NamingConfig:
    """
    Load and validate a naming config.

    Raises
    ------
    ValueError
        If the YAML is not a mapping or fails contract validation.
    """
    raw = load_yaml(path)
    try:
        return NamingConfig.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid naming config {path}:\n{e}") from e
