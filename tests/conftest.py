from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
import yaml

# Tests import colfeat straight from the src/ tree (no install needed)
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Directory holding pyproject.toml, src/ and configs/."""
    return REPO_ROOT


@pytest.fixture(scope="session")
def config_dir(project_root: Path) -> Path:
    """Shipped naming configs."""
    return project_root / "configs"


@pytest.fixture(scope="session")
def config_files(config_dir: Path) -> list[Path]:
    """Every *.yaml under configs/, sorted by name."""
    return sorted(config_dir.glob("*.yaml"))


@pytest.fixture(scope="session")
def loaded_configs(config_files: list[Path]) -> dict[str, dict[str, Any]]:
    """Raw YAML mappings keyed by file name (before contract validation)."""
    out: dict[str, dict[str, Any]] = {}
    for p in config_files:
        with p.open(encoding="utf-8") as fh:
            out[p.name] = yaml.safe_load(fh) or {}
    return out
