from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from colfeat.common.config import load_naming_config


def test_shipped_configs_validate(config_files: list[Path]) -> None:
    assert config_files, "expected at least one YAML under configs/"
    for p in config_files:
        cfg = load_naming_config(p)
        assert cfg.to_features()


def test_shipped_names_config(loaded_configs: dict[str, dict[str, Any]]) -> None:
    raw = loaded_configs["names.yaml"]
    assert {"simple", "conjunctions"} <= set(raw)


def test_config_invalid_raises(tmp_path: Path) -> None:
    bad_cfg_path = tmp_path / "bad.yaml"
    with bad_cfg_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump({"simple": [{"field_name": "", "name": "x"}]}, f)
    with pytest.raises(ValueError):
        load_naming_config(bad_cfg_path)


def test_config_not_a_mapping_raises(tmp_path: Path) -> None:
    p = tmp_path / "list.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_naming_config(p)


def test_config_empty_doc_is_empty_config(tmp_path: Path) -> None:
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    cfg = load_naming_config(p)
    assert cfg.to_features() == []
    assert cfg.output is None
