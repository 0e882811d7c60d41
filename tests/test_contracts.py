from __future__ import annotations

import pytest
from pydantic import ValidationError

from colfeat.common.contracts import ConjunctionNameRequest, NamingConfig, SimpleNameRequest


def test_simple_request_to_feature() -> None:
    req = SimpleNameRequest(field_name="AGE", name="35")
    f = req.to_feature()
    assert f.name == "AGE@35"
    assert f.value == 1.0


def test_conjunction_request_to_feature() -> None:
    req = ConjunctionNameRequest(
        first_field_name="AGE", second_field_name="GENDER", name="M", value=0.5
    )
    f = req.to_feature()
    assert f.name == "CONJ[AGE,GENDER]@M"
    assert f.value == 0.5


def test_requests_reject_empty_fields() -> None:
    with pytest.raises(ValidationError):
        SimpleNameRequest(field_name="", name="x")
    with pytest.raises(ValidationError):
        ConjunctionNameRequest(first_field_name="A", second_field_name="", name="x")


def test_requests_reject_non_strings_and_non_finite() -> None:
    with pytest.raises(ValidationError):
        SimpleNameRequest(field_name=35, name="x")  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        SimpleNameRequest(field_name="AGE", name="x", value=float("nan"))


def test_naming_config_order() -> None:
    cfg = NamingConfig(
        simple=[SimpleNameRequest(field_name="B", name="1")],
        conjunctions=[ConjunctionNameRequest(first_field_name="A", second_field_name="B", name="1")],
    )
    assert [f.name for f in cfg.to_features()] == ["B@1", "CONJ[A,B]@1"]
    assert NamingConfig().to_features() == []
