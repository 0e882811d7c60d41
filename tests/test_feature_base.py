from __future__ import annotations

import dataclasses

import pytest

from colfeat.features.base import Feature


def test_equality_on_name_and_value() -> None:
    assert Feature("A@1", 1.0) == Feature("A@1", 1.0)
    assert Feature("A@1", 1.0) != Feature("A@1", 2.0)
    assert Feature("A@1", 1.0) != Feature("B@1", 1.0)
    assert len({Feature("A@1", 1.0), Feature("A@1", 1.0), Feature("A@1", 2.0)}) == 2


def test_ordering_on_name_only() -> None:
    feats = [Feature("c@x", 0.1), Feature("a@x", 9.0), Feature("b@x", 5.0)]
    assert [f.name for f in sorted(feats)] == ["a@x", "b@x", "c@x"]
    # same name, different value: neither is less than the other
    assert not Feature("a@x", 1.0) < Feature("a@x", 2.0)
    assert Feature("a@x", 1.0) <= Feature("a@x", 2.0)


def test_value_is_float_and_immutable() -> None:
    f = Feature("n@1", 3)
    assert isinstance(f.value, float) and f.value == 3.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        f.name = "other"  # type: ignore[misc]


def test_with_value_returns_new_feature() -> None:
    f = Feature("n@1", 1.0)
    g = f.with_value(0.5)
    assert g.name == "n@1" and g.value == 0.5
    assert f.value == 1.0


def test_not_equal_to_other_types() -> None:
    assert Feature("n@1", 1.0) != ("n@1", 1.0)
