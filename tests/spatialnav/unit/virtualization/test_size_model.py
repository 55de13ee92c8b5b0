from __future__ import annotations

import pytest

from spatialnav.virtualization.errors import InvalidConfiguration
from spatialnav.virtualization.size_model import SizeModel, create_size_model


def test_fixed_visible_count_rounds_up() -> None:
    model = SizeModel(50)
    data = list(range(1000))
    assert model.visible_count(500, data) == 10
    assert model.visible_count(510, data) == 11
    assert model.visible_count(0, data) == 0
    assert model.visible_count(500, []) == 0


def test_dynamic_visible_count_accumulates_until_viewport_filled() -> None:
    model = SizeModel(lambda item: float(item))
    data = [100, 200, 300, 400]
    assert model.visible_count(450, data) == 3
    assert model.visible_count(600, data) == 3
    assert model.visible_count(601, data) == 4
    assert model.visible_count(5000, data) == 4


def test_cumulative_extent_fixed_and_dynamic() -> None:
    fixed = SizeModel(50)
    dynamic = SizeModel(lambda item: float(item))
    data = [100, 200, 300, 400]
    assert fixed.cumulative_extent(data, 2, 7) == 250
    assert fixed.cumulative_extent(data, 3, 3) == 0
    assert fixed.cumulative_extent(data, 5, 1) == 0
    assert dynamic.cumulative_extent(data, 1, 3) == 500
    assert dynamic.cumulative_extent(data, 0, 4) == 1000


def test_total_extent_counts_expected_items_in_fixed_mode() -> None:
    data = list(range(10))
    assert SizeModel(50).total_extent(data) == 500
    assert SizeModel(50).total_extent(data, 20) == 1000
    assert SizeModel(lambda item: 10.0).total_extent(data) == 100


def test_invalid_extents_are_rejected() -> None:
    for bad in (0, -5, float("nan"), float("inf"), True, "50"):
        with pytest.raises(InvalidConfiguration):
            SizeModel(bad)  # type: ignore[arg-type]
    model = SizeModel(lambda item: 0.0)
    with pytest.raises(InvalidConfiguration):
        model.item_extent("anything")


def test_fixed_extent_only_in_fixed_mode() -> None:
    assert SizeModel(42).fixed_extent == 42.0
    assert SizeModel(42).is_fixed
    dynamic = SizeModel(lambda item: 1.0)
    assert not dynamic.is_fixed
    with pytest.raises(InvalidConfiguration):
        _ = dynamic.fixed_extent


def test_create_size_model_passes_models_through() -> None:
    model = SizeModel(10)
    assert create_size_model(model) is model
    assert create_size_model(10) == model
