from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import pytest

from spatialnav.runtime.config import VirtualizationConfig


@dataclass(frozen=True, slots=True)
class Tile:
    id: int
    extent: float


def tile_extent(tile: Tile) -> float:
    return tile.extent


@pytest.fixture
def make_tiles() -> Callable[[int], list[Tile]]:
    def factory(count: int) -> list[Tile]:
        return [Tile(id=i, extent=40.0 + (i % 7) * 10.0) for i in range(count)]

    return factory


@pytest.fixture
def tile_size() -> Callable[[Tile], float]:
    return tile_extent


@pytest.fixture
def config() -> VirtualizationConfig:
    return VirtualizationConfig()
