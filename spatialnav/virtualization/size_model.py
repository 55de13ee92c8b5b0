"""Per-item extent model for virtualized lists."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from spatialnav.virtualization.errors import InvalidConfiguration

type ExtentFunction[T] = Callable[[T], float]
type ItemExtent[T] = float | int | ExtentFunction[T]


@dataclass(frozen=True, slots=True)
class SizeModel[T]:
    """Item extent along the scroll axis, either fixed or computed per item.

    Fixed mode answers every query in O(1). Dynamic mode evaluates the
    supplied function, so cumulative queries cost O(range length).
    """

    extent: ItemExtent[T]

    def __post_init__(self) -> None:
        if callable(self.extent):
            return
        if isinstance(self.extent, bool) or not isinstance(self.extent, (int, float)):
            raise InvalidConfiguration(f"item extent must be a number or callable: {self.extent!r}")
        if not math.isfinite(self.extent) or self.extent <= 0:
            raise InvalidConfiguration(f"item extent must be positive: {self.extent!r}")

    @property
    def is_fixed(self) -> bool:
        return not callable(self.extent)

    @property
    def fixed_extent(self) -> float:
        """Return the constant extent; only valid in fixed mode."""
        if callable(self.extent):
            raise InvalidConfiguration("size model has per-item extents")
        return float(self.extent)

    def item_extent(self, item: T) -> float:
        """Return the extent of one item."""
        if not callable(self.extent):
            return float(self.extent)
        value = float(self.extent(item))
        if not math.isfinite(value) or value <= 0:
            raise InvalidConfiguration(f"item extent must be positive, got {value!r} for {item!r}")
        return value

    def visible_count(self, viewport_extent: float, data: Sequence[T]) -> int:
        """Return how many items, from the start, it takes to fill the viewport."""
        if not data or viewport_extent <= 0:
            return 0
        if not callable(self.extent):
            return math.ceil(viewport_extent / float(self.extent))
        consumed = 0
        total = 0.0
        for item in data:
            if total >= viewport_extent:
                break
            total += self.item_extent(item)
            consumed += 1
        return consumed

    def cumulative_extent(self, data: Sequence[T], start: int, stop: int) -> float:
        """Return the summed extent of items in ``[start, stop)``."""
        if stop <= start:
            return 0.0
        if not callable(self.extent):
            return (stop - start) * float(self.extent)
        return sum((self.item_extent(item) for item in data[start:stop]), 0.0)

    def total_extent(self, data: Sequence[T], item_count: int | None = None) -> float:
        """Return the extent of the whole content.

        ``item_count`` may exceed ``len(data)`` in fixed mode, when more items
        are expected than are loaded.
        """
        count = len(data) if item_count is None else max(0, int(item_count))
        if not callable(self.extent):
            return count * float(self.extent)
        return self.cumulative_extent(data, 0, min(count, len(data)))


def create_size_model[T](extent: ItemExtent[T] | SizeModel[T]) -> SizeModel[T]:
    """Wrap a raw extent (constant or function) into a size model."""
    if isinstance(extent, SizeModel):
        return extent
    return SizeModel(extent)
