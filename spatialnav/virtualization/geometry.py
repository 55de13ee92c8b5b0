"""Immutable list geometry snapshot shared by offset policies."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from spatialnav.virtualization.errors import InvalidConfiguration
from spatialnav.virtualization.size_model import SizeModel


@dataclass(frozen=True, slots=True)
class ListGeometry[T]:
    """Inputs of one offset computation.

    ``item_count`` is the expected total; it may be larger than ``data`` only
    with a fixed extent, in which case unloaded items share that extent.
    """

    data: Sequence[T]
    size_model: SizeModel[T]
    viewport_extent: float
    item_count: int
    visible_count: int

    @property
    def max_left_aligned_index(self) -> int:
        return max(self.item_count - self.visible_count, 0)

    @property
    def max_right_aligned_index(self) -> int:
        return max(self.item_count - self.visible_count, 0)

    def extent_at(self, index: int) -> float:
        if self.size_model.is_fixed:
            return self.size_model.fixed_extent
        return self.size_model.item_extent(self.data[index])

    def cumulative(self, start: int, stop: int) -> float:
        """Return the summed extent of items in ``[start, stop)``."""
        return self.size_model.cumulative_extent(self.data, start, stop)

    def total_extent(self) -> float:
        return self.size_model.total_extent(self.data, self.item_count)

    def min_offset(self) -> float:
        """Return the most negative offset that still leaves no trailing gap."""
        return -max(self.total_extent() - self.viewport_extent, 0.0)


def resolve_item_count[T](
    data: Sequence[T], size_model: SizeModel[T], total_count: int | None = None
) -> int:
    """Validate an expected total against the loaded data."""
    if total_count is None:
        return len(data)
    count = int(total_count)
    if count < len(data):
        raise InvalidConfiguration(
            f"total_count ({count}) is smaller than loaded data ({len(data)})"
        )
    if count > len(data) and not size_model.is_fixed:
        raise InvalidConfiguration("total_count beyond loaded data requires a fixed item extent")
    return count


def create_list_geometry[T](
    data: Sequence[T],
    size_model: SizeModel[T],
    viewport_extent: float,
    *,
    total_count: int | None = None,
) -> ListGeometry[T]:
    """Build a geometry snapshot, deriving the visible count from the viewport."""
    viewport = max(0.0, float(viewport_extent))
    return ListGeometry(
        data=data,
        size_model=size_model,
        viewport_extent=viewport,
        item_count=resolve_item_count(data, size_model, total_count),
        visible_count=size_model.visible_count(viewport, data),
    )
