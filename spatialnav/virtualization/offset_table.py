"""Precomputed scroll offsets for O(1) lookup during rapid focus changes."""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from time import perf_counter

import numpy as np

from spatialnav.virtualization.behavior import ScrollBehavior, parse_scroll_behavior
from spatialnav.virtualization.geometry import ListGeometry, create_list_geometry
from spatialnav.virtualization.scroll_offset import check_behavior_support
from spatialnav.virtualization.size_model import SizeModel
from spatialnav.virtualization.window import clamp_index

_LOG = logging.getLogger("spatialnav.virtualization")


def _extent_array(geometry: ListGeometry) -> np.ndarray:
    count = geometry.item_count
    if geometry.size_model.is_fixed:
        return np.full(count, geometry.size_model.fixed_extent, dtype=np.float64)
    model = geometry.size_model
    return np.fromiter(
        (model.item_extent(item) for item in geometry.data[:count]),
        dtype=np.float64,
        count=count,
    )


def _prefix_sums(geometry: ListGeometry, extents: np.ndarray) -> np.ndarray:
    """Return ``prefix[i] == extent of items [0, i)``, length ``count + 1``."""
    count = geometry.item_count
    if geometry.size_model.is_fixed:
        return np.arange(count + 1, dtype=np.float64) * geometry.size_model.fixed_extent
    prefix = np.zeros(count + 1, dtype=np.float64)
    np.cumsum(extents, out=prefix[1:])
    return prefix


def _stick_to_end(
    indices: np.ndarray, prefix: np.ndarray, extents: np.ndarray, geometry: ListGeometry
) -> np.ndarray:
    pinned = -(prefix[:-1] + extents - geometry.viewport_extent)
    return np.where(indices <= geometry.max_right_aligned_index, 0.0, pinned)


def _compute_offsets(
    behavior: ScrollBehavior,
    geometry: ListGeometry,
    extents: np.ndarray,
    prefix: np.ndarray,
    center_threshold: int | None,
) -> np.ndarray:
    count = geometry.item_count
    if count == 0 or geometry.visible_count <= 0:
        return np.zeros(count, dtype=np.float64)
    indices = np.arange(count)
    if behavior is ScrollBehavior.STICK_TO_START:
        raw = -prefix[np.minimum(indices, geometry.max_left_aligned_index)]
    elif behavior is ScrollBehavior.STICK_TO_END:
        raw = _stick_to_end(indices, prefix, extents, geometry)
    elif behavior is ScrollBehavior.CENTER:
        half = (
            geometry.visible_count // 2
            if center_threshold is None
            else max(0, int(center_threshold))
        )
        centered = -(prefix[:-1] - (geometry.viewport_extent - extents) / 2)
        tail = _stick_to_end(indices, prefix, extents, geometry)
        raw = np.where(indices < half, 0.0, np.where(indices >= count - half, tail, centered))
    else:
        visible = geometry.visible_count
        page_starts = (indices // visible) * visible
        left_aligned = np.minimum(page_starts, geometry.max_left_aligned_index)
        raw = -left_aligned * geometry.size_model.fixed_extent
    min_offset = -max(float(prefix[-1]) - geometry.viewport_extent, 0.0)
    # Adding 0.0 turns -0.0 into 0.0.
    return np.clip(raw, min_offset, 0.0) + 0.0


@dataclass(frozen=True, slots=True)
class OffsetTable:
    """Read-only offsets and item positions for every index of one list geometry."""

    behavior: ScrollBehavior
    geometry: ListGeometry
    offsets: np.ndarray
    positions: np.ndarray

    @classmethod
    def from_geometry(
        cls,
        geometry: ListGeometry,
        behavior: ScrollBehavior | str,
        *,
        center_threshold: int | None = None,
    ) -> OffsetTable:
        """Compute the offsets of all items in one O(N) prefix-sum pass."""
        resolved = check_behavior_support(behavior, geometry.size_model.is_fixed)
        started = perf_counter()
        extents = _extent_array(geometry)
        prefix = _prefix_sums(geometry, extents)
        offsets = _compute_offsets(resolved, geometry, extents, prefix, center_threshold)
        offsets.setflags(write=False)
        prefix.setflags(write=False)
        _LOG.debug(
            "offset_table_built items=%d behavior=%s elapsed_ms=%.3f",
            geometry.item_count,
            resolved.value,
            (perf_counter() - started) * 1000.0,
        )
        return cls(behavior=resolved, geometry=geometry, offsets=offsets, positions=prefix)

    @classmethod
    def build[T](
        cls,
        data: Sequence[T],
        behavior: ScrollBehavior | str,
        size_model: SizeModel[T],
        viewport_extent: float,
        *,
        total_count: int | None = None,
        center_threshold: int | None = None,
    ) -> OffsetTable:
        geometry = create_list_geometry(data, size_model, viewport_extent, total_count=total_count)
        return cls.from_geometry(geometry, behavior, center_threshold=center_threshold)

    def __len__(self) -> int:
        return int(self.offsets.shape[0])

    @property
    def total_extent(self) -> float:
        return float(self.positions[-1])

    def lookup(self, index: int) -> float:
        """Return the offset for ``index``, clamping stale indices to the list bounds."""
        if len(self) == 0:
            return 0.0
        return float(self.offsets[clamp_index(index, len(self))])

    def item_position(self, index: int) -> float:
        """Return the leading-edge coordinate of an item in content space."""
        if len(self) == 0:
            return 0.0
        return float(self.positions[clamp_index(index, len(self))])

    def index_at(self, position: float) -> int:
        """Return the index of the item covering a content coordinate."""
        if len(self) == 0:
            return 0
        found = int(np.searchsorted(self.positions, float(position), side="right")) - 1
        return clamp_index(found, len(self))


class OffsetTableCache:
    """Holds the current table and replaces it wholesale when inputs change.

    Tables are built outside the lock and published with a single swap, so a
    reader sees either the previous table or the complete new one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._table: OffsetTable | None = None
        self._key: Hashable | None = None
        self._rebuild_count = 0

    @property
    def current(self) -> OffsetTable | None:
        with self._lock:
            return self._table

    @property
    def rebuild_count(self) -> int:
        return self._rebuild_count

    def invalidate(self) -> None:
        """Drop the cached table so the next ``ensure`` rebuilds."""
        with self._lock:
            self._table = None
            self._key = None

    def ensure(
        self,
        geometry: ListGeometry,
        behavior: ScrollBehavior | str,
        *,
        center_threshold: int | None = None,
    ) -> OffsetTable:
        """Return a table for these inputs, rebuilding only if they changed."""
        resolved = parse_scroll_behavior(behavior)
        key = _cache_key(geometry, resolved, center_threshold)
        with self._lock:
            if self._table is not None and self._key == key:
                return self._table
        table = OffsetTable.from_geometry(geometry, resolved, center_threshold=center_threshold)
        with self._lock:
            self._table = table
            self._key = key
            self._rebuild_count += 1
        return table


def _cache_key(
    geometry: ListGeometry, behavior: ScrollBehavior, center_threshold: int | None
) -> Hashable:
    # The cached table keeps ``geometry.data`` alive, so its id is not reused.
    return (
        id(geometry.data),
        len(geometry.data),
        geometry.size_model,
        geometry.viewport_extent,
        geometry.item_count,
        behavior,
        center_threshold,
    )
