"""Scroll-offset policies mapping a focused index to a content translation.

Offsets are non-positive: they translate the content towards the leading
edge. Every policy result is clamped so the content never leaves a blank
gap before its first or after its last item.
"""

from __future__ import annotations

from collections.abc import Callable

from spatialnav.virtualization.behavior import ScrollBehavior, parse_scroll_behavior
from spatialnav.virtualization.errors import UnsupportedConfiguration
from spatialnav.virtualization.geometry import ListGeometry
from spatialnav.virtualization.window import clamp_index

type OffsetPolicy = Callable[[int, ListGeometry, int | None], float]


def stick_to_start_offset(index: int, geometry: ListGeometry) -> float:
    """Slide the focused item to the leading edge until the last page is reached."""
    aligned = min(index, geometry.max_left_aligned_index)
    return -geometry.cumulative(0, aligned)


def stick_to_end_offset(index: int, geometry: ListGeometry) -> float:
    """Pin the focused item to the trailing edge once it passes the first page."""
    if index <= geometry.max_right_aligned_index:
        return 0.0
    leading = geometry.cumulative(0, index)
    return -(leading + geometry.extent_at(index) - geometry.viewport_extent)


def center_offset(index: int, geometry: ListGeometry, *, threshold: int | None = None) -> float:
    """Keep the focused item centered, except in the free zones at both ends.

    ``threshold`` is the width of each free zone and defaults to half a page.
    """
    half = geometry.visible_count // 2 if threshold is None else max(0, int(threshold))
    if index < half:
        return 0.0
    if index >= geometry.item_count - half:
        return stick_to_end_offset(index, geometry)
    leading = geometry.cumulative(0, index)
    return -(leading - (geometry.viewport_extent - geometry.extent_at(index)) / 2)


def jump_on_scroll_offset(index: int, geometry: ListGeometry) -> float:
    """Snap to whole pages; the offset only changes at page boundaries."""
    if not geometry.size_model.is_fixed:
        raise UnsupportedConfiguration(
            "jump-on-scroll scroll behavior is not supported with dynamic item size"
        )
    visible = geometry.visible_count
    if visible <= 0:
        return 0.0
    page_start = (index // visible) * visible
    left_aligned = min(page_start, geometry.max_left_aligned_index)
    return -left_aligned * geometry.size_model.fixed_extent


_POLICIES: dict[ScrollBehavior, OffsetPolicy] = {
    ScrollBehavior.STICK_TO_START: lambda index, geometry, _: stick_to_start_offset(
        index, geometry
    ),
    ScrollBehavior.STICK_TO_END: lambda index, geometry, _: stick_to_end_offset(index, geometry),
    ScrollBehavior.CENTER: lambda index, geometry, threshold: center_offset(
        index, geometry, threshold=threshold
    ),
    ScrollBehavior.JUMP_ON_SCROLL: lambda index, geometry, _: jump_on_scroll_offset(
        index, geometry
    ),
}


def check_behavior_support(behavior: ScrollBehavior | str, fixed_extent: bool) -> ScrollBehavior:
    """Reject behavior/extent combinations at construction time."""
    resolved = parse_scroll_behavior(behavior)
    if resolved is ScrollBehavior.JUMP_ON_SCROLL and not fixed_extent:
        raise UnsupportedConfiguration(
            "jump-on-scroll scroll behavior is not supported with dynamic item size"
        )
    return resolved


def clamp_offset(offset: float, geometry: ListGeometry) -> float:
    """Clamp into ``[-(total - viewport), 0]`` and normalize negative zero."""
    return max(geometry.min_offset(), min(0.0, float(offset))) + 0.0


def compute_scroll_offset(
    behavior: ScrollBehavior | str,
    index: int,
    geometry: ListGeometry,
    *,
    center_threshold: int | None = None,
) -> float:
    """Return the scroll offset for ``index`` under ``behavior``."""
    resolved = parse_scroll_behavior(behavior)
    if geometry.item_count <= 0 or geometry.visible_count <= 0:
        check_behavior_support(resolved, geometry.size_model.is_fixed)
        return 0.0
    focus = clamp_index(index, geometry.item_count)
    raw = _POLICIES[resolved](focus, geometry, center_threshold)
    return clamp_offset(raw, geometry)
