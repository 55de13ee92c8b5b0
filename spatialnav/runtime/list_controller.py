"""Adapter turning focus notifications and measurements into list frames."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from spatialnav.api.virtualization import (
    EndReachedCallback,
    KeyExtractor,
    ListFrame,
    Orientation,
    RenderedItem,
    parse_orientation,
)
from spatialnav.diagnostics.hub import DiagnosticHub
from spatialnav.runtime.config import VirtualizationConfig, load_virtualization_config
from spatialnav.runtime.errors import RECOVERABLE_CALLBACK_ERRORS, log_recoverable
from spatialnav.runtime.logging import apply_package_log_level
from spatialnav.runtime.measurement import resolve_viewport_extent
from spatialnav.virtualization.behavior import ScrollBehavior, parse_scroll_behavior
from spatialnav.virtualization.errors import InvalidConfiguration, VirtualizationError
from spatialnav.virtualization.geometry import create_list_geometry, resolve_item_count
from spatialnav.virtualization.offset_table import OffsetTable, OffsetTableCache
from spatialnav.virtualization.pagination import should_fetch_more
from spatialnav.virtualization.scroll_offset import check_behavior_support
from spatialnav.virtualization.size_model import ItemExtent, SizeModel, create_size_model
from spatialnav.virtualization.window import (
    EMPTY_WINDOW,
    RenderWindow,
    clamp_index,
    compute_render_window,
    overscan_count,
)

_LOG = logging.getLogger("spatialnav.runtime")


def default_key_extractor(index: int) -> str:
    return f"item_{index}"


def _non_negative(name: str, value: int) -> int:
    if isinstance(value, bool) or int(value) != value or value < 0:
        raise InvalidConfiguration(f"{name} must be a non-negative integer: {value!r}")
    return int(value)


class VirtualizedListController[T]:
    """Stateful list adapter over the pure virtualization core.

    Every focus or geometry change recomputes exactly one frame; repeated
    notifications with unchanged inputs return the cached frame.
    """

    def __init__(
        self,
        data: Sequence[T],
        item_extent: ItemExtent[T] | SizeModel[T],
        *,
        scroll_behavior: ScrollBehavior | str | None = None,
        additional_items_rendered: int | None = None,
        end_reached_threshold: int | None = None,
        total_count: int | None = None,
        orientation: Orientation | str = Orientation.HORIZONTAL,
        viewport_extent: float = 0.0,
        key_extractor: KeyExtractor | None = None,
        on_end_reached: EndReachedCallback | None = None,
        center_threshold: int | None = None,
        config: VirtualizationConfig | None = None,
        diagnostics: DiagnosticHub | None = None,
    ) -> None:
        cfg = config if config is not None else load_virtualization_config()
        apply_package_log_level(cfg)
        self._size_model: SizeModel[T] = create_size_model(item_extent)
        behavior = cfg.scroll_behavior if scroll_behavior is None else scroll_behavior
        self._behavior = check_behavior_support(
            parse_scroll_behavior(behavior), self._size_model.is_fixed
        )
        self._additional = _non_negative(
            "additional_items_rendered",
            cfg.additional_items_rendered
            if additional_items_rendered is None
            else additional_items_rendered,
        )
        self._threshold = _non_negative(
            "end_reached_threshold",
            cfg.end_reached_threshold if end_reached_threshold is None else end_reached_threshold,
        )
        self._center_threshold = (
            None
            if center_threshold is None
            else _non_negative("center_threshold", center_threshold)
        )
        self._orientation = parse_orientation(orientation)
        self._scroll_duration_ms = cfg.scroll_duration_ms
        self._key_extractor = key_extractor or default_key_extractor
        self._on_end_reached = on_end_reached
        if diagnostics is None and cfg.diagnostics_enabled:
            diagnostics = DiagnosticHub(capacity=cfg.diagnostics_capacity)
        self._diagnostics = diagnostics
        self._min_viewport_extent = cfg.min_viewport_extent
        self._data: Sequence[T] = data
        self._total_count = total_count
        resolve_item_count(data, self._size_model, total_count)
        self._viewport_extent = max(0.0, float(viewport_extent))
        self._focus_index = 0
        self._tables = OffsetTableCache()
        self._tick = 0
        self._notifying = False
        self._frame: ListFrame[T] = self._recompute()
        self._publish(self._frame)

    @property
    def behavior(self) -> ScrollBehavior:
        return self._behavior

    @property
    def focus_index(self) -> int:
        return self._focus_index

    @property
    def viewport_extent(self) -> float:
        return self._viewport_extent

    @property
    def data(self) -> Sequence[T]:
        return self._data

    @property
    def frame(self) -> ListFrame[T]:
        return self._frame

    @property
    def offset_table(self) -> OffsetTable | None:
        return self._tables.current

    @property
    def diagnostics(self) -> DiagnosticHub | None:
        return self._diagnostics

    def on_focus(self, index: int) -> ListFrame[T]:
        """Apply a focus notification; stale indices are clamped."""
        focus = clamp_index(index, len(self._data))
        if focus == self._focus_index:
            return self._frame
        self._focus_index = focus
        return self._publish(self._recompute())

    def step(self, delta: int) -> ListFrame[T]:
        """Move the focus by ``delta`` items, e.g. from pointer scroll arrows."""
        return self.on_focus(self._focus_index + int(delta))

    def scroll_to(self, index: int) -> ListFrame[T]:
        return self.on_focus(index)

    def set_viewport_extent(self, extent: float) -> ListFrame[T]:
        viewport = max(0.0, float(extent))
        if viewport == self._viewport_extent:
            return self._frame
        self._viewport_extent = viewport
        return self._publish(self._recompute())

    def measure(
        self,
        measured: float | None,
        *,
        ancestor_extents: Iterable[float | None] = (),
        fallback: float | None = None,
    ) -> ListFrame[T]:
        """Apply a layout measurement, falling back when it is implausibly small."""
        extent = resolve_viewport_extent(
            measured,
            ancestor_extents=ancestor_extents,
            fallback=fallback,
            minimum=self._min_viewport_extent,
        )
        return self.set_viewport_extent(extent)

    def set_data(self, data: Sequence[T], *, total_count: int | None = None) -> ListFrame[T]:
        """Replace the items; the offset table is always rebuilt."""
        resolve_item_count(data, self._size_model, total_count)
        self._data = data
        self._total_count = total_count
        self._focus_index = clamp_index(self._focus_index, len(data))
        self._tables.invalidate()
        return self._publish(self._recompute())

    def set_item_extent(self, item_extent: ItemExtent[T] | SizeModel[T]) -> ListFrame[T]:
        size_model = create_size_model(item_extent)
        check_behavior_support(self._behavior, size_model.is_fixed)
        resolve_item_count(self._data, size_model, self._total_count)
        self._size_model = size_model
        return self._publish(self._recompute())

    def _recompute(self) -> ListFrame[T]:
        self._tick += 1
        geometry = create_list_geometry(
            self._data, self._size_model, self._viewport_extent, total_count=self._total_count
        )
        rebuilds = self._tables.rebuild_count
        table = self._tables.ensure(
            geometry, self._behavior, center_threshold=self._center_threshold
        )
        if self._tables.rebuild_count != rebuilds:
            self._emit(
                "virtualization",
                "virtualization.table_rebuild",
                {"items": len(table), "behavior": self._behavior.value},
            )
        window = self._render_window(geometry.visible_count)
        items = tuple(
            RenderedItem(
                index=index,
                key=self._key_extractor(index),
                position=table.item_position(index),
                item=self._data[index],
            )
            for index in window.indices()
        )
        fetch = not window.is_empty and should_fetch_more(
            self._focus_index, len(self._data), self._threshold
        )
        frame = ListFrame(
            focus_index=self._focus_index,
            window=window,
            scroll_offset=table.lookup(self._focus_index),
            total_extent=table.total_extent,
            visible_count=geometry.visible_count,
            items=items,
            should_fetch_more=fetch,
            orientation=self._orientation,
            scroll_duration_ms=self._scroll_duration_ms,
        )
        _LOG.debug(
            "list_frame focus=%d start=%d end=%d offset=%.1f visible=%d",
            frame.focus_index,
            window.start,
            window.end,
            frame.scroll_offset,
            frame.visible_count,
        )
        self._emit(
            "virtualization",
            "virtualization.frame",
            {
                "focus": frame.focus_index,
                "start": window.start,
                "end": window.end,
                "offset": frame.scroll_offset,
            },
        )
        return frame

    def _publish(self, frame: ListFrame[T]) -> ListFrame[T]:
        """Store the frame, then let the end-reached callback react to it.

        The callback may replace the data; the frame it produces wins.
        """
        self._frame = frame
        if frame.should_fetch_more and not self._notifying:
            self._notify_end_reached()
        return self._frame

    def _render_window(self, visible_count: int) -> RenderWindow:
        if self._viewport_extent <= 0 or not self._data:
            return EMPTY_WINDOW
        size = overscan_count(self._behavior, visible_count, self._additional)
        return compute_render_window(len(self._data), self._focus_index, size)

    def _notify_end_reached(self) -> None:
        callback = self._on_end_reached
        if callback is None:
            return
        self._emit(
            "pagination",
            "pagination.end_reached",
            {"focus": self._focus_index, "items": len(self._data)},
        )
        self._notifying = True
        try:
            callback()
        except VirtualizationError:
            raise
        except RECOVERABLE_CALLBACK_ERRORS:
            log_recoverable(_LOG, "end_reached_callback_failed focus=%d", self._focus_index)
        finally:
            self._notifying = False

    def _emit(self, category: str, name: str, value: dict[str, object]) -> None:
        if self._diagnostics is None:
            return
        self._diagnostics.emit(category=category, name=name, tick=self._tick, value=value)
