"""Grid adapter: rows are windowed by a vertical list controller."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from spatialnav.api.virtualization import EndReachedCallback, GridFrame, ListFrame, Orientation
from spatialnav.diagnostics.hub import DiagnosticHub
from spatialnav.runtime.config import VirtualizationConfig
from spatialnav.runtime.list_controller import VirtualizedListController
from spatialnav.virtualization.behavior import ScrollBehavior
from spatialnav.virtualization.grid import GridEntry, GridRows, chunk
from spatialnav.virtualization.window import RenderWindow, clamp_index


def _row_key(index: int) -> str:
    return f"row_{index}"


class VirtualizedGridController[T]:
    """Stateful grid adapter; focus is expressed as a flat item index."""

    def __init__(
        self,
        data: Sequence[T],
        *,
        columns: int,
        row_extent: float,
        header: object | None = None,
        header_extent: float | None = None,
        scroll_behavior: ScrollBehavior | str | None = None,
        additional_rows_rendered: int | None = None,
        end_reached_threshold_rows: int | None = None,
        total_count: int | None = None,
        viewport_extent: float = 0.0,
        on_end_reached: EndReachedCallback | None = None,
        center_threshold: int | None = None,
        config: VirtualizationConfig | None = None,
        diagnostics: DiagnosticHub | None = None,
    ) -> None:
        self._header = header
        self._header_extent = header_extent
        self._data: Sequence[T] = data
        self._grid: GridRows[T] = chunk(data, columns, header, header_extent)
        self._focus_index = 0
        self._rows: VirtualizedListController[GridEntry[T]] = VirtualizedListController(
            self._grid.entries,
            self._grid.size_model(row_extent),
            scroll_behavior=scroll_behavior,
            additional_items_rendered=additional_rows_rendered,
            end_reached_threshold=end_reached_threshold_rows,
            total_count=self._row_total(total_count),
            orientation=Orientation.VERTICAL,
            viewport_extent=viewport_extent,
            key_extractor=_row_key,
            on_end_reached=on_end_reached,
            center_threshold=center_threshold,
            config=config,
            diagnostics=diagnostics,
        )
        self._frame: GridFrame[T] = self._build_frame(self._rows.frame)

    @property
    def columns(self) -> int:
        return self._grid.columns

    @property
    def grid(self) -> GridRows[T]:
        return self._grid

    @property
    def rows(self) -> VirtualizedListController[GridEntry[T]]:
        return self._rows

    @property
    def focus_index(self) -> int:
        return self._focus_index

    @property
    def frame(self) -> GridFrame[T]:
        return self._frame

    def on_focus(self, index: int) -> GridFrame[T]:
        """Apply a flat-index focus notification."""
        self._focus_index = clamp_index(index, len(self._data))
        self._rows.on_focus(self._grid.row_of(self._focus_index))
        self._frame = self._build_frame(self._rows.frame)
        return self._frame

    def scroll_to(self, index: int) -> GridFrame[T]:
        return self.on_focus(index)

    def focus_row(self, row_index: int) -> GridFrame[T]:
        """Focus a logical row directly, e.g. when the header gains focus."""
        row = clamp_index(row_index, len(self._grid))
        if row >= self._grid.header_offset and self._data:
            flat = self._grid.flat_index(row, self._frame.column)
            self._focus_index = clamp_index(flat, len(self._data))
        self._rows.on_focus(row)
        self._frame = self._build_frame(self._rows.frame)
        return self._frame

    def set_viewport_extent(self, extent: float) -> GridFrame[T]:
        self._rows.set_viewport_extent(extent)
        self._frame = self._build_frame(self._rows.frame)
        return self._frame

    def measure(
        self,
        measured: float | None,
        *,
        ancestor_extents: Iterable[float | None] = (),
        fallback: float | None = None,
    ) -> GridFrame[T]:
        self._rows.measure(measured, ancestor_extents=ancestor_extents, fallback=fallback)
        self._frame = self._build_frame(self._rows.frame)
        return self._frame

    def set_data(self, data: Sequence[T], *, total_count: int | None = None) -> GridFrame[T]:
        """Replace items and re-chunk them with the same columns and header."""
        self._data = data
        self._grid = chunk(data, self._grid.columns, self._header, self._header_extent)
        self._focus_index = clamp_index(self._focus_index, len(data))
        self._rows.set_data(self._grid.entries, total_count=self._row_total(total_count))
        return self.on_focus(self._focus_index)

    def _row_total(self, total_count: int | None) -> int | None:
        if total_count is None:
            return None
        return self._grid.row_count_for(max(int(total_count), len(self._data)))

    def _build_frame(self, row_frame: ListFrame[GridEntry[T]]) -> GridFrame[T]:
        row, column = self._grid.locate(self._focus_index)
        if row_frame.focus_index < self._grid.header_offset:
            row = row_frame.focus_index
        return GridFrame(
            focus_index=self._focus_index,
            row=row,
            column=column,
            rows=row_frame,
            item_window=self._item_window(row_frame.window),
        )

    def _item_window(self, row_window: RenderWindow) -> RenderWindow:
        """Return the flat item range covered by a window of logical rows."""
        if row_window.is_empty:
            return RenderWindow(0, 0)
        offset = self._grid.header_offset
        first_row = max(row_window.start - offset, 0)
        last_row = max(row_window.end - offset, 0)
        start = min(first_row * self._grid.columns, len(self._data))
        end = min(last_row * self._grid.columns, len(self._data))
        return RenderWindow(start, max(start, end))
