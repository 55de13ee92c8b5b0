"""Public virtualized list and grid contracts."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from spatialnav.virtualization.behavior import ScrollBehavior
from spatialnav.virtualization.errors import InvalidConfiguration
from spatialnav.virtualization.size_model import ItemExtent, SizeModel
from spatialnav.virtualization.window import RenderWindow

if TYPE_CHECKING:
    from spatialnav.diagnostics.hub import DiagnosticHub
    from spatialnav.runtime.config import VirtualizationConfig


class Orientation(StrEnum):
    """Scroll axis of a list."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def parse_orientation(raw: Orientation | str) -> Orientation:
    try:
        return Orientation(str(raw).strip().lower())
    except ValueError:
        raise InvalidConfiguration(f"unknown orientation: {raw!r}") from None


type KeyExtractor = Callable[[int], str]
type EndReachedCallback = Callable[[], None]


@dataclass(frozen=True, slots=True)
class RenderedItem[T]:
    """One materialized item and where the renderer should place it."""

    index: int
    key: str
    position: float
    item: T


@dataclass(frozen=True, slots=True)
class ListFrame[T]:
    """Everything the renderer needs after one focus or geometry change."""

    focus_index: int
    window: RenderWindow
    scroll_offset: float
    total_extent: float
    visible_count: int
    items: tuple[RenderedItem[T], ...]
    should_fetch_more: bool
    orientation: Orientation
    scroll_duration_ms: float

    @property
    def translation(self) -> tuple[float, float]:
        """Return the container translation as ``(x, y)``."""
        if self.orientation is Orientation.VERTICAL:
            return (0.0, self.scroll_offset)
        return (self.scroll_offset, 0.0)


@dataclass(frozen=True, slots=True)
class GridFrame[T]:
    """Grid output: the row-level list frame plus flat item coordinates."""

    focus_index: int
    row: int
    column: int
    rows: ListFrame[object]
    item_window: RenderWindow

    @property
    def scroll_offset(self) -> float:
        return self.rows.scroll_offset

    @property
    def should_fetch_more(self) -> bool:
        return self.rows.should_fetch_more


class VirtualizedList[T](Protocol):
    """Focus-driven virtualized list contract."""

    @property
    def focus_index(self) -> int:
        """Return the current focus index."""

    @property
    def frame(self) -> ListFrame[T]:
        """Return the latest computed frame."""

    def on_focus(self, index: int) -> ListFrame[T]:
        """React to a focus notification from the navigation engine."""

    def step(self, delta: int) -> ListFrame[T]:
        """Move focus by ``delta`` items, clamped to the data bounds."""

    def scroll_to(self, index: int) -> ListFrame[T]:
        """Focus ``index`` directly, e.g. to restore a remembered position."""

    def measure(
        self,
        measured: float | None,
        *,
        ancestor_extents: Iterable[float | None] = (),
        fallback: float | None = None,
    ) -> ListFrame[T]:
        """Apply a layout measurement with the small-viewport fallback."""

    def set_viewport_extent(self, extent: float) -> ListFrame[T]:
        """Apply a new viewport measurement."""

    def set_data(self, data: Sequence[T], *, total_count: int | None = None) -> ListFrame[T]:
        """Replace the item sequence."""


class VirtualizedGrid[T](Protocol):
    """Focus-driven virtualized grid contract."""

    @property
    def focus_index(self) -> int:
        """Return the current flat focus index."""

    @property
    def frame(self) -> GridFrame[T]:
        """Return the latest computed frame."""

    def on_focus(self, index: int) -> GridFrame[T]:
        """React to a flat-index focus notification."""

    def scroll_to(self, index: int) -> GridFrame[T]:
        """Focus the flat item ``index`` directly."""

    def measure(
        self,
        measured: float | None,
        *,
        ancestor_extents: Iterable[float | None] = (),
        fallback: float | None = None,
    ) -> GridFrame[T]:
        """Apply a layout measurement with the small-viewport fallback."""

    def set_viewport_extent(self, extent: float) -> GridFrame[T]:
        """Apply a new viewport measurement."""

    def set_data(self, data: Sequence[T], *, total_count: int | None = None) -> GridFrame[T]:
        """Replace the item sequence and re-chunk rows."""


def create_virtualized_list[T](
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
) -> VirtualizedList[T]:
    """Create the default virtualized list implementation."""
    from spatialnav.runtime.list_controller import VirtualizedListController

    return VirtualizedListController(
        data,
        item_extent,
        scroll_behavior=scroll_behavior,
        additional_items_rendered=additional_items_rendered,
        end_reached_threshold=end_reached_threshold,
        total_count=total_count,
        orientation=orientation,
        viewport_extent=viewport_extent,
        key_extractor=key_extractor,
        on_end_reached=on_end_reached,
        center_threshold=center_threshold,
        config=config,
        diagnostics=diagnostics,
    )


def create_virtualized_grid[T](
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
) -> VirtualizedGrid[T]:
    """Create the default virtualized grid implementation."""
    from spatialnav.runtime.grid_controller import VirtualizedGridController

    return VirtualizedGridController(
        data,
        columns=columns,
        row_extent=row_extent,
        header=header,
        header_extent=header_extent,
        scroll_behavior=scroll_behavior,
        additional_rows_rendered=additional_rows_rendered,
        end_reached_threshold_rows=end_reached_threshold_rows,
        total_count=total_count,
        viewport_extent=viewport_extent,
        on_end_reached=on_end_reached,
        center_threshold=center_threshold,
        config=config,
        diagnostics=diagnostics,
    )
