"""Render-window computation for virtualized lists."""

from __future__ import annotations

from dataclasses import dataclass

from spatialnav.virtualization.behavior import ScrollBehavior


@dataclass(frozen=True, slots=True)
class RenderWindow:
    """Half-open range of item indices to materialize."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.end

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def indices(self) -> range:
        """Return the window as a ``range`` of item indices."""
        return range(self.start, self.end)


EMPTY_WINDOW = RenderWindow(0, 0)


def overscan_count(
    behavior: ScrollBehavior, visible_count: int, additional_rendered: int
) -> int:
    """Return how many items a list renders for a behavior.

    Jump-on-scroll always double-buffers full pages so the snap to the next
    page never exposes unmounted items.
    """
    visible = max(0, int(visible_count))
    if behavior is ScrollBehavior.JUMP_ON_SCROLL:
        return 2 * visible
    return visible + 2 * max(0, int(additional_rendered))


def clamp_index(index: int, item_count: int) -> int:
    """Clamp a possibly stale index into ``[0, item_count)``."""
    if item_count <= 0:
        return 0
    return max(0, min(int(index), item_count - 1))


def compute_render_window(item_count: int, focus_index: int, window_size: int) -> RenderWindow:
    """Return the window of ``window_size`` items centered on the focus.

    The window is clamped to the list bounds, so near either end it shifts
    rather than shrinks.
    """
    count = max(0, int(item_count))
    size = int(window_size)
    if count == 0 or size <= 0:
        return EMPTY_WINDOW
    focus = clamp_index(focus_index, count)
    max_start = max(count - size, 0)
    start = max(0, min(focus - size // 2, max_start))
    return RenderWindow(start=start, end=min(start + size, count))
