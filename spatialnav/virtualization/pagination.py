"""Near-end-of-data pagination predicate."""

from __future__ import annotations


def should_fetch_more(focus_index: int, item_count: int, threshold_count: int) -> bool:
    """Return whether the focus is within ``threshold_count`` items of the end.

    Level-triggered: callers re-evaluate on every focus change and own any
    de-duplication of fetch requests.
    """
    if item_count <= 0:
        return False
    return focus_index >= max(item_count - 1 - max(0, threshold_count), 0)
