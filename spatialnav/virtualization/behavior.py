"""Scroll behavior tags."""

from __future__ import annotations

from enum import StrEnum

from spatialnav.virtualization.errors import InvalidConfiguration


class ScrollBehavior(StrEnum):
    """Policy governing how the scroll offset follows the focused item."""

    STICK_TO_START = "stick-to-start"
    STICK_TO_END = "stick-to-end"
    CENTER = "center"
    JUMP_ON_SCROLL = "jump-on-scroll"


def parse_scroll_behavior(raw: ScrollBehavior | str | None) -> ScrollBehavior:
    """Normalize a behavior tag, rejecting missing or unknown values."""
    if isinstance(raw, ScrollBehavior):
        return raw
    if raw is None:
        raise InvalidConfiguration("scroll behavior is required")
    normalized = str(raw).strip().lower().replace("_", "-")
    try:
        return ScrollBehavior(normalized)
    except ValueError:
        raise InvalidConfiguration(f"unknown scroll behavior: {raw!r}") from None
