from __future__ import annotations

import pytest

from spatialnav.virtualization.behavior import ScrollBehavior, parse_scroll_behavior
from spatialnav.virtualization.errors import InvalidConfiguration


def test_parse_scroll_behavior_normalizes_tags() -> None:
    assert parse_scroll_behavior("center") is ScrollBehavior.CENTER
    assert parse_scroll_behavior(" Stick-To-End ") is ScrollBehavior.STICK_TO_END
    assert parse_scroll_behavior("jump_on_scroll") is ScrollBehavior.JUMP_ON_SCROLL
    assert parse_scroll_behavior(ScrollBehavior.STICK_TO_START) is ScrollBehavior.STICK_TO_START


def test_parse_scroll_behavior_rejects_missing_and_unknown() -> None:
    with pytest.raises(InvalidConfiguration):
        parse_scroll_behavior(None)
    with pytest.raises(InvalidConfiguration):
        parse_scroll_behavior("bounce")
