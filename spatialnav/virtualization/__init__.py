"""Pure virtualization and scroll-offset helpers."""

from spatialnav.virtualization.behavior import ScrollBehavior, parse_scroll_behavior
from spatialnav.virtualization.errors import (
    InvalidConfiguration,
    UnsupportedConfiguration,
    VirtualizationError,
)
from spatialnav.virtualization.geometry import ListGeometry, create_list_geometry
from spatialnav.virtualization.grid import GridHeader, GridRow, GridRows, chunk
from spatialnav.virtualization.offset_table import OffsetTable, OffsetTableCache
from spatialnav.virtualization.pagination import should_fetch_more
from spatialnav.virtualization.scroll_offset import (
    center_offset,
    compute_scroll_offset,
    jump_on_scroll_offset,
    stick_to_end_offset,
    stick_to_start_offset,
)
from spatialnav.virtualization.size_model import SizeModel, create_size_model
from spatialnav.virtualization.window import (
    EMPTY_WINDOW,
    RenderWindow,
    clamp_index,
    compute_render_window,
    overscan_count,
)

__all__ = [
    "EMPTY_WINDOW",
    "GridHeader",
    "GridRow",
    "GridRows",
    "InvalidConfiguration",
    "ListGeometry",
    "OffsetTable",
    "OffsetTableCache",
    "RenderWindow",
    "ScrollBehavior",
    "SizeModel",
    "UnsupportedConfiguration",
    "VirtualizationError",
    "center_offset",
    "chunk",
    "clamp_index",
    "compute_render_window",
    "compute_scroll_offset",
    "create_list_geometry",
    "create_size_model",
    "jump_on_scroll_offset",
    "overscan_count",
    "parse_scroll_behavior",
    "should_fetch_more",
    "stick_to_end_offset",
    "stick_to_start_offset",
]
