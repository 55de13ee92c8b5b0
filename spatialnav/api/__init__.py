"""Public spatialnav API contracts."""

from spatialnav.api.logging import LoggingConfig
from spatialnav.api.virtualization import (
    GridFrame,
    ListFrame,
    Orientation,
    RenderedItem,
    VirtualizedGrid,
    VirtualizedList,
    create_virtualized_grid,
    create_virtualized_list,
)

__all__ = [
    "GridFrame",
    "ListFrame",
    "LoggingConfig",
    "Orientation",
    "RenderedItem",
    "VirtualizedGrid",
    "VirtualizedList",
    "create_virtualized_grid",
    "create_virtualized_list",
]
