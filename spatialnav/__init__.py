"""TV-remote list and grid virtualization."""

from spatialnav.api import create_virtualized_grid, create_virtualized_list
from spatialnav.virtualization import (
    InvalidConfiguration,
    ScrollBehavior,
    UnsupportedConfiguration,
)

__all__ = [
    "InvalidConfiguration",
    "ScrollBehavior",
    "UnsupportedConfiguration",
    "create_virtualized_grid",
    "create_virtualized_list",
]
