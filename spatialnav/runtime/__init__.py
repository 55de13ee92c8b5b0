"""Runtime adapters, configuration, and logging."""

from spatialnav.runtime.config import VirtualizationConfig, load_virtualization_config
from spatialnav.runtime.grid_controller import VirtualizedGridController
from spatialnav.runtime.list_controller import VirtualizedListController
from spatialnav.runtime.logging import (
    apply_package_log_level,
    configure_logging,
    setup_logging,
    shutdown_logging,
)
from spatialnav.runtime.measurement import resolve_viewport_extent

__all__ = [
    "VirtualizationConfig",
    "VirtualizedGridController",
    "VirtualizedListController",
    "apply_package_log_level",
    "configure_logging",
    "load_virtualization_config",
    "resolve_viewport_extent",
    "setup_logging",
    "shutdown_logging",
]
