"""Virtualization error taxonomy."""

from __future__ import annotations


class VirtualizationError(Exception):
    """Base class for virtualization configuration failures."""


class InvalidConfiguration(VirtualizationError, ValueError):
    """Raised when a list or grid is configured with inconsistent inputs."""


class UnsupportedConfiguration(VirtualizationError, ValueError):
    """Raised when valid options are combined in a way no policy supports."""
