"""Virtualization diagnostics package."""

from spatialnav.diagnostics.event import DiagnosticEvent
from spatialnav.diagnostics.hub import DiagnosticHub

__all__ = ["DiagnosticEvent", "DiagnosticHub"]
