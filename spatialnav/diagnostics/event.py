"""Structured diagnostics event schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class DiagnosticEvent:
    """Single structured diagnostics event.

    ``tick`` counts recomputations of the emitting list, not wall-clock frames.
    """

    ts_utc: str
    tick: int
    category: str
    name: str
    value: float | int | str | bool | dict[str, Any] | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


def utc_now_iso() -> str:
    """Return an RFC3339-like UTC timestamp with milliseconds."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds")
