"""Environment-sourced defaults for virtualized lists and grids."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from spatialnav.virtualization.behavior import ScrollBehavior, parse_scroll_behavior


@dataclass(frozen=True, slots=True)
class VirtualizationConfig:
    """Immutable defaults applied when a list is built without explicit options."""

    scroll_behavior: ScrollBehavior = ScrollBehavior.STICK_TO_START
    additional_items_rendered: int = 2
    end_reached_threshold: int = 3
    scroll_duration_ms: float = 200.0
    min_viewport_extent: float = 100.0
    diagnostics_enabled: bool = False
    diagnostics_capacity: int = 1_000
    log_level: str | None = None


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def resolve_log_level_name(
    default: str = "INFO", *, env: Mapping[str, str] | None = None
) -> str:
    """Resolve log level with the package-prefixed variable taking precedence."""
    value = _raw("SPATIALNAV_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def _log_level_override(*, env: Mapping[str, str] | None = None) -> str | None:
    if _raw("SPATIALNAV_LOG_LEVEL", env=env) is None and _raw("LOG_LEVEL", env=env) is None:
        return None
    return resolve_log_level_name(env=env)


def load_virtualization_config(*, env: Mapping[str, str] | None = None) -> VirtualizationConfig:
    """Load configuration from env vars; an unknown behavior tag is rejected."""
    defaults = VirtualizationConfig()
    raw_behavior = _raw("SPATIALNAV_SCROLL_BEHAVIOR", env=env)
    behavior = (
        defaults.scroll_behavior
        if raw_behavior is None or not raw_behavior.strip()
        else parse_scroll_behavior(raw_behavior)
    )
    return VirtualizationConfig(
        scroll_behavior=behavior,
        additional_items_rendered=_int(
            "SPATIALNAV_ADDITIONAL_ITEMS_RENDERED",
            defaults.additional_items_rendered,
            minimum=0,
            env=env,
        ),
        end_reached_threshold=_int(
            "SPATIALNAV_END_REACHED_THRESHOLD", defaults.end_reached_threshold, minimum=0, env=env
        ),
        scroll_duration_ms=_float(
            "SPATIALNAV_SCROLL_DURATION_MS", defaults.scroll_duration_ms, minimum=0.0, env=env
        ),
        min_viewport_extent=_float(
            "SPATIALNAV_MIN_VIEWPORT_EXTENT", defaults.min_viewport_extent, minimum=0.0, env=env
        ),
        diagnostics_enabled=_flag("SPATIALNAV_DIAGNOSTICS", defaults.diagnostics_enabled, env=env),
        diagnostics_capacity=_int(
            "SPATIALNAV_DIAGNOSTICS_CAPACITY", defaults.diagnostics_capacity, minimum=1, env=env
        ),
        log_level=_log_level_override(env=env),
    )
