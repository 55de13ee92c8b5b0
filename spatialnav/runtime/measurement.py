"""Viewport measurement fallback for hosts whose layout reports bogus sizes."""

from __future__ import annotations

import logging
from collections.abc import Iterable

_LOG = logging.getLogger("spatialnav.runtime.measurement")

DEFAULT_MIN_VIEWPORT_EXTENT = 100.0


def resolve_viewport_extent(
    measured: float | None,
    *,
    ancestor_extents: Iterable[float | None] = (),
    fallback: float | None = None,
    minimum: float = DEFAULT_MIN_VIEWPORT_EXTENT,
) -> float:
    """Return a usable viewport extent, or 0 when it is still unknown.

    A measurement below ``minimum`` usually means the layout has not settled.
    Ancestors are tried innermost first, then the explicit fallback.
    """
    value = float(measured or 0.0)
    if value >= minimum:
        return value
    for depth, ancestor in enumerate(ancestor_extents):
        extent = float(ancestor or 0.0)
        if extent >= minimum:
            _LOG.warning(
                "viewport_measurement_fallback source=ancestor depth=%d measured=%.1f extent=%.1f",
                depth,
                value,
                extent,
            )
            return extent
    if fallback is not None and fallback >= minimum:
        _LOG.warning(
            "viewport_measurement_fallback source=explicit measured=%.1f extent=%.1f",
            value,
            float(fallback),
        )
        return float(fallback)
    _LOG.debug("viewport_measurement_unknown measured=%.1f", value)
    return 0.0
