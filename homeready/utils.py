"""Assorted utility helpers."""
from __future__ import annotations

import math


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Values coming from the UI may be ``None`` or ``NaN`` when a field was
    left blank; this keeps later math from breaking.
    """

    try:
        if x is None or (isinstance(x, float) and math.isnan(x)):
            return default
        return float(x)
    except (TypeError, ValueError):
        return default


def round_half_up(x) -> int:
    """Round to the nearest whole number, halves away from zero for positives."""
    return int(math.floor(nz(x) + 0.5))


def round_to_step(x, step=5000) -> int:
    """Round ``x`` to the nearest multiple of ``step``."""
    return round_half_up(nz(x) / step) * step


def format_currency(amount) -> str:
    """Compact dollar formatting: ``$1.2M``, ``$45k``, ``$500``."""
    a = nz(amount)
    if a >= 1000000:
        return f"${a / 1000000:.1f}M"
    if a >= 1000:
        return f"${round_half_up(a / 1000)}k"
    return f"${round_half_up(a)}"


def format_pct(fraction) -> str:
    """``0.035`` -> ``3.5%``."""
    return f"{round(nz(fraction) * 100, 2):g}%"
