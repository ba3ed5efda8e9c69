"""Amount coercion and safe ratio helpers.

All report code goes through ``coerce_amount`` so malformed stored amounts
are handled in one place: they count as zero and are reported back to the
caller as anomalies instead of failing the report.
"""
from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")


def coerce_amount(raw) -> tuple[Decimal, bool]:
    """Parse a stored amount.

    Returns:
        (value, was_anomalous). ``None``, empty strings, non-numeric text,
        NaN and infinities all give ``(Decimal("0"), True)``.
    """
    if raw is None or isinstance(raw, bool):
        return ZERO, True
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, int):
        return Decimal(raw), False
    elif isinstance(raw, float):
        if not math.isfinite(raw):
            return ZERO, True
        value = Decimal(str(raw))
    else:
        try:
            value = Decimal(str(raw).strip())
        except (InvalidOperation, ValueError):
            return ZERO, True
    if not value.is_finite():
        return ZERO, True
    return value, False


def percentage(part: float | Decimal, whole: float | Decimal, places: int = 1) -> float:
    """part / whole * 100 rounded; 0 when whole is 0."""
    if not whole:
        return 0.0
    return round(float(part) / float(whole) * 100, places)


def percent_change(previous: float, current: float) -> float:
    """Relative change from previous to current, in percent.

    previous == 0 gives 100 when current > 0 and 0 otherwise.
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return round((current - previous) / abs(previous) * 100, 2)
