"""
Price normalization to an instrument's minimum tick.
"""

from __future__ import annotations

from decimal import Decimal


def _decimal(value: float) -> Decimal:
    # via str so 2.6 stays 2.6 rather than its binary expansion
    return Decimal(str(value))


def adjust_to_tick(price: float | None, min_tick: float | None) -> float | None:
    """
    Truncate price to a multiple of min_tick, e.g. (2.6, 0.25) -> 2.5.

    None or zero prices, and a missing or non-positive tick, return price unchanged.
    """
    if not price or not min_tick or min_tick <= 0:
        return price
    p = _decimal(price)
    _, remainder = divmod(p, _decimal(min_tick))
    return float(p - remainder)
