"""Foliar moisture content (ST-X-3 Eqs. 1-8)."""

from __future__ import annotations

import math


def foliar_moisture_content(
    lat: float,
    long: float,
    elv: float,
    dj: int,
    d0: float | None = None,
) -> float:
    """Calculate foliar moisture content on a given day.

    Args:
        lat: Latitude (decimal degrees)
        long: Longitude (decimal degrees). Western longitudes may be given
            either positive or negative.
        elv: Elevation (m). Zero or negative means unknown.
        dj: Day of year
        d0: Date of minimum FMC (day of year). None or <= 0 estimates it
            from location.

    Returns:
        FMC (%)
    """
    long = abs(long)

    if d0 is None or d0 <= 0:
        if elv <= 0:
            latn = 46.0 + 23.4 * math.exp(-0.0360 * (150.0 - long))
            d0 = 151.0 * (lat / latn)
        else:
            latn = 43.0 + 33.7 * math.exp(-0.0351 * (150.0 - long))
            d0 = 142.1 * (lat / latn) + 0.0172 * elv

    # D0 is a date, rounded half up
    d0 = math.floor(d0 + 0.5)
    nd = abs(dj - d0)

    if nd < 30:
        return 85.0 + 0.0189 * nd**2
    if nd < 50:
        return 32.9 + 3.17 * nd - 0.0288 * nd**2
    return 120.0
