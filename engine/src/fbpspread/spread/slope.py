"""Slope-adjusted net effective wind speed and spread direction.

The slope effect is expressed as an equivalent wind. The zero-wind,
flat-ground spread rate is amplified by the ST-X-3 slope factor; the spread
curve of the same fuel type is then inverted to find the flat-ground ISI
that would give that rate, and the ISI wind function is inverted to turn
that ISI into a wind speed. The slope-equivalent wind is vector-summed with
the real wind.

References:
    Forestry Canada Fire Danger Group (1992). ST-X-3, Eqs. 39-50.
    Wotton, B.M., Alexander, M.E., Taylor, S.W. (2009). GLC-X-10.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from numba import jit

from fbpspread.fbp.calculator import grass_curing_factor, rate_of_spread
from fbpspread.fbp.constants import (
    GRASS_FUEL_TYPES,
    NON_FUEL_TYPES,
    FuelType,
    get_fuel_spec,
)
from fbpspread.fwi.indices import calculate_isi, fine_fuel_effect
from fbpspread.types import SlopeInputs, SlopeResult, SpreadInputs

logger = logging.getLogger(__name__)

# Equivalent wind speed at which the high-wind ISI branch saturates (km/h).
MAX_EQUIVALENT_WIND = 112.45

# Net wind speeds below this are treated as calm (km/h).
CALM_WIND = 1e-9


@jit(nopython=True, cache=True)
def slope_factor(ground_slope: float) -> float:
    """ST-X-3 Eq. 39 slope factor, held at 10 from 70% slope upward.

    Args:
        ground_slope: Ground slope (%)

    Returns:
        Spread rate multiplier
    """
    if ground_slope >= 70.0:
        return 10.0
    return math.exp(3.533 * (ground_slope / 100.0) ** 1.2)


@jit(nopython=True, cache=True, error_model="numpy")
def invert_spread_curve(rsf: float, a: float, b: float, c0: float) -> float:
    """Flat-ground ISI that gives spread rate rsf on a(1 - exp(-b*ISI))^c0.

    The log argument is held at 0.01 or above so the inversion stays finite
    as rsf approaches the curve asymptote a.
    """
    x = 1.0 - (rsf / a) ** (1.0 / c0)
    if x < 0.01:
        x = 0.01
    return math.log(x) / -b


@jit(nopython=True, cache=True, error_model="numpy")
def equivalent_wind_speed(isf: float, ff: float) -> float:
    """Invert ISI = 0.208 * f(W) * f(F) for the wind speed (km/h).

    Uses the exponential wind function first and falls back to the
    ST-X-3 Eq. 53a branch above 40 km/h.
    """
    wse = 1.0 / 0.05039 * math.log(isf / (0.208 * ff))
    if wse > 40.0:
        # Empirical boundary kept as published; the high-wind branch has no
        # real solution above 2.496 * f(F).
        if isf < 0.999 * 2.496 * ff:
            wse = 28.0 - 1.0 / 0.0818 * math.log(1.0 - isf / (2.496 * ff))
        else:
            wse = MAX_EQUIVALENT_WIND
    return wse


@jit(nopython=True, cache=True, error_model="numpy")
def compose_wind_vector(
    ws: float, waz: float, wse: float, saz: float
) -> tuple[float, float]:
    """Vector sum of real wind and slope-equivalent wind.

    Returns:
        (net effective wind speed km/h, spread azimuth radians in [0, 2*pi))
    """
    wsx = ws * math.sin(waz) + wse * math.sin(saz)
    wsy = ws * math.cos(waz) + wse * math.cos(saz)
    wsv = math.sqrt(wsx * wsx + wsy * wsy)
    # calm: spread follows the wind azimuth
    if wsv < CALM_WIND:
        return 0.0, float(waz)
    cos_raz = wsy / wsv
    # rounding can push the ratio just past +/-1
    if cos_raz > 1.0:
        cos_raz = 1.0
    elif cos_raz < -1.0:
        cos_raz = -1.0
    raz = math.acos(cos_raz)
    # acos only covers [0, pi]
    if wsx < 0.0:
        raz = 2.0 * math.pi - raz
    return wsv, raz


def _slope_rate(base: SpreadInputs, sf: float, **changes) -> float:
    """Zero-wind raw ROS amplified by slope."""
    return rate_of_spread(replace(base, **changes), apply_buildup_effect=False) * sf


def _invert_for(fuel: FuelType, rsf: float) -> float:
    spec = get_fuel_spec(fuel)
    return invert_spread_curve(rsf, spec.a, spec.b, spec.c0)


def flat_ground_isi(inputs: SlopeInputs) -> float | None:
    """ISI on flat ground that reproduces the slope-amplified spread rate.

    Returns:
        ISF, or None for non-fuel
    """
    fuel = FuelType(inputs.fuel_type)
    if fuel in NON_FUEL_TYPES:
        return None

    sf = slope_factor(inputs.ground_slope)
    base = inputs.spread_inputs(calculate_isi(inputs.ffmc, 0.0))

    if fuel in (FuelType.M1, FuelType.M2):
        isf_c2 = _invert_for(FuelType.C2, _slope_rate(base, sf, fuel_type=FuelType.C2))
        isf_d1 = _invert_for(FuelType.D1, _slope_rate(base, sf, fuel_type=FuelType.D1))
        return inputs.pc / 100.0 * isf_c2 + (1.0 - inputs.pc / 100.0) * isf_d1

    if fuel in (FuelType.M3, FuelType.M4):
        # own curve at 100% dead balsam fir
        isf_m = _invert_for(fuel, _slope_rate(base, sf, pdf=100.0))
        isf_d1 = _invert_for(
            FuelType.D1, _slope_rate(base, sf, fuel_type=FuelType.D1, pdf=100.0)
        )
        return inputs.pdf / 100.0 * isf_m + (1.0 - inputs.pdf / 100.0) * isf_d1

    rsf = _slope_rate(base, sf)

    if fuel in GRASS_FUEL_TYPES:
        spec = get_fuel_spec(fuel)
        cf = grass_curing_factor(inputs.cc)
        return invert_spread_curve(rsf, cf * spec.a, spec.b, spec.c0)

    # C1-C7, D1, S1-S3
    return _invert_for(fuel, rsf)


def slope_adjustment(inputs: SlopeInputs) -> SlopeResult:
    """Calculate net effective wind speed (WSV) and spread azimuth (RAZ).

    Args:
        inputs: Fuel, FFMC/BUI, stand description, wind and slope vectors

    Returns:
        SlopeResult; both fields are None for non-fuel and water
    """
    isf = flat_ground_isi(inputs)
    if isf is None:
        logger.debug("Slope adjustment undefined for fuel type %s", inputs.fuel_type)
        return SlopeResult(wsv=None, raz=None)

    wse = equivalent_wind_speed(isf, fine_fuel_effect(inputs.ffmc))
    wsv, raz = compose_wind_vector(
        inputs.wind_speed, inputs.wind_azimuth, wse, inputs.slope_azimuth
    )
    return SlopeResult(wsv=wsv, raz=raz)
