"""C-6 Conifer Plantation fire spread.

C6 is the one fuel type whose final ROS mixes a separate crown fire spread
rate with the surface rate. Crowning needs the three-way ordering
RSC > RSS > RSO; the final ROS interpolates between surface and crown
spread by CFB.

Equations 59-65 from:
    Forestry Canada Fire Danger Group (1992). ST-X-3.
"""

from __future__ import annotations

import math

from numba import jit

from fbpspread.fbp.buildup import buildup_effect
from fbpspread.fbp.constants import FuelType
from fbpspread.fbp.crown_fire import (
    critical_surface_intensity,
    crown_fraction_burned,
    surface_rate_at_crowning,
)
from fbpspread.types import C6Output, C6Result

# Average foliar moisture effect
FME_AVG = 0.778


@jit(nopython=True, cache=True)
def intermediate_surface_rate_c6(isi: float) -> float:
    """Eq. 62: intermediate surface fire spread rate (m/min)."""
    return 30.0 * (1.0 - math.exp(-0.08 * isi)) ** 3.0


@jit(nopython=True, cache=True)
def crown_rate_c6(isi: float, fmc: float) -> float:
    """Crown fire spread rate for C6 (m/min).

    Crown flame temperature (Eq. 59) and heat of ignition (Eq. 60) combine
    into the foliar moisture effect (Eq. 61), scaled against its species
    average in Eq. 64.
    """
    fme = (1.5 - 0.00275 * fmc) ** 4.0 / (460.0 + 25.9 * fmc) * 1000.0
    return 60.0 * (1.0 - math.exp(-0.0497 * isi)) * fme / FME_AVG


@jit(nopython=True, cache=True)
def crown_fraction_burned_c6(rsc: float, rss: float, rso: float) -> float:
    if rsc > rss and rss > rso:
        return crown_fraction_burned(rss, rso)
    return 0.0


@jit(nopython=True, cache=True)
def rate_of_spread_c6(rsc: float, rss: float, cfb: float) -> float:
    """Eq. 65: ROS weighted between surface and crown spread by CFB."""
    if rsc > rss:
        return rss + cfb * (rsc - rss)
    return rss


def surface_rate_c6(rsi: float, bui: float, apply_buildup_effect: bool = True) -> float:
    """Eq. 63: surface fire spread rate (m/min)."""
    if not apply_buildup_effect:
        return rsi
    return rsi * buildup_effect(FuelType.C6, bui)


def calculate_c6(
    isi: float,
    bui: float,
    fmc: float,
    sfc: float,
    cbh: float,
    apply_buildup_effect: bool = True,
) -> C6Result:
    """Run the full C6 chain and return every intermediate value."""
    rsi = intermediate_surface_rate_c6(isi)
    rss = surface_rate_c6(rsi, bui, apply_buildup_effect)
    rsc = crown_rate_c6(isi, fmc)
    csi = critical_surface_intensity(fmc, cbh)
    rso = surface_rate_at_crowning(csi, sfc)
    cfb = crown_fraction_burned_c6(rsc, rss, rso)
    ros = rate_of_spread_c6(rsc, rss, cfb)
    return C6Result(rsi=rsi, rss=rss, rsc=rsc, csi=csi, rso=rso, cfb=cfb, ros=ros)


def c6_calc(
    isi: float,
    bui: float,
    fmc: float,
    sfc: float,
    cbh: float,
    output: C6Output | str = C6Output.CFB,
) -> float:
    """Return a single value from the C6 chain.

    RSI and RSC depend only on ISI (and FMC), so they are returned without
    evaluating the crowning comparison.

    Args:
        isi: Initial Spread Index
        bui: Buildup Index
        fmc: Foliar moisture content (%)
        sfc: Surface fuel consumption (kg/m2)
        cbh: Crown base height (m)
        output: One of C6Output.RSI, RSC, CFB or ROS

    Returns:
        The selected value

    Raises:
        ValueError: If output is not a C6Output name
    """
    output = C6Output(output)
    if output == C6Output.RSI:
        return intermediate_surface_rate_c6(isi)
    if output == C6Output.RSC:
        return crown_rate_c6(isi, fmc)

    result = calculate_c6(isi, bui, fmc, sfc, cbh)
    if output == C6Output.CFB:
        return result.cfb
    return result.ros
