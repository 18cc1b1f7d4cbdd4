"""FWI System indices consumed by the spread engine.

Only the two single-expression indices the FBP System reads are kept here:
ISI (with the FBP high-wind modification) and BUI. The fine fuel moisture
effect f(F) is exposed on its own so the slope module can invert the ISI
equation with exactly the same definition.

References:
    Van Wagner, C.E. and Pickett, T.L. (1985). Equations and FORTRAN program
    for the Canadian Forest Fire Weather Index System. Forestry Technical
    Report 33.

    Forestry Canada Fire Danger Group (1992). ST-X-3, Eq. 53a.
"""

from __future__ import annotations

import math

from numba import jit


@jit(nopython=True, cache=True)
def ffmc_moisture(ffmc: float) -> float:
    """Fine fuel moisture content (%) from FFMC (FWI Eq. 10)."""
    return 147.2 * (101.0 - ffmc) / (59.5 + ffmc)


@jit(nopython=True, cache=True)
def fine_fuel_effect(ffmc: float) -> float:
    """Fine fuel moisture function f(F) of the ISI (FWI Eq. 25)."""
    m = ffmc_moisture(ffmc)
    return 91.9 * math.exp(-0.1386 * m) * (1.0 + m**5.31 / 4.93e7)


@jit(nopython=True, cache=True)
def wind_effect(wind_speed: float, fbp_mod: bool = False) -> float:
    """Wind function f(W) of the ISI.

    FWI Eq. 24, or the ST-X-3 Eq. 53a high-wind branch when fbp_mod is set
    and the wind is at least 40 km/h.
    """
    if fbp_mod and wind_speed >= 40.0:
        return 12.0 * (1.0 - math.exp(-0.0818 * (wind_speed - 28.0)))
    return math.exp(0.05039 * wind_speed)


def calculate_isi(ffmc: float, wind_speed: float, fbp_mod: bool = False) -> float:
    """Calculate Initial Spread Index from FFMC and wind speed.

    Args:
        ffmc: Fine Fuel Moisture Code (0-101)
        wind_speed: 10-m open wind speed (km/h)
        fbp_mod: Use the FBP high-wind modification above 40 km/h

    Returns:
        ISI value (dimensionless)
    """
    return 0.208 * fine_fuel_effect(ffmc) * wind_effect(wind_speed, fbp_mod)


def calculate_bui(dmc: float, dc: float) -> float:
    """Calculate Buildup Index from DMC and DC.

    Args:
        dmc: Duff Moisture Code
        dc: Drought Code

    Returns:
        BUI value (dimensionless)
    """
    if dmc == 0.0 and dc == 0.0:
        return 0.0
    if dmc <= 0.4 * dc:
        bui = 0.8 * dmc * dc / (dmc + 0.4 * dc)
    else:
        bui = dmc - (1.0 - 0.8 * dc / (dmc + 0.4 * dc)) * (0.92 + (0.0114 * dmc) ** 1.7)
    return max(0.0, bui)
