"""Crown fire initiation and stand crown defaults.

Implements Van Wagner (1977) crown fire initiation as used by the FBP System
to decide when surface fires transition to crown fires, and the crown
fraction burned that follows.

References:
    Van Wagner, C.E. (1977). Conditions for the start and spread of crown fire.
    Canadian Journal of Forest Research, 7(1), 23-34.

    Forestry Canada Fire Danger Group (1992). ST-X-3, Eqs. 56-58.
"""

from __future__ import annotations

import math

from numba import jit

from fbpspread.fbp.constants import FuelType, get_fuel_spec
from fbpspread.types import FireType


@jit(nopython=True, cache=True)
def critical_surface_intensity(fmc: float, cbh: float) -> float:
    """Calculate critical surface fire intensity for crown fire initiation.

    ST-X-3 Eq. 56: CSI = 0.001 * CBH^1.5 * (460 + 25.9 * FMC)^1.5

    Args:
        fmc: Foliar moisture content (%)
        cbh: Crown base height (m)

    Returns:
        Critical surface intensity (kW/m)
    """
    return 0.001 * cbh**1.5 * (460.0 + 25.9 * fmc) ** 1.5


@jit(nopython=True, cache=True)
def surface_rate_at_crowning(csi: float, sfc: float) -> float:
    """Surface spread rate at which crowning begins (RSO, m/min).

    ST-X-3 Eq. 57: RSO = CSI / (300 * SFC). No surface consumption gives
    inf, even where CSI is 0, so crowning never triggers.
    """
    if sfc <= 0.0:
        return math.inf
    return csi / (300.0 * sfc)


@jit(nopython=True, cache=True)
def crown_fraction_burned(ros: float, rso: float) -> float:
    """Calculate crown fraction burned (CFB).

    ST-X-3 Eq. 58: CFB = 1 - exp(-0.23 * (ROS - RSO)) when ROS > RSO.

    Args:
        ros: Surface rate of spread (m/min)
        rso: Surface spread rate at crowning (m/min)

    Returns:
        Crown fraction burned in [0, 1)
    """
    if ros > rso:
        return 1.0 - math.exp(-0.23 * (ros - rso))
    return 0.0


def classify_fire_type(cfb: float) -> FireType:
    """Classify fire type based on crown fraction burned.

    Args:
        cfb: Crown fraction burned (0-1)

    Returns:
        FireType classification
    """
    if cfb >= 0.9:
        return FireType.CONTINUOUS_CROWN
    elif cfb >= 0.1:
        return FireType.INTERMITTENT_CROWN
    else:
        return FireType.SURFACE


def crown_base_height(
    fuel_type: FuelType | str,
    cbh: float | None = None,
    sd: float = 0.0,
    sh: float = 0.0,
) -> float:
    """Resolve the crown base height for a stand.

    A missing or implausible CBH (None, NaN, <= 0 or > 50 m) is replaced by
    the C6 stand regression when stand density and height are known, else
    by the fuel type default.

    Args:
        fuel_type: FBP fuel type
        cbh: Observed crown base height (m)
        sd: Stand density (stems/ha), C6 only
        sh: Stand height (m), C6 only

    Returns:
        Crown base height (m), never negative
    """
    spec = get_fuel_spec(fuel_type)
    if cbh is None or math.isnan(cbh) or cbh <= 0.0 or cbh > 50.0:
        if spec.code == FuelType.C6 and sd > 0.0 and sh > 0.0:
            cbh = -11.2 + 1.06 * sh + 0.0017 * sd
        else:
            cbh = spec.cbh
    return 1e-7 if cbh < 0.0 else cbh


def crown_fuel_load(fuel_type: FuelType | str, cfl: float | None = None) -> float:
    """Resolve crown fuel load (kg/m2), falling back to the fuel type default."""
    spec = get_fuel_spec(fuel_type)
    if cfl is None or math.isnan(cfl) or cfl <= 0.0 or cfl > 2.0:
        return spec.cfl
    return cfl
