"""Buildup effect on rate of spread.

ST-X-3 Eq. 54: BE = exp(50 * ln(Q) * (1/BUI - 1/BUIo))
"""

from __future__ import annotations

import math

from numba import jit

from fbpspread.fbp.constants import FuelType, get_fuel_spec


@jit(nopython=True, cache=True)
def calculate_bui_effect(bui: float, q: float, bui0: float) -> float:
    """Calculate the buildup effect multiplier from raw coefficients.

    Args:
        bui: Buildup Index
        q: Proportion of maximum spread rate reached at BUIo
        bui0: Average BUI for the fuel type

    Returns:
        BUI effect multiplier. Exactly 1.0 when either BUI or BUIo is <= 0.
    """
    if bui <= 0.0 or bui0 <= 0.0:
        return 1.0
    return math.exp(50.0 * math.log(q) * (1.0 / bui - 1.0 / bui0))


def buildup_effect(fuel_type: FuelType | str, bui: float) -> float:
    """Buildup effect for a fuel type.

    Grass fuels have q = 1, so the factor is inert for them; non-fuel
    sentinels have BUIo = 0 and always return 1.0.
    """
    spec = get_fuel_spec(fuel_type)
    return calculate_bui_effect(float(bui), spec.q, spec.bui0)
