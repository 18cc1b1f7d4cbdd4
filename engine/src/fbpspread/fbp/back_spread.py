"""Back fire rate of spread (ST-X-3 Eqs. 74-77).

The back fire runs against the net effective wind, so its ISI uses the
wind function with the sign of the wind speed reversed. The spread model
itself is the same one used for the head fire.
"""

from __future__ import annotations

import math
from dataclasses import replace

from fbpspread.fbp.calculator import rate_of_spread
from fbpspread.fwi.indices import fine_fuel_effect
from fbpspread.types import SpreadInputs


def back_spread_index(ffmc: float, wsv: float) -> float:
    """ISI of the back fire (BISI).

    Args:
        ffmc: Fine Fuel Moisture Code
        wsv: Net effective wind speed (km/h), e.g. SlopeResult.wsv

    Returns:
        BISI = 0.208 * exp(-0.05039 * WSV) * f(F)
    """
    return 0.208 * math.exp(-0.05039 * wsv) * fine_fuel_effect(ffmc)


def back_rate_of_spread(inputs: SpreadInputs, ffmc: float, wsv: float) -> float:
    """Back fire rate of spread (m/min).

    The ISI carried by inputs is replaced with the back fire ISI; every
    other field (fuel, BUI, FMC, SFC, stand description) is used as given,
    with the buildup effect applied.
    """
    return rate_of_spread(replace(inputs, isi=back_spread_index(ffmc, wsv)))
