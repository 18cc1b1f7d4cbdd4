"""Fuel consumption and fire intensity.

Surface fuel consumption by fuel type (ST-X-3 Eqs. 9-25 with the GLC-X-10
revisions for C1 and C7), crown/total fuel consumption, and Byram's fire
intensity. These turn the engine's ROS and CFB into the quantities
downstream fire-intensity consumers need.
"""

from __future__ import annotations

import math

from fbpspread.fbp.constants import FuelType, get_fuel_spec

# Surface fuel consumption never drops below this (kg/m2).
MIN_SFC = 0.000001


def surface_fuel_consumption(
    fuel_type: FuelType | str,
    ffmc: float,
    bui: float,
    pc: float = 50.0,
    gfl: float = 0.35,
) -> float:
    """Calculate surface fuel consumption (kg/m2).

    Args:
        fuel_type: FBP fuel type
        ffmc: Fine Fuel Moisture Code
        bui: Buildup Index
        pc: Percent conifer (M1/M2)
        gfl: Grass fuel load (kg/m2), O1A/O1B

    Returns:
        SFC in kg/m2. Non-fuel consumes nothing.
    """
    fuel = get_fuel_spec(fuel_type).code

    if fuel in (FuelType.NF, FuelType.WA):
        return 0.0

    if fuel == FuelType.C1:
        if ffmc > 84.0:
            sfc = 0.75 + 0.75 * math.sqrt(1.0 - math.exp(-0.23 * (ffmc - 84.0)))
        else:
            sfc = 0.75 - 0.75 * math.sqrt(1.0 - math.exp(-0.23 * (84.0 - ffmc)))
    elif fuel in (FuelType.C2, FuelType.M3, FuelType.M4):
        sfc = 5.0 * (1.0 - math.exp(-0.0115 * bui))
    elif fuel in (FuelType.C3, FuelType.C4):
        sfc = 5.0 * (1.0 - math.exp(-0.0164 * bui)) ** 2.24
    elif fuel in (FuelType.C5, FuelType.C6):
        sfc = 5.0 * (1.0 - math.exp(-0.0149 * bui)) ** 2.48
    elif fuel == FuelType.C7:
        ffc = 2.0 * (1.0 - math.exp(-0.104 * (ffmc - 70.0))) if ffmc > 70.0 else 0.0
        wfc = 1.5 * (1.0 - math.exp(-0.0201 * bui))
        sfc = ffc + wfc
    elif fuel == FuelType.D1:
        sfc = 1.5 * (1.0 - math.exp(-0.0183 * bui))
    elif fuel in (FuelType.M1, FuelType.M2):
        sfc = (
            pc / 100.0 * 5.0 * (1.0 - math.exp(-0.0115 * bui))
            + (100.0 - pc) / 100.0 * 1.5 * (1.0 - math.exp(-0.0183 * bui))
        )
    elif fuel in (FuelType.O1A, FuelType.O1B):
        sfc = gfl
    elif fuel == FuelType.S1:
        sfc = 4.0 * (1.0 - math.exp(-0.025 * bui)) + 4.0 * (1.0 - math.exp(-0.034 * bui))
    elif fuel == FuelType.S2:
        sfc = 10.0 * (1.0 - math.exp(-0.013 * bui)) + 6.0 * (1.0 - math.exp(-0.060 * bui))
    else:
        # S3
        sfc = 12.0 * (1.0 - math.exp(-0.0166 * bui)) + 20.0 * (1.0 - math.exp(-0.0210 * bui))

    return max(sfc, MIN_SFC)


def crown_fuel_consumption(
    fuel_type: FuelType | str,
    cfl: float,
    cfb: float,
    pc: float = 50.0,
    pdf: float = 35.0,
) -> float:
    """Crown fuel consumption (kg/m2): CFL * CFB, scaled by the conifer share."""
    fuel = get_fuel_spec(fuel_type).code
    cfc = cfl * cfb
    if fuel in (FuelType.M1, FuelType.M2):
        cfc = pc / 100.0 * cfc
    elif fuel in (FuelType.M3, FuelType.M4):
        cfc = pdf / 100.0 * cfc
    return cfc


def total_fuel_consumption(
    fuel_type: FuelType | str,
    cfl: float,
    cfb: float,
    sfc: float,
    pc: float = 50.0,
    pdf: float = 35.0,
) -> float:
    """Total (surface + crown) fuel consumption (kg/m2)."""
    return sfc + crown_fuel_consumption(fuel_type, cfl, cfb, pc, pdf)


def fire_intensity(fc: float, ros: float) -> float:
    """Byram fire intensity (kW/m).

    ST-X-3 Eq. 69: FI = 300 * FC * ROS

    Args:
        fc: Fuel consumption (kg/m2)
        ros: Rate of spread (m/min)
    """
    return 300.0 * fc * ros
