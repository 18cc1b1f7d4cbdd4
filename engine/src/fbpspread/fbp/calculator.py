"""Canadian Fire Behavior Prediction (FBP) System rate-of-spread calculator.

Implements equations from:
    Forestry Canada Fire Danger Group (1992).
    Development and Structure of the Canadian Forest Fire Behavior
    Prediction System. Information Report ST-X-3.

    Wotton, B.M., Alexander, M.E., Taylor, S.W. (2009).
    Information Report GLC-X-10.

Mixedwood fuel types are blends of "pure" fuel responses. The blend
components come from recursive calls of the whole model with the fuel type
substituted and the buildup effect switched off, so the buildup effect is
applied exactly once, after blending.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from numba import jit

from fbpspread.fbp.buildup import calculate_bui_effect
from fbpspread.fbp.c6 import calculate_c6, intermediate_surface_rate_c6
from fbpspread.fbp.constants import (
    GRASS_FUEL_TYPES,
    NON_FUEL_TYPES,
    SIMPLE_FUEL_TYPES,
    FuelType,
    get_fuel_spec,
)
from fbpspread.fbp.crown_fire import (
    classify_fire_type,
    critical_surface_intensity,
    crown_base_height,
    crown_fraction_burned,
    surface_rate_at_crowning,
)
from fbpspread.types import SpreadInputs, SpreadResult

# ROS values at or below zero are reported as this.
MIN_ROS = 0.000001

# Deciduous share weight in the green (M2/M4) mixedwood blends.
GREEN_DECIDUOUS_WEIGHT = 0.2


@jit(nopython=True, cache=True)
def spread_rate_curve(isi: float, a: float, b: float, c0: float) -> float:
    """ST-X-3 Eq. 26: RSI = a * (1 - exp(-b * ISI))^c0 (m/min)."""
    return a * (1.0 - math.exp(-b * isi)) ** c0


@jit(nopython=True, cache=True)
def grass_curing_factor(cc: float) -> float:
    """Grass curing factor for O1A/O1B (Wotton et al. 2009, Eqs. 35a/35b).

    Args:
        cc: Percent curing (0-100). 0 = green, 100 = fully cured.

    Returns:
        Curing factor (dimensionless)
    """
    if cc < 58.8:
        return 0.005 * (math.exp(0.061 * cc) - 1.0)
    return 0.176 + 0.02 * (cc - 58.8)


@dataclass(frozen=True)
class _Components:
    rsi: float
    rss: float
    ros: float
    cfb: float
    csi: float
    rso: float
    rsc: float | None = None


def _blend_weights(fuel: FuelType, share: float) -> tuple[float, float]:
    """(first component weight, D1 weight) for a mixedwood blend."""
    weight = GREEN_DECIDUOUS_WEIGHT if fuel in (FuelType.M2, FuelType.M4) else 1.0
    return share / 100.0, weight * (1.0 - share / 100.0)


def _component_rate(inputs: SpreadInputs, **changes) -> float:
    """Unfloored raw ROS of a blend component."""
    return _spread_components(replace(inputs, **changes), apply_buildup_effect=False).ros


def calculate_rsi(inputs: SpreadInputs) -> float:
    """Spread rate before the buildup effect (m/min).

    Args:
        inputs: Observation (fuel type, ISI, stand composition)

    Returns:
        RSI in m/min. Zero for non-fuel.
    """
    fuel = FuelType(inputs.fuel_type)
    spec = get_fuel_spec(fuel)

    if fuel in SIMPLE_FUEL_TYPES:
        return spread_rate_curve(inputs.isi, spec.a, spec.b, spec.c0)

    if fuel in (FuelType.M1, FuelType.M2):
        w_c, w_d = _blend_weights(fuel, inputs.pc)
        return (
            w_c * _component_rate(inputs, fuel_type=FuelType.C2)
            + w_d * _component_rate(inputs, fuel_type=FuelType.D1)
        )

    if fuel in (FuelType.M3, FuelType.M4):
        w_m, w_d = _blend_weights(fuel, inputs.pdf)
        rsi_own = spread_rate_curve(inputs.isi, spec.a, spec.b, spec.c0)
        return w_m * rsi_own + w_d * _component_rate(inputs, fuel_type=FuelType.D1)

    if fuel in GRASS_FUEL_TYPES:
        cf = grass_curing_factor(inputs.cc)
        return spread_rate_curve(inputs.isi, spec.a, spec.b, spec.c0) * cf

    if fuel in NON_FUEL_TYPES:
        return 0.0

    # C6 intermediate surface rate (ST-X-3 Eq. 62)
    return intermediate_surface_rate_c6(inputs.isi)


def _spread_components(inputs: SpreadInputs, apply_buildup_effect: bool) -> _Components:
    fuel = FuelType(inputs.fuel_type)
    spec = get_fuel_spec(fuel)
    cbh = crown_base_height(fuel, inputs.cbh)

    if fuel == FuelType.C6:
        c6 = calculate_c6(
            inputs.isi, inputs.bui, inputs.fmc, inputs.sfc, cbh, apply_buildup_effect
        )
        return _Components(
            rsi=c6.rsi, rss=c6.rss, ros=c6.ros, cfb=c6.cfb,
            csi=c6.csi, rso=c6.rso, rsc=c6.rsc,
        )

    rsi = calculate_rsi(inputs)
    if apply_buildup_effect:
        rss = rsi * calculate_bui_effect(float(inputs.bui), spec.q, spec.bui0)
    else:
        rss = rsi

    csi = critical_surface_intensity(inputs.fmc, cbh)
    rso = surface_rate_at_crowning(csi, inputs.sfc)
    cfb = crown_fraction_burned(rss, rso) if spec.has_crown else 0.0

    return _Components(rsi=rsi, rss=rss, ros=rss, cfb=cfb, csi=csi, rso=rso)


def rate_of_spread_extended(
    inputs: SpreadInputs,
    apply_buildup_effect: bool = True,
) -> SpreadResult:
    """Calculate head fire rate of spread with crown fire coupling.

    This is the main entry point for ROS calculations.

    Args:
        inputs: One observation (fuel type, FWI indices, stand description)
        apply_buildup_effect: False computes the raw curve without buildup
            damping (used for mixedwood blending and slope inversion)

    Returns:
        SpreadResult with ROS, CFB, CSI, RSO and intermediate rates
    """
    parts = _spread_components(inputs, apply_buildup_effect)
    ros = MIN_ROS if parts.ros <= 0.0 else parts.ros
    return SpreadResult(
        ros=ros,
        cfb=parts.cfb,
        csi=parts.csi,
        rso=parts.rso,
        rsi=parts.rsi,
        rss=parts.rss,
        fire_type=classify_fire_type(parts.cfb),
        rsc=parts.rsc,
    )


def rate_of_spread(inputs: SpreadInputs, apply_buildup_effect: bool = True) -> float:
    """Head fire rate of spread (m/min)."""
    return rate_of_spread_extended(inputs, apply_buildup_effect).ros
