"""Tests for the FBP rate of spread calculator.

Reference values are built from the published ST-X-3 / GLC-X-10 equations
so each test states the closed form it checks.
"""

import math

import pytest

from fbpspread.fbp.buildup import buildup_effect
from fbpspread.fbp.calculator import (
    MIN_ROS,
    calculate_rsi,
    grass_curing_factor,
    rate_of_spread,
    rate_of_spread_extended,
    spread_rate_curve,
)
from fbpspread.fbp.constants import BURNABLE_FUEL_TYPES, FuelType
from fbpspread.types import FireType, SpreadResult


def _raw(inputs_factory, fuel_type, **overrides):
    return rate_of_spread(
        inputs_factory(fuel_type, **overrides), apply_buildup_effect=False
    )


class TestSpreadRateCurve:
    def test_zero_isi_gives_zero(self):
        assert spread_rate_curve(0.0, 110.0, 0.0282, 1.5) == 0.0

    def test_approaches_asymptote(self):
        assert spread_rate_curve(1000.0, 110.0, 0.0282, 1.5) == pytest.approx(110.0)


class TestGrassCuringFactor:
    def test_below_threshold(self):
        assert grass_curing_factor(40.0) == pytest.approx(0.005 * (math.exp(2.44) - 1.0))

    def test_above_threshold(self):
        assert grass_curing_factor(100.0) == pytest.approx(0.176 + 0.02 * 41.2)

    def test_increases_with_curing(self):
        values = [grass_curing_factor(cc) for cc in range(0, 101, 10)]
        assert values == sorted(values)


class TestRateOfSpread:
    """Test ROS calculations for each fuel type."""

    def test_c2_known_value(self, standard_inputs):
        """C2 at ISI=10, BUI=60 is the bare curve times BE."""
        rsi = 110.0 * (1.0 - math.exp(-0.0282 * 10.0)) ** 1.5
        be = math.exp(50.0 * math.log(0.7) * (1.0 / 60.0 - 1.0 / 64.0))
        result = rate_of_spread_extended(standard_inputs(FuelType.C2))
        assert result.rsi == pytest.approx(rsi, rel=1e-9)
        assert result.rss == pytest.approx(rsi * be, rel=1e-9)
        assert result.ros == pytest.approx(rsi * be, rel=1e-9)

    @pytest.mark.parametrize("fuel_type", BURNABLE_FUEL_TYPES)
    def test_zero_isi_floored(self, standard_inputs, fuel_type):
        """No wind and bone-dry fuel still returns exactly the floor."""
        assert rate_of_spread(standard_inputs(fuel_type, isi=0.0)) == MIN_ROS

    @pytest.mark.parametrize("fuel_type", BURNABLE_FUEL_TYPES)
    def test_monotonic_in_isi(self, standard_inputs, fuel_type):
        rates = [
            rate_of_spread(standard_inputs(fuel_type, isi=float(isi)))
            for isi in range(0, 80, 2)
        ]
        assert all(b >= a for a, b in zip(rates, rates[1:])), f"{fuel_type} not monotonic"

    @pytest.mark.parametrize("fuel_type", [FuelType.NF, FuelType.WA])
    def test_non_fuel(self, standard_inputs, fuel_type):
        result = rate_of_spread_extended(standard_inputs(fuel_type, isi=30.0))
        assert result.ros == MIN_ROS
        assert result.cfb == 0.0
        assert result.fire_type == FireType.SURFACE

    def test_string_fuel_type(self, standard_inputs):
        assert rate_of_spread(standard_inputs("c-2")) == rate_of_spread(
            standard_inputs(FuelType.C2)
        )

    def test_returns_spread_result(self, standard_inputs):
        result = rate_of_spread_extended(standard_inputs())
        assert isinstance(result, SpreadResult)
        assert result.rsc is None

    @pytest.mark.parametrize("fuel_type", BURNABLE_FUEL_TYPES)
    def test_disabled_buildup_is_raw_curve(self, standard_inputs, fuel_type):
        if fuel_type == FuelType.C6:
            pytest.skip("C6 crowning couples RSS with RSC")
        result = rate_of_spread_extended(
            standard_inputs(fuel_type), apply_buildup_effect=False
        )
        assert result.rss == result.rsi


class TestCalculateRSI:
    @pytest.mark.parametrize("fuel_type", list(FuelType))
    def test_defined_for_every_fuel_type(self, standard_inputs, fuel_type):
        assert calculate_rsi(standard_inputs(fuel_type)) >= 0.0

    def test_c6_intermediate_surface_rate(self, standard_inputs):
        expected = 30.0 * (1.0 - math.exp(-0.08 * 10.0)) ** 3.0
        assert calculate_rsi(standard_inputs(FuelType.C6)) == pytest.approx(expected)

    def test_matches_extended_result(self, standard_inputs):
        inputs = standard_inputs(FuelType.C6)
        assert calculate_rsi(inputs) == pytest.approx(rate_of_spread_extended(inputs).rsi)


class TestMixedwood:
    def test_m1_even_split_is_exact_average(self, standard_inputs):
        raw_m1 = _raw(standard_inputs, FuelType.M1, pc=50.0)
        raw_c2 = _raw(standard_inputs, FuelType.C2)
        raw_d1 = _raw(standard_inputs, FuelType.D1)
        assert raw_m1 == pytest.approx(0.5 * raw_c2 + 0.5 * raw_d1, rel=1e-12)

    def test_m1_buildup_applied_once_after_blend(self, standard_inputs):
        inputs = standard_inputs(FuelType.M1, pc=50.0)
        blended = 0.5 * _raw(standard_inputs, FuelType.C2) + 0.5 * _raw(
            standard_inputs, FuelType.D1
        )
        expected = blended * buildup_effect(FuelType.M1, inputs.bui)
        assert rate_of_spread(inputs) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("pc,fuel_type", [(100.0, FuelType.C2), (0.0, FuelType.D1)])
    def test_m1_endpoints(self, standard_inputs, pc, fuel_type):
        assert _raw(standard_inputs, FuelType.M1, pc=pc) == pytest.approx(
            _raw(standard_inputs, fuel_type), rel=1e-12
        )

    def test_m2_green_deciduous_weight(self, standard_inputs):
        raw_m2 = _raw(standard_inputs, FuelType.M2, pc=50.0)
        expected = 0.5 * _raw(standard_inputs, FuelType.C2) + 0.2 * 0.5 * _raw(
            standard_inputs, FuelType.D1
        )
        assert raw_m2 == pytest.approx(expected, rel=1e-12)

    def test_m3_blend(self, standard_inputs):
        inputs = standard_inputs(FuelType.M3, pdf=35.0)
        own = spread_rate_curve(10.0, 120.0, 0.0572, 1.4)
        expected = 0.35 * own + 0.65 * _raw(standard_inputs, FuelType.D1)
        assert calculate_rsi(inputs) == pytest.approx(expected, rel=1e-12)

    def test_m4_blend(self, standard_inputs):
        inputs = standard_inputs(FuelType.M4, pdf=35.0)
        own = spread_rate_curve(10.0, 100.0, 0.0404, 1.48)
        expected = 0.35 * own + 0.2 * 0.65 * _raw(standard_inputs, FuelType.D1)
        assert calculate_rsi(inputs) == pytest.approx(expected, rel=1e-12)

    def test_more_conifer_spreads_faster(self, standard_inputs):
        low = rate_of_spread(standard_inputs(FuelType.M1, pc=25.0))
        high = rate_of_spread(standard_inputs(FuelType.M1, pc=75.0))
        assert high > low


class TestGrass:
    def test_o1a_partial_curing(self, standard_inputs):
        inputs = standard_inputs(FuelType.O1A, cc=40.0)
        cf = 0.005 * (math.exp(0.061 * 40.0) - 1.0)
        expected = 190.0 * (1.0 - math.exp(-0.031 * 10.0)) ** 1.4 * cf
        assert rate_of_spread(inputs) == pytest.approx(expected, rel=1e-9)

    def test_buildup_has_no_effect(self, standard_inputs):
        assert rate_of_spread(standard_inputs(FuelType.O1B, bui=10.0)) == rate_of_spread(
            standard_inputs(FuelType.O1B, bui=150.0)
        )


class TestCrownCoupling:
    def test_high_isi_crown_fire_in_c2(self, standard_inputs):
        result = rate_of_spread_extended(standard_inputs(FuelType.C2, isi=30.0))
        assert result.cfb > 0.9
        assert result.fire_type == FireType.CONTINUOUS_CROWN

    def test_low_isi_surface_fire(self, standard_inputs):
        result = rate_of_spread_extended(standard_inputs(FuelType.C3, isi=2.0))
        assert result.cfb == 0.0
        assert result.fire_type == FireType.SURFACE

    @pytest.mark.parametrize(
        "fuel_type", [FuelType.D1, FuelType.S1, FuelType.S2, FuelType.S3, FuelType.O1A]
    )
    def test_no_crown_layer_no_cfb(self, standard_inputs, fuel_type):
        result = rate_of_spread_extended(standard_inputs(fuel_type, isi=60.0))
        assert result.cfb == 0.0

    def test_zero_sfc_never_crowns(self, standard_inputs):
        result = rate_of_spread_extended(standard_inputs(FuelType.C2, isi=60.0, sfc=0.0))
        assert math.isinf(result.rso)
        assert result.cfb == 0.0

    @pytest.mark.parametrize(
        "fuel_type", [FuelType.D1, FuelType.S1, FuelType.O1B, FuelType.NF, FuelType.WA]
    )
    def test_zero_sfc_without_crown_base(self, standard_inputs, fuel_type):
        result = rate_of_spread_extended(standard_inputs(fuel_type, sfc=0.0))
        assert result.csi == 0.0
        assert math.isinf(result.rso)

    def test_explicit_cbh_overrides_default(self, standard_inputs):
        low = rate_of_spread_extended(standard_inputs(FuelType.C3, isi=15.0, cbh=1.0))
        high = rate_of_spread_extended(standard_inputs(FuelType.C3, isi=15.0))
        assert low.csi < high.csi
        assert low.cfb > high.cfb

    def test_crown_fire_does_not_change_non_c6_ros(self, standard_inputs):
        result = rate_of_spread_extended(standard_inputs(FuelType.C2, isi=30.0))
        assert result.ros == result.rss
