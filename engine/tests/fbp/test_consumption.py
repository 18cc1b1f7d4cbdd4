"""Tests for fuel consumption and fire intensity."""

import math

import pytest

from fbpspread.fbp.constants import BURNABLE_FUEL_TYPES, FuelType
from fbpspread.fbp.consumption import (
    MIN_SFC,
    crown_fuel_consumption,
    fire_intensity,
    surface_fuel_consumption,
    total_fuel_consumption,
)


class TestSurfaceFuelConsumption:
    def test_c2_known_value(self):
        expected = 5.0 * (1.0 - math.exp(-0.0115 * 60.0))
        assert surface_fuel_consumption(FuelType.C2, 90.0, 60.0) == pytest.approx(expected)

    def test_c1_at_reference_ffmc(self):
        assert surface_fuel_consumption(FuelType.C1, 84.0, 60.0) == pytest.approx(0.75)

    def test_c1_rises_with_ffmc(self):
        assert surface_fuel_consumption(FuelType.C1, 92.0, 60.0) > 0.75
        assert surface_fuel_consumption(FuelType.C1, 80.0, 60.0) < 0.75

    def test_c7_dry_forest_floor(self):
        expected = 2.0 * (1.0 - math.exp(-0.104 * 20.0)) + 1.5 * (
            1.0 - math.exp(-0.0201 * 60.0)
        )
        assert surface_fuel_consumption(FuelType.C7, 90.0, 60.0) == pytest.approx(expected)

    def test_grass_uses_fuel_load(self):
        assert surface_fuel_consumption(FuelType.O1A, 90.0, 60.0, gfl=0.5) == 0.5

    def test_mixedwood_endpoints(self):
        m1 = surface_fuel_consumption(FuelType.M1, 90.0, 60.0, pc=100.0)
        assert m1 == pytest.approx(surface_fuel_consumption(FuelType.C2, 90.0, 60.0))
        m1 = surface_fuel_consumption(FuelType.M1, 90.0, 60.0, pc=0.0)
        assert m1 == pytest.approx(surface_fuel_consumption(FuelType.D1, 90.0, 60.0))

    @pytest.mark.parametrize("fuel_type", [FuelType.NF, FuelType.WA])
    def test_non_fuel(self, fuel_type):
        assert surface_fuel_consumption(fuel_type, 90.0, 60.0) == 0.0

    @pytest.mark.parametrize("fuel_type", BURNABLE_FUEL_TYPES)
    def test_floored(self, fuel_type):
        assert surface_fuel_consumption(fuel_type, 90.0, 0.0, gfl=0.0) >= MIN_SFC


class TestCrownAndTotalConsumption:
    def test_conifer(self):
        assert crown_fuel_consumption(FuelType.C2, 0.8, 0.5) == pytest.approx(0.4)

    def test_m1_scaled_by_conifer(self):
        assert crown_fuel_consumption(FuelType.M1, 0.8, 0.5, pc=25.0) == pytest.approx(0.1)

    def test_m3_scaled_by_dead_fir(self):
        assert crown_fuel_consumption(FuelType.M3, 0.8, 0.5, pdf=50.0) == pytest.approx(0.2)

    def test_total(self):
        assert total_fuel_consumption(FuelType.C2, 0.8, 0.5, 2.0) == pytest.approx(2.4)


class TestFireIntensity:
    def test_byram(self):
        assert fire_intensity(2.0, 10.0) == pytest.approx(6000.0)

    def test_zero_spread(self):
        assert fire_intensity(2.0, 0.0) == 0.0
