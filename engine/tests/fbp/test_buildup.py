"""Tests for the buildup effect."""

import math

import pytest

from fbpspread.fbp.buildup import buildup_effect, calculate_bui_effect
from fbpspread.fbp.constants import FuelType


class TestBUIEffect:
    """Test BUI effect on rate of spread."""

    def test_bui_effect_at_bui0(self):
        assert calculate_bui_effect(64.0, 0.70, 64.0) == pytest.approx(1.0)

    def test_bui_effect_above_bui0(self):
        assert calculate_bui_effect(100.0, 0.70, 64.0) > 1.0

    def test_bui_effect_below_bui0(self):
        assert calculate_bui_effect(30.0, 0.70, 64.0) < 1.0

    def test_known_value(self):
        expected = math.exp(50.0 * math.log(0.7) * (1.0 / 60.0 - 1.0 / 64.0))
        assert buildup_effect(FuelType.C2, 60.0) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("fuel_type", list(FuelType))
    def test_disabled_bui_is_inert(self, fuel_type):
        """A non-positive BUI switches the effect off for every fuel type."""
        assert buildup_effect(fuel_type, -1.0) == 1.0
        assert buildup_effect(fuel_type, 0.0) == 1.0

    @pytest.mark.parametrize("fuel_type", [FuelType.O1A, FuelType.O1B])
    def test_grass_is_inert(self, fuel_type):
        assert buildup_effect(fuel_type, 120.0) == 1.0

    def test_non_fuel_is_inert(self):
        assert buildup_effect(FuelType.NF, 80.0) == 1.0
        assert buildup_effect(FuelType.WA, 80.0) == 1.0

    def test_accepts_string_code(self):
        assert buildup_effect("c-2", 60.0) == buildup_effect(FuelType.C2, 60.0)
