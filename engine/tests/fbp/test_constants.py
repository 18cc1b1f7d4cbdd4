"""Tests for FBP fuel type constants.

Validates that all fuel types are defined with correct parameters
and that lookup functions work correctly.
"""

import pytest

from fbpspread.fbp.constants import (
    BURNABLE_FUEL_TYPES,
    FUEL_TYPES,
    NON_FUEL_TYPES,
    FuelType,
    FuelTypeSpec,
    get_fuel_spec,
)


class TestFuelTypes:
    """Validate fuel type definitions."""

    def test_17_burnable_fuel_types(self):
        assert len(BURNABLE_FUEL_TYPES) == 17
        assert len(FUEL_TYPES) == len(FuelType) == 19

    @pytest.mark.parametrize("fuel_type", list(FuelType))
    def test_every_fuel_type_has_spec(self, fuel_type):
        """Every FuelType enum member must have a FuelTypeSpec entry."""
        spec = FUEL_TYPES[fuel_type]
        assert isinstance(spec, FuelTypeSpec)
        assert spec.code == fuel_type

    @pytest.mark.parametrize("fuel_type", BURNABLE_FUEL_TYPES)
    def test_bui_parameters_populated(self, fuel_type):
        spec = FUEL_TYPES[fuel_type]
        assert 0.0 < spec.q <= 1.0, f"{fuel_type}: q={spec.q} out of range"
        assert spec.bui0 > 0.0

    @pytest.mark.parametrize(
        "fuel_type",
        [ft for ft in BURNABLE_FUEL_TYPES if ft not in (FuelType.M1, FuelType.M2)],
    )
    def test_curve_parameters_populated(self, fuel_type):
        """M1/M2 are C2/D1 blends; every other fuel has its own curve."""
        spec = FUEL_TYPES[fuel_type]
        assert spec.a > 0.0
        assert spec.b > 0.0
        assert spec.c0 > 0.0

    @pytest.mark.parametrize("fuel_type", sorted(NON_FUEL_TYPES))
    def test_non_fuel_sentinels_are_empty(self, fuel_type):
        spec = FUEL_TYPES[fuel_type]
        assert not spec.is_fuel
        assert spec.a == spec.bui0 == spec.cbh == 0.0

    def test_crown_layer_groups(self):
        for ft in FuelType:
            spec = FUEL_TYPES[ft]
            if spec.has_crown:
                assert spec.cbh > 0.0, f"{ft}: CBH should be > 0"
                assert spec.cfl > 0.0, f"{ft}: CFL should be > 0"
            else:
                assert spec.cbh == 0.0
                assert spec.cfl == 0.0

    def test_glc_x_10_revisions(self):
        assert FUEL_TYPES[FuelType.C4].q == 0.80
        assert FUEL_TYPES[FuelType.M4].c0 == 1.48


class TestGetFuelSpec:
    """Test fuel type lookup function."""

    def test_lookup_by_enum(self):
        spec = get_fuel_spec(FuelType.C2)
        assert spec.code == FuelType.C2
        assert spec.name == "Boreal Spruce"

    @pytest.mark.parametrize("code", ["C2", "c2", "C-2", " c-2 "])
    def test_lookup_by_string(self, code):
        assert get_fuel_spec(code).code == FuelType.C2

    def test_grass_codes_case_insensitive(self):
        assert FuelType("O1a") == FuelType.O1A
        assert FuelType("o-1b") == FuelType.O1B

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            get_fuel_spec("XX")

    def test_specs_are_frozen(self):
        spec = get_fuel_spec(FuelType.C2)
        with pytest.raises(AttributeError):
            spec.a = 999  # type: ignore[misc]
