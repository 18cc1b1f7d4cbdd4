"""Shared test fixtures for fbpspread engine tests."""

import pytest

from fbpspread.fbp.constants import FuelType
from fbpspread.types import SlopeInputs, SpreadInputs


@pytest.fixture
def standard_inputs():
    """Factory for a moderate-to-high fire danger observation.

    ISI=10, BUI=60, FMC=100, SFC=2 kg/m2, default CBH.
    """

    def _make(fuel_type=FuelType.C2, **overrides):
        values = {
            "fuel_type": fuel_type,
            "isi": 10.0,
            "bui": 60.0,
            "fmc": 100.0,
            "sfc": 2.0,
        }
        values.update(overrides)
        return SpreadInputs(**values)

    return _make


@pytest.fixture
def slope_inputs():
    """Factory for slope adjustment inputs on FFMC=90, 20 km/h wind."""

    def _make(fuel_type=FuelType.C2, **overrides):
        values = {
            "fuel_type": fuel_type,
            "ffmc": 90.0,
            "bui": 60.0,
            "wind_speed": 20.0,
            "wind_azimuth": 0.5,
            "ground_slope": 0.0,
            "slope_azimuth": 0.0,
            "fmc": 100.0,
            "sfc": 2.0,
        }
        values.update(overrides)
        return SlopeInputs(**values)

    return _make
