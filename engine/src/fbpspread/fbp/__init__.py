"""Canadian Fire Behavior Prediction (FBP) System."""

from fbpspread.fbp.constants import FUEL_TYPES, FuelType, FuelTypeSpec, get_fuel_spec

__all__ = ["FUEL_TYPES", "FuelType", "FuelTypeSpec", "get_fuel_spec"]
