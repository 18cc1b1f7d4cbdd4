"""Single source of truth for all FBP fuel type parameters.

All fuel type data is defined here as frozen dataclasses. Every other module
that needs fuel coefficients imports from this file; the table is built once
at import time and never mutated.

Parameters from:
    Forestry Canada Fire Danger Group (1992).
    Development and Structure of the Canadian Forest Fire Behavior
    Prediction System. Information Report ST-X-3.

    Wotton, B.M., Alexander, M.E., Taylor, S.W. (2009). Updates and revisions
    to the 1992 Canadian Forest Fire Behavior Prediction System.
    Information Report GLC-X-10.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FuelType(str, Enum):
    """Canadian FBP fuel type codes.

    NF (non-fuel) and WA (water) are sentinels: they carry no spread
    coefficients and make the slope adjustment undefined.
    """

    C1 = "C1"
    C2 = "C2"
    C3 = "C3"
    C4 = "C4"
    C5 = "C5"
    C6 = "C6"
    C7 = "C7"
    D1 = "D1"
    M1 = "M1"
    M2 = "M2"
    M3 = "M3"
    M4 = "M4"
    S1 = "S1"
    S2 = "S2"
    S3 = "S3"
    O1A = "O1A"
    O1B = "O1B"
    NF = "NF"
    WA = "WA"

    @classmethod
    def _missing_(cls, value: object) -> FuelType | None:
        # Accept "c2", "C-2", "o1a", " O-1b "
        if isinstance(value, str):
            code = value.strip().upper().replace("-", "")
            for member in cls:
                if member.value == code:
                    return member
        return None


@dataclass(frozen=True)
class FuelTypeSpec:
    """Complete specification for a single FBP fuel type.

    Attributes:
        code: FBP fuel type code (e.g., FuelType.C2)
        name: Full descriptive name
        group: Fuel group ("conifer", "deciduous", "mixedwood", "slash",
            "grass", "non_fuel")
        a: ROS equation asymptote a (m/min)
        b: ROS equation rate parameter b
        c0: ROS equation shape parameter c0
        q: Proportion of maximum spread rate reached at BUIo
        bui0: Average BUI for the fuel type (BUIo)
        cbh: Default crown base height (m), 0 for fuels without a crown layer
        cfl: Default crown fuel load (kg/m2), 0 for fuels without a crown layer
    """

    code: FuelType
    name: str
    group: str
    a: float
    b: float
    c0: float
    q: float
    bui0: float
    cbh: float
    cfl: float

    @property
    def is_fuel(self) -> bool:
        return self.group != "non_fuel"

    @property
    def has_crown(self) -> bool:
        return self.group in ("conifer", "mixedwood")


# ST-X-3 Tables 6-8 with the GLC-X-10 revisions (C4 q, M4 c0).
FUEL_TYPES: dict[FuelType, FuelTypeSpec] = {
    FuelType.C1: FuelTypeSpec(
        code=FuelType.C1, name="Spruce-Lichen Woodland", group="conifer",
        a=90, b=0.0649, c0=4.5, q=0.90, bui0=72, cbh=2.0, cfl=0.75,
    ),
    FuelType.C2: FuelTypeSpec(
        code=FuelType.C2, name="Boreal Spruce", group="conifer",
        a=110, b=0.0282, c0=1.5, q=0.70, bui0=64, cbh=3.0, cfl=0.80,
    ),
    FuelType.C3: FuelTypeSpec(
        code=FuelType.C3, name="Mature Jack or Lodgepole Pine", group="conifer",
        a=110, b=0.0444, c0=3.0, q=0.75, bui0=62, cbh=8.0, cfl=1.15,
    ),
    FuelType.C4: FuelTypeSpec(
        code=FuelType.C4, name="Immature Jack or Lodgepole Pine", group="conifer",
        a=110, b=0.0293, c0=1.5, q=0.80, bui0=66, cbh=4.0, cfl=1.20,
    ),
    FuelType.C5: FuelTypeSpec(
        code=FuelType.C5, name="Red and White Pine", group="conifer",
        a=30, b=0.0697, c0=4.0, q=0.80, bui0=56, cbh=18.0, cfl=1.20,
    ),
    FuelType.C6: FuelTypeSpec(
        code=FuelType.C6, name="Conifer Plantation", group="conifer",
        a=30, b=0.0800, c0=3.0, q=0.80, bui0=62, cbh=7.0, cfl=1.80,
    ),
    FuelType.C7: FuelTypeSpec(
        code=FuelType.C7, name="Ponderosa Pine/Douglas-fir", group="conifer",
        a=45, b=0.0305, c0=2.0, q=0.85, bui0=106, cbh=10.0, cfl=0.50,
    ),
    FuelType.D1: FuelTypeSpec(
        code=FuelType.D1, name="Leafless Aspen", group="deciduous",
        a=30, b=0.0232, c0=1.6, q=0.90, bui0=32, cbh=0.0, cfl=0.0,
    ),
    FuelType.M1: FuelTypeSpec(
        code=FuelType.M1, name="Boreal Mixedwood - Leafless", group="mixedwood",
        a=0, b=0.0, c0=0.0, q=0.80, bui0=50, cbh=6.0, cfl=0.80,
    ),
    FuelType.M2: FuelTypeSpec(
        code=FuelType.M2, name="Boreal Mixedwood - Green", group="mixedwood",
        a=0, b=0.0, c0=0.0, q=0.80, bui0=50, cbh=6.0, cfl=0.80,
    ),
    FuelType.M3: FuelTypeSpec(
        code=FuelType.M3, name="Dead Balsam Fir Mixedwood - Leafless", group="mixedwood",
        a=120, b=0.0572, c0=1.4, q=0.80, bui0=50, cbh=6.0, cfl=0.80,
    ),
    FuelType.M4: FuelTypeSpec(
        code=FuelType.M4, name="Dead Balsam Fir Mixedwood - Green", group="mixedwood",
        a=100, b=0.0404, c0=1.48, q=0.80, bui0=50, cbh=6.0, cfl=0.80,
    ),
    FuelType.S1: FuelTypeSpec(
        code=FuelType.S1, name="Jack or Lodgepole Pine Slash", group="slash",
        a=75, b=0.0297, c0=1.3, q=0.75, bui0=38, cbh=0.0, cfl=0.0,
    ),
    FuelType.S2: FuelTypeSpec(
        code=FuelType.S2, name="White Spruce/Balsam Slash", group="slash",
        a=40, b=0.0438, c0=1.7, q=0.75, bui0=63, cbh=0.0, cfl=0.0,
    ),
    FuelType.S3: FuelTypeSpec(
        code=FuelType.S3, name="Coastal Cedar/Hemlock/Douglas-fir Slash", group="slash",
        a=55, b=0.0829, c0=3.2, q=0.75, bui0=31, cbh=0.0, cfl=0.0,
    ),
    FuelType.O1A: FuelTypeSpec(
        code=FuelType.O1A, name="Matted Grass", group="grass",
        a=190, b=0.0310, c0=1.4, q=1.0, bui0=1, cbh=0.0, cfl=0.0,
    ),
    FuelType.O1B: FuelTypeSpec(
        code=FuelType.O1B, name="Standing Grass", group="grass",
        a=250, b=0.0350, c0=1.7, q=1.0, bui0=1, cbh=0.0, cfl=0.0,
    ),
    FuelType.NF: FuelTypeSpec(
        code=FuelType.NF, name="Non-fuel", group="non_fuel",
        a=0, b=0.0, c0=0.0, q=0.0, bui0=0, cbh=0.0, cfl=0.0,
    ),
    FuelType.WA: FuelTypeSpec(
        code=FuelType.WA, name="Water", group="non_fuel",
        a=0, b=0.0, c0=0.0, q=0.0, bui0=0, cbh=0.0, cfl=0.0,
    ),
}

# Fuel types whose spread follows the plain a(1 - exp(-b*ISI))^c0 curve.
SIMPLE_FUEL_TYPES = frozenset({
    FuelType.C1, FuelType.C2, FuelType.C3, FuelType.C4, FuelType.C5,
    FuelType.C7, FuelType.D1, FuelType.S1, FuelType.S2, FuelType.S3,
})

GRASS_FUEL_TYPES = frozenset({FuelType.O1A, FuelType.O1B})

NON_FUEL_TYPES = frozenset({FuelType.NF, FuelType.WA})

BURNABLE_FUEL_TYPES = tuple(ft for ft in FuelType if ft not in NON_FUEL_TYPES)


def get_fuel_spec(fuel_type: FuelType | str) -> FuelTypeSpec:
    """Look up fuel type specification.

    Args:
        fuel_type: FuelType enum or string code (e.g., "C2", "c-2")

    Returns:
        FuelTypeSpec for the given fuel type

    Raises:
        ValueError: If a string code does not name a fuel type
    """
    if isinstance(fuel_type, str):
        fuel_type = FuelType(fuel_type)
    return FUEL_TYPES[fuel_type]
