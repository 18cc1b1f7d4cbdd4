"""Shared dataclasses and type definitions for fbpspread."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fbpspread.fbp.constants import FuelType


class FireType(str, Enum):
    """ST-X-3 fire description derived from crown fraction burned."""

    SURFACE = "surface"
    INTERMITTENT_CROWN = "intermittent_crown"
    CONTINUOUS_CROWN = "continuous_crown"


class C6Output(str, Enum):
    """Which intermediate value of the C6 chain to return."""

    RSI = "RSI"
    RSC = "RSC"
    CFB = "CFB"
    ROS = "ROS"


@dataclass(frozen=True)
class SpreadInputs:
    """One observation for the rate-of-spread engine.

    Attributes:
        fuel_type: FBP fuel type
        isi: Initial Spread Index
        bui: Buildup Index
        fmc: Foliar moisture content (%)
        sfc: Surface fuel consumption (kg/m2)
        cbh: Crown base height (m); None uses the fuel type default
        pc: Percent conifer (M1/M2)
        pdf: Percent dead balsam fir (M3/M4)
        cc: Percent grass curing (O1A/O1B)
    """

    fuel_type: FuelType
    isi: float
    bui: float
    fmc: float
    sfc: float
    cbh: float | None = None
    pc: float = 50.0
    pdf: float = 35.0
    cc: float = 80.0


@dataclass(frozen=True)
class SpreadResult:
    """Output of the rate-of-spread engine for one observation."""

    ros: float  # m/min, floored at 1e-6
    cfb: float  # crown fraction burned [0, 1)
    csi: float  # critical surface intensity (kW/m)
    rso: float  # surface spread rate at crowning (m/min)
    rsi: float  # spread rate before buildup effect (m/min)
    rss: float  # surface spread rate after buildup effect (m/min)
    fire_type: FireType
    rsc: float | None = None  # crown spread rate, C6 only (m/min)


@dataclass(frozen=True)
class C6Result:
    """All intermediate values of the C6 conifer plantation model."""

    rsi: float
    rss: float
    rsc: float
    csi: float
    rso: float
    cfb: float
    ros: float


@dataclass(frozen=True)
class SlopeInputs:
    """Inputs for the slope/wind vector adjustment.

    Same stand description as SpreadInputs, with FFMC in place of ISI
    because the zero-wind ISI is derived from it. Azimuths are radians.
    """

    fuel_type: FuelType
    ffmc: float
    bui: float
    wind_speed: float  # km/h
    wind_azimuth: float  # radians
    ground_slope: float  # percent
    slope_azimuth: float  # radians, upslope direction
    fmc: float
    sfc: float
    cbh: float | None = None
    pc: float = 50.0
    pdf: float = 35.0
    cc: float = 80.0

    def spread_inputs(self, isi: float) -> SpreadInputs:
        """Build the matching SpreadInputs at a given ISI."""
        return SpreadInputs(
            fuel_type=self.fuel_type,
            isi=isi,
            bui=self.bui,
            fmc=self.fmc,
            sfc=self.sfc,
            cbh=self.cbh,
            pc=self.pc,
            pdf=self.pdf,
            cc=self.cc,
        )


@dataclass(frozen=True)
class SlopeResult:
    """Net effective wind vector. Both fields are None for non-fuel."""

    wsv: float | None  # km/h
    raz: float | None  # radians

    @property
    def defined(self) -> bool:
        return self.wsv is not None and self.raz is not None
