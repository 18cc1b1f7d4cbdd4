"""Pydantic models for rate-of-spread endpoints."""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from fbpspread.fbp.constants import FuelType
from fbpspread.types import SlopeInputs, SpreadInputs


class _FuelTypeModel(BaseModel):
    """Accepts fuel codes case-insensitively, with or without a hyphen."""

    fuel_type: FuelType = Field(..., description="FBP fuel type code, e.g. C2 or O1A")

    @field_validator("fuel_type", mode="before")
    @classmethod
    def _parse_fuel_type(cls, value: object) -> FuelType:
        return FuelType(value)


class SpreadRequest(_FuelTypeModel):
    """One observation for the rate-of-spread engine."""

    isi: float = Field(..., ge=0, description="Initial Spread Index")
    bui: float = Field(..., ge=0, description="Buildup Index")
    fmc: float = Field(default=100.0, gt=0, le=300, description="Foliar moisture content (%)")
    sfc: float = Field(..., gt=0, description="Surface fuel consumption (kg/m2)")
    cbh: float | None = Field(
        default=None, gt=0, le=50, description="Crown base height (m); default by fuel type"
    )
    pc: float = Field(default=50.0, ge=0, le=100, description="Percent conifer (M1/M2)")
    pdf: float = Field(default=35.0, ge=0, le=100, description="Percent dead balsam fir (M3/M4)")
    cc: float = Field(default=80.0, ge=0, le=100, description="Percent grass curing (O1A/O1B)")

    def to_inputs(self) -> SpreadInputs:
        return SpreadInputs(
            fuel_type=self.fuel_type,
            isi=self.isi,
            bui=self.bui,
            fmc=self.fmc,
            sfc=self.sfc,
            cbh=self.cbh,
            pc=self.pc,
            pdf=self.pdf,
            cc=self.cc,
        )


class SpreadResponse(BaseModel):
    """Rate of spread and crown fire coupling for one observation."""

    fuel_type: FuelType
    ros: float
    cfb: float
    csi: float
    rso: float
    rsi: float
    rss: float
    rsc: float | None = None
    fire_type: str


class C6Request(BaseModel):
    """Inputs for the C6 conifer plantation chain."""

    isi: float = Field(..., ge=0, description="Initial Spread Index")
    bui: float = Field(..., ge=0, description="Buildup Index")
    fmc: float = Field(default=100.0, gt=0, le=300, description="Foliar moisture content (%)")
    sfc: float = Field(..., gt=0, description="Surface fuel consumption (kg/m2)")
    cbh: float | None = Field(default=None, gt=0, le=50, description="Crown base height (m)")


class C6Response(BaseModel):
    rsi: float
    rss: float
    rsc: float
    csi: float
    rso: float
    cfb: float
    ros: float


class SlopeRequest(_FuelTypeModel):
    """Inputs for the slope/wind vector adjustment. Azimuths in radians."""

    ffmc: float = Field(..., ge=0, le=101, description="Fine Fuel Moisture Code")
    bui: float = Field(..., ge=0, description="Buildup Index")
    wind_speed: float = Field(..., ge=0, le=200, description="Wind speed (km/h)")
    wind_azimuth: float = Field(
        default=0.0, ge=0, le=2 * math.pi, description="Wind azimuth (radians)"
    )
    ground_slope: float = Field(default=0.0, ge=0, description="Ground slope (%)")
    slope_azimuth: float = Field(
        default=0.0, ge=0, le=2 * math.pi, description="Upslope azimuth (radians)"
    )
    fmc: float = Field(default=100.0, gt=0, le=300, description="Foliar moisture content (%)")
    sfc: float = Field(..., gt=0, description="Surface fuel consumption (kg/m2)")
    cbh: float | None = Field(default=None, gt=0, le=50, description="Crown base height (m)")
    pc: float = Field(default=50.0, ge=0, le=100)
    pdf: float = Field(default=35.0, ge=0, le=100)
    cc: float = Field(default=80.0, ge=0, le=100)

    def to_inputs(self) -> SlopeInputs:
        return SlopeInputs(
            fuel_type=self.fuel_type,
            ffmc=self.ffmc,
            bui=self.bui,
            wind_speed=self.wind_speed,
            wind_azimuth=self.wind_azimuth,
            ground_slope=self.ground_slope,
            slope_azimuth=self.slope_azimuth,
            fmc=self.fmc,
            sfc=self.sfc,
            cbh=self.cbh,
            pc=self.pc,
            pdf=self.pdf,
            cc=self.cc,
        )


class SlopeResponse(BaseModel):
    """Net effective wind. Both fields are null for non-fuel and water."""

    wsv: float | None
    raz: float | None


class BatchCreate(BaseModel):
    """Request body for a batch of spread observations."""

    observations: list[SpreadRequest] = Field(..., min_length=1, max_length=100_000)
    max_workers: int | None = Field(default=None, ge=1, le=64, description="Thread pool size")


class BatchStatus(str, Enum):
    """Batch job status."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class BatchResponse(BaseModel):
    """Response from batch creation or status query."""

    batch_id: str
    status: BatchStatus
    count: int
    results: list[SpreadResponse] = []
    error: str | None = None
