"""Rate-of-spread and slope adjustment endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from fbpspread.fbp.c6 import calculate_c6
from fbpspread.fbp.calculator import rate_of_spread_extended
from fbpspread.fbp.constants import FuelType
from fbpspread.fbp.crown_fire import crown_base_height
from fbpspread.spread.slope import slope_adjustment
from fbpspread.types import SpreadResult

from fbpspread_api.schemas.spread import (
    C6Request,
    C6Response,
    SlopeRequest,
    SlopeResponse,
    SpreadRequest,
    SpreadResponse,
)

router = APIRouter(prefix="/api/v1", tags=["spread"])


def result_to_schema(fuel_type: FuelType, result: SpreadResult) -> SpreadResponse:
    """Convert engine SpreadResult to API schema."""
    return SpreadResponse(
        fuel_type=fuel_type,
        ros=result.ros,
        cfb=result.cfb,
        csi=result.csi,
        rso=result.rso,
        rsi=result.rsi,
        rss=result.rss,
        rsc=result.rsc,
        fire_type=result.fire_type.value,
    )


@router.post("/spread", response_model=SpreadResponse)
async def calculate_spread(params: SpreadRequest) -> SpreadResponse:
    """Rate of spread, CFB, CSI and RSO for one observation."""
    result = rate_of_spread_extended(params.to_inputs())
    return result_to_schema(params.fuel_type, result)


@router.post("/spread/c6", response_model=C6Response)
async def calculate_spread_c6(params: C6Request) -> C6Response:
    """Every intermediate value of the C6 conifer plantation model."""
    cbh = crown_base_height(FuelType.C6, params.cbh)
    c6 = calculate_c6(params.isi, params.bui, params.fmc, params.sfc, cbh)
    return C6Response(
        rsi=c6.rsi, rss=c6.rss, rsc=c6.rsc, csi=c6.csi, rso=c6.rso, cfb=c6.cfb, ros=c6.ros,
    )


@router.post("/slope", response_model=SlopeResponse)
async def calculate_slope(params: SlopeRequest) -> SlopeResponse:
    """Net effective wind speed and spread azimuth on sloped ground."""
    result = slope_adjustment(params.to_inputs())
    return SlopeResponse(wsv=result.wsv, raz=result.raz)
