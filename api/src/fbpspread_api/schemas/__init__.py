"""Pydantic schemas for the API."""

from fbpspread_api.schemas.spread import (
    BatchCreate,
    BatchResponse,
    BatchStatus,
    C6Request,
    C6Response,
    SlopeRequest,
    SlopeResponse,
    SpreadRequest,
    SpreadResponse,
)

__all__ = [
    "BatchCreate",
    "BatchResponse",
    "BatchStatus",
    "C6Request",
    "C6Response",
    "SlopeRequest",
    "SlopeResponse",
    "SpreadRequest",
    "SpreadResponse",
]
