"""Batch REST endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from fbpspread_api.routers.spread import result_to_schema
from fbpspread_api.schemas.spread import BatchCreate, BatchResponse, BatchStatus
from fbpspread_api.services.runner import BatchRunner

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/batches", tags=["batches"])

# Shared state, injected from main app
runner: BatchRunner | None = None


@router.post("", response_model=BatchResponse)
async def create_batch(params: BatchCreate) -> BatchResponse:
    """Start evaluating a batch of observations in the background."""
    if runner is None:
        raise HTTPException(status_code=500, detail="Runner not initialized")

    batch_id = runner.create(params)
    logger.info("Batch %s started: %d observations", batch_id, len(params.observations))

    return BatchResponse(
        batch_id=batch_id,
        status=BatchStatus.RUNNING,
        count=len(params.observations),
    )


@router.get("/{batch_id}", response_model=BatchResponse)
async def get_batch(batch_id: str) -> BatchResponse:
    """Get batch status and results in submission order."""
    if runner is None:
        raise HTTPException(status_code=500, detail="Runner not initialized")

    run = runner.get(batch_id)
    if run is None:
        raise HTTPException(status_code=404, detail="Batch not found")

    fuels = [obs.fuel_type for obs in run.request.observations]
    results = [result_to_schema(ft, r) for ft, r in zip(fuels, run.get_results())]

    return BatchResponse(
        batch_id=run.id,
        status=run.status,
        count=run.count,
        results=results,
        error=run.error,
    )
