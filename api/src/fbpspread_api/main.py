"""FastAPI application factory.

Creates the FastAPI app with all routers, middleware, and shared services.

Usage:
    uvicorn fbpspread_api.main:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fbpspread_api.routers import batches, health, spread
from fbpspread_api.services.runner import BatchRunner

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Shared services (module-level so they survive app recreation in tests)
_runner = BatchRunner()


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    logging.getLogger(__name__).info("FBP spread API started")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title="FBP Spread API",
        description="Canadian FBP rate-of-spread and slope adjustment API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS: allow frontend dev server
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Inject services into routers
    batches.runner = _runner

    application.include_router(health.router)
    application.include_router(spread.router)
    application.include_router(batches.router)

    return application


app = create_app()
