# src/civic_pulse/main.py
"""Main entry point for the Civic Pulse application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from civic_pulse import __version__
from civic_pulse.api.v1 import issues_router, votes_router
from civic_pulse.core.settings import settings

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Civic Pulse API",
    description="Duplicate detection and area-restricted voting for citizen issue reports",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(issues_router, prefix="/api/v1")
app.include_router(votes_router, prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    logging.getLogger("civic_pulse").setLevel(settings.log_level.upper())
    # Fail fast on a misconfigured weight table.
    scoring = settings.scoring
    logger.info(
        "Scoring config loaded: duplicate_threshold=%.2f voting_radius_km=%.1f",
        scoring.duplicate_threshold,
        scoring.voting_radius_km,
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": "Civic Pulse API",
        "version": __version__,
        "description": "Duplicate detection and area-restricted voting for citizen issue reports",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("civic_pulse.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
