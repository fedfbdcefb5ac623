"""
Fitness Planner FastAPI server main entrypoint.
Handles CORS, error handling, health and API routers.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import psutil
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import SETTINGS
from ..exercise_file import get_catalog
from ..logging_setup import setup_logging
from .routes.calculator import router as r_calculator
from .routes.exercises import router as r_exercises
from .routes.workout import router as r_workout


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    try:
        catalog = get_catalog()
        logging.info("Exercise catalog ready with %d exercises", len(catalog))
        logging.info("FastAPI server startup completed")
    except Exception as e:
        logging.exception("FastAPI startup failed: %s", e)
        raise

    yield

    # Shutdown
    logging.info("FastAPI server shutdown completed")


app = FastAPI(
    title=SETTINGS.APP_NAME,
    description="Weight calculator, exercise database and workout generator",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exc_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler: log and return a generic error response.
    """
    logging.exception("Unhandled error in %s: %s", request.url, exc)
    return JSONResponse(
        {"ok": False, "error": "internal_error", "message": "Internal server error"},
        status_code=500,
    )


@app.get("/healthz")
async def healthz() -> dict:
    """
    Health check endpoint with system status.
    """
    try:
        memory = psutil.virtual_memory()
        cpu_percent = psutil.cpu_percent(interval=0.1)
        catalog_size = len(get_catalog())

        is_healthy = memory.percent < 90 and cpu_percent < 95 and catalog_size > 0

        return {
            "ok": is_healthy,
            "status": "healthy" if is_healthy else "degraded",
            "timestamp": datetime.now(UTC).isoformat(),
            "system": {
                "memory_percent": round(memory.percent, 1),
                "memory_available_mb": round(memory.available / 1024 / 1024, 1),
                "cpu_percent": round(cpu_percent, 1),
            },
            "catalog": {"exercises": catalog_size},
        }

    except Exception as e:
        logging.exception("Health check failed: %s", e)
        return {
            "ok": False,
            "status": "error",
            "timestamp": datetime.now(UTC).isoformat(),
            "error": str(e),
        }


@app.get("/")
async def root() -> dict:
    """
    Root endpoint with API information.
    """
    return {
        "ok": True,
        "name": SETTINGS.APP_NAME,
        "version": __version__,
        "description": "Weight calculator, exercise database and workout generator",
    }


# Routers for API endpoints
app.include_router(r_calculator, prefix="/api/v1", tags=["calculator"])
app.include_router(r_exercises, prefix="/api/v1", tags=["exercises"])
app.include_router(r_workout, prefix="/api/v1", tags=["workout"])
