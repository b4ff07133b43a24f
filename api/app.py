"""
Velo-Altitude Content API

FastAPI application exposing the col catalog and the content audit.

Usage:
    uvicorn api.app:app --reload --port 8000
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import APIConfig
from api.routers import audit, cols, health
from api.routers.health import VERSION
from content_audit.errors import ConfigurationError

config = APIConfig.load()

app = FastAPI(
    title="Velo-Altitude Content API",
    description="Read-only API over the col catalog and the content quality audit.",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Register routers under /api/v1 prefix
PREFIX = "/api/v1"
app.include_router(health.router, prefix=PREFIX, tags=["Health"])
app.include_router(audit.router, prefix=PREFIX, tags=["Audit"])
app.include_router(cols.router, prefix=PREFIX, tags=["Cols"])


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    return JSONResponse(status_code=500, content={"detail": f"Configuration error: {exc}"})


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Velo-Altitude Content API",
        "version": VERSION,
        "docs": "/docs",
        "health": f"{PREFIX}/health",
    }
