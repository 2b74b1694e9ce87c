"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from relieftrack.api import activity, dashboard, distributions, households, inventory, websocket
from relieftrack.config import get_settings
from relieftrack.services.errors import (
    DuplicateHouseholdNumber,
    InsufficientStock,
    NotFoundError,
    ReliefTrackError,
    StoreError,
    ValidationError,
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[ReliefTrackError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateHouseholdNumber: status.HTTP_409_CONFLICT,
    InsufficientStock: status.HTTP_409_CONFLICT,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting ReliefTrack ({settings.environment})")
    yield


app = FastAPI(
    title="ReliefTrack API",
    description="Relief supply inventory, household registry and distribution tracking",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(ReliefTrackError)
async def relieftrack_error_handler(request: Request, exc: ReliefTrackError) -> JSONResponse:
    """Render service errors the same way as ``HTTPException``."""
    status_code = next(
        (code for cls, code in ERROR_STATUS_CODES.items() if isinstance(exc, cls)),
        status.HTTP_400_BAD_REQUEST,
    )
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


# Register routers
app.include_router(inventory.router)
app.include_router(households.router)
app.include_router(distributions.router)
app.include_router(activity.router)
app.include_router(dashboard.router)
app.include_router(websocket.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
