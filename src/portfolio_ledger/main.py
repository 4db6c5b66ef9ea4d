"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from portfolio_ledger.config.settings import get_settings
from portfolio_ledger.config.logging_config import setup_logging
from portfolio_ledger.repositories.sqlalchemy.database import init_db
from portfolio_ledger.api.routers import (
    portfolios_router,
    cash_movements_router,
    orders_router,
    positions_router,
    snapshots_router,
)
from portfolio_ledger.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Portfolio ledger: cash movements, order settlement and snapshots",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(portfolios_router)
app.include_router(cash_movements_router)
app.include_router(orders_router)
app.include_router(positions_router)
app.include_router(snapshots_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Map domain errors to their status class and stable code."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are a generic 400 with field-level detail."""
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
