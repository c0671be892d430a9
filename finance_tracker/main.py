"""Main entrypoint and application factory for the Finance Tracker API.

This module initializes the FastAPI application, configures logging, creates the
database tables, maps domain errors to JSON responses, and exposes the Scalar
API reference endpoint. It also includes the main entrypoint for running the
app with Uvicorn.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from scalar_fastapi import get_scalar_api_reference

from finance_tracker.api.routes import router
from finance_tracker.core.db import engine, init_db
from finance_tracker.core.errors import AppError
from finance_tracker.core.settings import get_settings
from finance_tracker.core.utils import ensure_dir, get_logger

logger = get_logger("finance-tracker")


# --- Logging Setup ---
def setup_logging() -> None:
    """Configure logging to file and console, and ensure the log directory exists."""
    log_file = Path(get_settings().log_file)
    ensure_dir(log_file.parent)
    logger.setLevel(logging.INFO)
    # Add file handler for persistent logs (not colorized)
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(file_handler)
    logger.propagate = False


setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan event handler to create the categories and transactions tables."""
    _ = app  # Silence unused argument warning
    ensure_dir(get_settings().upload_dir)
    init_db(engine)
    yield


app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="Finance Tracker API",
    description="""
    The Finance Tracker API records income and outcome transactions, grouped by category.

    **Endpoints:**
    - `GET /transactions`: List transactions with the current balance.
    - `POST /transactions`: Create a transaction (outcomes cannot exceed the balance).
    - `POST /transactions/import`: Import transactions from a CSV file.
    - `GET /health`: Health check endpoint.
    - `GET /scalar`: Interactive Scalar OpenAPI documentation.
    """,
    version="1.0.0",
)
app.include_router(router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Return domain errors as ``{"detail": message}`` with their status code."""
    logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/scalar", include_in_schema=False)
async def scalar_docs() -> JSONResponse:
    """Return Scalar API reference."""
    return get_scalar_api_reference(openapi_url=app.openapi_url, title=app.title)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("finance_tracker.main:app", host=settings.server_host, port=settings.server_port, reload=True)
