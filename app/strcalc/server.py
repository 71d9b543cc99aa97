"""
FastAPI Server Module

Exposes the string calculator over HTTP.
"""

import uuid
from typing import List, Optional
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from . import __version__
from .calculator import StringCalculator
from .config import Config, load_config
from .logging_config import setup_logging, get_logger, set_correlation_id

logger = get_logger("server")

router = APIRouter()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the calculator on startup."""
    logger.info("Starting strcalc server...")
    app.state.calculator = StringCalculator()
    try:
        yield
    finally:
        logger.info("Shutting down strcalc server...")


async def correlation_id_middleware(request: Request, call_next):
    """Middleware to handle correlation IDs."""
    correlation_id = request.headers.get("X-Correlation-ID", f"req_{uuid.uuid4().hex[:8]}")
    set_correlation_id(correlation_id)
    response = await call_next(request)
    response.headers["X-Correlation-ID"] = correlation_id
    return response


# ============================================
# HTTP Models
# ============================================

class AddRequest(BaseModel):
    """Request body for the add endpoint."""
    numbers: str


class AddResponse(BaseModel):
    """Response from the add endpoint."""
    success: bool
    total: Optional[int] = None
    negatives: List[int] = Field(default_factory=list)
    error: Optional[str] = None


# ============================================
# Endpoints
# ============================================

@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@router.post("/api/add", response_model=AddResponse)
async def add_numbers(request: AddRequest, http_request: Request) -> AddResponse:
    """Sum a delimited number string."""
    calculator: StringCalculator = http_request.app.state.calculator
    result = calculator.evaluate(request.numbers)

    if not result.success:
        logger.info(f"Rejected input with negatives: {result.negatives}")
        return AddResponse(success=False, negatives=result.negatives, error=result.error)

    logger.info(f"Summed {len(result.tokens)} tokens to {result.total}")
    return AddResponse(success=True, total=result.total)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Settings to use (loaded from the environment if omitted)

    Only origins listed in config.cors_origins pass the CORS check.
    """
    if config is None:
        config = load_config()

    setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    app = FastAPI(
        title="strcalc API",
        description="Sums delimited number strings",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.middleware("http")(correlation_id_middleware)
    app.include_router(router)
    return app


app = create_app()
