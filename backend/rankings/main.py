"""
Competitor Registry API

FastAPI application for competitor identity administration.
"""

from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from rankings.config import settings
from rankings.db.session import init_db
from rankings.api.v1.router import api_router
from rankings.shared.exceptions import BASE_FIELD, ValidationError


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Competitor Registry API...")
    if settings.debug:
        await init_db()
        logger.info("Database initialized")

    yield

    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="Competitor Registry API",
    description="Competitor identity corrections, delegates and championship podiums",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Routes ===
app.include_router(api_router, prefix="/api/v1")


# === Error Handlers ===
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Rejected corrections: 422 with messages per field."""
    return JSONResponse(status_code=422, content={"errors": exc.errors})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed form input, reported in the same shape as rejected corrections."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        # loc is ("body", "dob"); a body that is not valid JSON has no field name
        field = ".".join(part for part in error["loc"][1:] if isinstance(part, str))
        errors.setdefault(field or BASE_FIELD, []).append(error["msg"])
    logger.debug(f"Rejected request to {request.url.path}: {errors}")
    return JSONResponse(status_code=422, content={"errors": errors})


# === Health Check ===
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "0.1.0"}
