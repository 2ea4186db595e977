"""
FastAPI backend for the job board.

Serves the job CRUD surface and the account surface used by the mobile
client. Error bodies use a ``message`` key; server failures also carry
an ``error`` field.
"""

import logging
from datetime import datetime

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobboard.common.error_handling import safe_execute
from jobboard.common.repositories import JobRepositoryInterface
from version import __version__

from .config import get_settings, validate_config_on_startup
from .dependencies import get_jobs_repo
from .models import HealthResponse
from .routes import jobs_router, users_router
from .seed import seed_jobs

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

# Validate configuration at startup
validate_config_on_startup()
settings = get_settings()

app = FastAPI(title="Job App Backend", version=__version__)

# Configure CORS using validated settings
if settings.allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(jobs_router)
app.include_router(users_router)


# =============================================================================
# Error responses
# =============================================================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"message": "Invalid request", "error": errors})


@app.exception_handler(PyMongoError)
async def database_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Server error", "error": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Server error", "error": str(exc)})


# =============================================================================
# Service endpoints
# =============================================================================

@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Welcome to the Job App Backend!"


@app.get("/health", response_model=HealthResponse)
def health_check(repo: JobRepositoryInterface = Depends(get_jobs_repo)) -> HealthResponse:
    """Health check endpoint for container orchestration."""
    return HealthResponse(status="healthy", jobs=repo.count(), timestamp=datetime.utcnow())


@app.on_event("startup")
async def seed_on_startup():
    """Insert sample jobs into an empty collection."""
    if not get_settings().seed_on_startup:
        logger.info("Seeding disabled")
        return

    repo = app.dependency_overrides.get(get_jobs_repo, get_jobs_repo)()
    safe_execute(
        seed_jobs,
        repo,
        operation_name="seed jobs",
        logger=logger,
        fallback=0,
    )
