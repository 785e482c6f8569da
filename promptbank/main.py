"""Promptbank API application.

Run with ``uvicorn promptbank.main:app``. Importing this module configures
logging, checks the database is reachable and creates missing tables.
"""

import logging
import re
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import __version__
from .api import auth_router, folders_router, prompts_router, transfer_router, workspace_router
from .core.config import ConfigurationError, settings
from .core.logging_config import setup_logging
from .database import DATABASE_URL, engine, get_db, init_db, is_postgresql
from .exceptions import PromptbankError
from .middleware.exception_handler import promptbank_exception_handler, request_validation_handler
from .middleware.request_context import RequestContextMiddleware
from .models import Prompt
from .services.listing_cache import RootListingCache

setup_logging(log_level=settings.log_level, log_format=settings.log_format)
logger = logging.getLogger(__name__)


def _mask_url(url: str) -> str:
    """Hide the password part of a database URL."""
    return re.sub(r"(://[^:/@]+):[^@]+@", r"\1:***@", url)


def _check_database() -> None:
    masked = _mask_url(DATABASE_URL)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.critical("Cannot reach database %s: %s", masked, e)
        raise SystemExit(1) from e
    logger.info("Database reachable: %s", masked)


_check_database()
init_db()

_started_at = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        settings.validate_production_config()
    except ConfigurationError as e:
        logger.critical(str(e))
        raise SystemExit(1) from e
    for problem in settings.insecure_settings():
        logger.warning("Insecure setting: %s", problem)

    logger.info(
        "Promptbank API ready",
        extra={
            "environment": settings.environment.value,
            "database": "postgresql" if is_postgresql() else "sqlite",
            "cors": settings.get_cors_origins(),
        },
    )
    yield
    app.state.listing_cache.clear()


app = FastAPI(
    title="Promptbank API",
    description=(
        "Reusable prompts organised in colored folders.\n\n"
        "Sign in at `/api/auth/signin` and pass the token as `Authorization: Bearer <token>`. "
        "Folder, prompt, workspace and transfer routes only ever see the caller's own rows."
    ),
    version=__version__,
    lifespan=lifespan,
)
app.state.listing_cache = RootListingCache()

# Added last = outermost, so CORS headers also land on 429 responses.
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
)

app.add_exception_handler(PromptbankError, promptbank_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)

for router in (auth_router, workspace_router, folders_router, prompts_router, transfer_router):
    app.include_router(router)


@app.get("/")
def root():
    return {"name": "Promptbank API", "version": __version__, "status": "running"}


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Liveness plus a database probe. Reports "degraded" instead of failing."""
    try:
        prompt_count = db.query(func.count(Prompt.id)).scalar() or 0
        db_status = "ok"
    except SQLAlchemyError:
        logger.exception("Health check could not query the database")
        prompt_count, db_status = 0, "error"

    return {
        "status": "healthy" if db_status == "ok" else "degraded",
        "db": db_status,
        "uptime_seconds": round(time.monotonic() - _started_at),
        "version": __version__,
        "prompt_count": prompt_count,
    }
