"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS)
and exception handlers, and includes all API routers. It serves as the root
of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from adventureworks_lab import __version__
from adventureworks_lab.core.database import check_connection
from adventureworks_lab.core.logging_config import get_logger, setup_logging

from .api import adventure_works
from .api.v1 import health, practice
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    On startup the AdventureWorks database connection is checked. A failure is
    logged but does not stop the server: the practice API does not need the
    database, and the AdventureWorks endpoints report their own errors.
    """
    # Startup
    logger.info("Starting up AdventureWorks-Lab Server...")
    try:
        await check_connection()
        logger.info("AdventureWorks database is reachable")
    except Exception as e:
        logger.error(f"AdventureWorks database check failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down AdventureWorks-Lab Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    AdventureWorks-Lab Server API

    Demo endpoints reading the AdventureWorks2012 sample database, and the SQL
    practice catalog with an executable verifier for every annotated attempt.
    """,
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(adventure_works.legacy_router)
app.include_router(adventure_works.router)
app.include_router(practice.router, prefix=f"{constant.API_V1_STR}/practice", tags=["practice"])


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)
