"""
Status endpoints.

``/health`` answers as long as the process serves requests; it never
touches the AdventureWorks database. ``/version`` reports the package and
API schema versions.
"""

from fastapi import APIRouter

from adventureworks_lab import __version__

API_SCHEMA_VERSION = "v1"

router = APIRouter()


@router.get("/health", summary="Health Check", response_description="Liveness status.")
async def health_check():
    return {"status": "ok"}


@router.get("/version", summary="Get Version", response_description="Package and API schema versions.")
async def version():
    """Report the installed package version with the API schema version it serves."""
    return {"version": __version__, "schema_version": API_SCHEMA_VERSION}
