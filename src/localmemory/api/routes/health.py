import os

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from localmemory import __version__
from localmemory.api.dependencies import get_settings
from localmemory.api.errors import http_exception
from localmemory.application.settings import ServerSettings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    checks: dict[str, str] | None = None


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check: is the service running?"""
    return HealthResponse(status="healthy", version=__version__)


@router.get("/health/ready", response_model=HealthResponse)
async def readiness_check(
    settings: ServerSettings = Depends(get_settings),
) -> HealthResponse:
    """Readiness check: can documents and files be written?"""
    checks: dict[str, str] = {}
    for name, directory in (
        ("data_dir", settings.data_dir),
        ("files_dir", settings.files_dir),
    ):
        if not directory.is_dir():
            checks[name] = "missing"
        elif not os.access(directory, os.W_OK):
            checks[name] = "not writable"
        else:
            checks[name] = "ok"

    if any(value != "ok" for value in checks.values()):
        raise http_exception(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            code="not_ready",
            message="Storage directories unavailable",
            details=checks,
        )

    return HealthResponse(status="ready", version=__version__, checks=checks)
