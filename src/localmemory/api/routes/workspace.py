"""Project, connection, settings and waitlist endpoints.

All of them answer with fixed payloads: one default project, no
connections, empty settings and immediate access.
"""

from typing import Any

from fastapi import APIRouter, Depends

from localmemory.api.dependencies import get_workspace_fixtures
from localmemory.application.workspace_fixtures import WorkspaceFixtures

router = APIRouter()


@router.get("/projects")
async def list_projects(
    fixtures: WorkspaceFixtures = Depends(get_workspace_fixtures),
) -> dict[str, Any]:
    return {"projects": [fixtures.default_project()]}


@router.get("/connections")
async def list_connections() -> list[dict[str, Any]]:
    return []


@router.get("/settings")
async def get_settings() -> dict[str, Any]:
    return {"settings": {}}


@router.get("/waitlist/status")
async def waitlist_status(
    fixtures: WorkspaceFixtures = Depends(get_workspace_fixtures),
) -> dict[str, Any]:
    return fixtures.waitlist_status()
