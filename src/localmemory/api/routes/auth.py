"""
Auth API Routes
===============

Offline stand-ins for the session, sign-in and organization endpoints. The
local user is always signed in to the local organization; nothing is
persisted.
"""

from typing import Any

from fastapi import APIRouter, Depends

from localmemory.api.dependencies import get_workspace_fixtures
from localmemory.application.workspace_fixtures import WorkspaceFixtures

router = APIRouter()


@router.get("/session")
async def get_session(
    fixtures: WorkspaceFixtures = Depends(get_workspace_fixtures),
) -> dict[str, Any]:
    """Current session and user."""
    return {"session": fixtures.session(), "user": fixtures.user()}


@router.post("/sign-in/email")
async def sign_in_email(
    fixtures: WorkspaceFixtures = Depends(get_workspace_fixtures),
) -> dict[str, Any]:
    """Accept any credentials."""
    return {"status": True, "user": fixtures.user(), "session": fixtures.session()}


@router.post("/sign-out")
async def sign_out() -> dict[str, Any]:
    return {"success": True}


@router.get("/organization/list")
async def list_organizations(
    fixtures: WorkspaceFixtures = Depends(get_workspace_fixtures),
) -> list[dict[str, Any]]:
    return [fixtures.organization()]


@router.get("/organization/get-full-organization")
async def get_full_organization(
    fixtures: WorkspaceFixtures = Depends(get_workspace_fixtures),
) -> dict[str, Any]:
    return fixtures.organization()
