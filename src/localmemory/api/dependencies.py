"""FastAPI dependency injection providers.

Services live on ``app.state`` and are created lazily on first use, so an
application built with explicit settings (tests, the CLI) never touches the
default memory directory. Routes receive them via ``Depends()`` and tests
replace them with ``app.dependency_overrides``.
"""

from __future__ import annotations

from fastapi import Request

from localmemory.application.document_service import DocumentService
from localmemory.application.infrastructure_builder import InfrastructureBuilder
from localmemory.application.settings import ServerSettings
from localmemory.application.workspace_fixtures import WorkspaceFixtures


async def get_settings(request: Request) -> ServerSettings:
    """Provide the settings the application was created with."""
    return request.app.state.settings


async def get_document_service(request: Request) -> DocumentService:
    """Provide the shared DocumentService, building it on first use."""
    service = getattr(request.app.state, "document_service", None)
    if service is None:
        service = InfrastructureBuilder(request.app.state.settings).build_document_service()
        request.app.state.document_service = service
    return service


async def get_workspace_fixtures(request: Request) -> WorkspaceFixtures:
    """Provide the static account/organization payloads."""
    return request.app.state.fixtures
