"""Static account, organization and project payloads.

The client expects a signed-in user with an active organization and a
default project. Locally there is exactly one of each; the payloads are
fixed except for timestamps, which are captured once when the fixtures are
built (at server startup).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from localmemory.core.utils.time import utc_now

LOCAL_USER_ID = "local-user"
LOCAL_SESSION_ID = "local-session"
LOCAL_ORG_ID = "local-org"
DEFAULT_PROJECT_ID = "default"

SESSION_LIFETIME = timedelta(days=30)


@dataclass(frozen=True)
class WorkspaceFixtures:
    """Canned payloads for the auth, organization and project endpoints."""

    started_at: datetime = field(default_factory=utc_now)

    @property
    def _now(self) -> str:
        return self.started_at.isoformat()

    def user(self) -> dict[str, Any]:
        return {
            "id": LOCAL_USER_ID,
            "email": "local@supermemory.ai",
            "name": "Local User",
            "emailVerified": True,
            "createdAt": self._now,
            "updatedAt": self._now,
        }

    def session(self) -> dict[str, Any]:
        return {
            "id": LOCAL_SESSION_ID,
            "userId": LOCAL_USER_ID,
            "expiresAt": (self.started_at + SESSION_LIFETIME).isoformat(),
            "token": "local-token",
            "createdAt": self._now,
            "updatedAt": self._now,
            "ipAddress": "127.0.0.1",
            "userAgent": "local-agent",
            "activeOrganizationId": LOCAL_ORG_ID,
        }

    def organization(self) -> dict[str, Any]:
        return {
            "id": LOCAL_ORG_ID,
            "name": "Local Workspace",
            "slug": "local-workspace",
            "metadata": {"isConsumer": True},
            "createdAt": self._now,
            "updatedAt": self._now,
        }

    def default_project(self) -> dict[str, Any]:
        return {
            "id": DEFAULT_PROJECT_ID,
            "name": "Default Project",
            "containerTag": DEFAULT_PROJECT_ID,
            "createdAt": self._now,
            "updatedAt": self._now,
            "isExperimental": False,
            "documentCount": 0,
            "emoji": "\U0001f4c1",
        }

    def waitlist_status(self) -> dict[str, Any]:
        return {
            "inWaitlist": False,
            "accessGranted": True,
            "createdAt": self._now,
        }
