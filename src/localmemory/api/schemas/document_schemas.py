"""
Document API Schemas
====================

Pydantic models for the document endpoints. Field aliases use the
camelCase names the client sends; responses are the stored records
themselves (see ``Document.to_dict``).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ListDocumentsRequest(BaseModel):
    """Request body for the paginated document listing."""

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(1, ge=1, description="1-based page number")
    limit: int = Field(10, ge=1, description="Documents per page")
    container_tags: list[str] | None = Field(
        None,
        alias="containerTags",
        description="Keep documents sharing at least one of these tags",
    )


class CreateDocumentRequest(BaseModel):
    """Request body for adding a note or link."""

    model_config = ConfigDict(populate_by_name=True)

    content: str = Field(..., description="Text body; 'http...' makes a link")
    container_tags: list[str] | None = Field(None, alias="containerTags")
    metadata: dict[str, Any] | None = None


class UpdateDocumentRequest(BaseModel):
    """Partial document for a merge-update.

    Known fields are type-checked; any other top-level field is accepted
    and stored as-is.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    content: str | None = None
    url: str | None = None
    title: str | None = None
    status: str | None = None
    container_tags: list[str] | None = Field(None, alias="containerTags")
    metadata: dict[str, Any] | None = None

    @field_validator("content", "title", "status")
    @classmethod
    def _reject_null(cls, value: str | None) -> str | None:
        # Defaults are not validated, so only an explicit null lands here.
        if value is None:
            raise ValueError("must be a string, not null")
        return value

    def to_changes(self) -> dict[str, Any]:
        """Fields the caller actually sent, keyed by their wire names."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class DocumentsByIdsRequest(BaseModel):
    """Request body for fetching several documents at once."""

    ids: list[str] = Field(default_factory=list)


class DeleteDocumentResponse(BaseModel):
    """Response body for a successful delete."""

    success: bool = True
