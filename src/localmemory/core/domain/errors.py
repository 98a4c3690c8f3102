"""Domain-specific exception types for the local memory server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class LocalMemoryError(Exception):
    """Base exception for document store errors."""

    message: str
    code: str = "local_memory_error"
    details: Dict[str, Any] | None = None
    status_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}


class NotFoundError(LocalMemoryError):
    """Error raised when a document is missing or its record is unreadable."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message, code="not_found", details=details, status_code=404
        )


class ValidationError(LocalMemoryError):
    """Error raised for invalid or incomplete request payloads."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message, code="validation_error", details=details, status_code=400
        )


class ConfigError(LocalMemoryError):
    """Error raised for configuration failures."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="config_error", details=details)


def document_not_found(document_id: str) -> NotFoundError:
    """Build the standard error for an unknown document id."""
    return NotFoundError("Document not found", details={"id": document_id})
