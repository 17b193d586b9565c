"""Typed errors raised by services and mapped to HTTP responses in one place.

Every error carries a stable ``code`` and the HTTP status it maps to. The
response body is always ``{"error": <message>, "code": <code>}`` plus any
error-specific keys.
"""
from __future__ import annotations

from typing import Any


class PropertyManagerError(Exception):
    """Base exception for all request-level failures."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message, "code": self.code}


class ResourceNotFoundError(PropertyManagerError):
    """Requested row does not exist."""

    code = "RESOURCE_NOT_FOUND"
    http_status = 404

    def __init__(self, resource: str, resource_id: object) -> None:
        super().__init__(f"{resource} {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class InvalidReferenceError(PropertyManagerError):
    """A foreign key in the payload points at a missing parent."""

    code = "INVALID_REFERENCE"
    http_status = 400

    def __init__(self, field: str, resource: str, resource_id: object) -> None:
        super().__init__(f"{field} references missing {resource} {resource_id}")
        self.field = field

    def to_response(self) -> dict[str, Any]:
        body = super().to_response()
        body["field"] = self.field
        return body


class RequestRejectedError(PropertyManagerError):
    """Payload is well-formed but violates a business rule."""

    code = "VALIDATION_ERROR"
    http_status = 400


class ConflictError(PropertyManagerError):
    """Write would clash with existing data."""

    code = "CONFLICT"
    http_status = 409
