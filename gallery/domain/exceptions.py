"""Domain exceptions for the gallery application.

Defines domain-level exceptions independent of infrastructure concerns.
The presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class GalleryException(Exception):
    """Base exception for all gallery application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the HTTP layer."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentException(GalleryException):
    """Raised when caller input is malformed (e.g. invalid search options)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class UnsupportedOperationException(GalleryException):
    """Raised when a code path has no handler for an enum value.

    Signals a maintenance defect (a new enum member without a matching
    branch), not bad caller input.
    """

    def __init__(self, operation: str, value: object) -> None:
        super().__init__(
            f"{operation} was not designed to handle {value!r}. "
            "The developer must update this code path.",
            "UNSUPPORTED_OPERATION",
            {"operation": operation, "value": str(value)},
        )


class ResourceNotFoundException(GalleryException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'gallery', 'album').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SearchDeadlineExceededException(GalleryException):
    """Raised when a tag search deadline passes before a store query is issued."""

    def __init__(self, gallery_id: int, stage: str) -> None:
        super().__init__(
            "Tag search deadline exceeded",
            "SEARCH_DEADLINE_EXCEEDED",
            {"gallery_id": gallery_id, "stage": stage},
        )


class ConfigurationException(GalleryException):
    """Raised when stored application settings are invalid (at startup)."""

    def __init__(self, message: str, setting_name: str | None = None) -> None:
        details = {"setting_name": setting_name} if setting_name else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)


class SqlNotConfiguredException(GalleryException):
    """Raised when an operation requires a SQL database that is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class PermissionDeniedException(GalleryException):
    """Raised when the viewer lacks the role required for an operation."""

    def __init__(self, action: str) -> None:
        super().__init__(
            f"Permission denied: {action}",
            "PERMISSION_DENIED",
            {"action": action},
        )
