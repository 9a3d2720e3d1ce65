"""
Exception hierarchy for the Vision Showcase application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ShowcaseException(Exception):
    """Base exception for all Vision Showcase errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(ShowcaseException):
    """Raised when client input is missing or malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ServiceError(ShowcaseException):
    """Raised when the document store or object store cannot be reached or used."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize service error.

        Args:
            message: Error message
            operation: Operation that failed (presign_upload, check_status, list_images)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class PollingTimeoutError(ShowcaseException):
    """Raised when polling exhausts its attempts before the analysis appears."""

    def __init__(self, filename: str, attempts: int) -> None:
        super().__init__(
            "Processing took too long.",
            {"filename": filename, "attempts": attempts},
        )


class InvalidTransitionError(ShowcaseException):
    """Raised when the upload state machine is driven from a state that forbids it."""

    def __init__(self, action: str, state: str) -> None:
        super().__init__(
            f"Cannot {action} while upload is {state}",
            {"action": action, "state": state},
        )
