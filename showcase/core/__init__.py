"""
Core domain layer.

Exception hierarchy shared by the API, service layer and upload client.
"""

from showcase.core.exceptions import (
    InvalidTransitionError,
    PollingTimeoutError,
    ServiceError,
    ShowcaseException,
    ValidationError,
)

__all__ = [
    "InvalidTransitionError",
    "PollingTimeoutError",
    "ServiceError",
    "ShowcaseException",
    "ValidationError",
]
