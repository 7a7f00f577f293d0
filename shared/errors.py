"""
Shared error handling for the decision tree rule domain.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class DecisionTreeException(Exception):
    """Base exception for decision tree components."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class DriverCacheError(DecisionTreeException):
    """Driver cache contract violations."""

    def __init__(self, message: str = "Driver cache error", details: Optional[Dict[str, Any]] = None):
        super().__init__("DRIVER_CACHE_ERROR", message, details)


class ConfigurationError(DecisionTreeException):
    """Configuration-related errors."""

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)
