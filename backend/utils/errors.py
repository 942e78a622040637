"""Error handling utilities for the land claim workflow."""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from enum import Enum


class ErrorType(Enum):
    """Enumeration of error types in the land claim system."""

    # Workflow Errors
    NO_LOCATION_SELECTED = "NO_LOCATION_SELECTED"

    # Geocoding Errors
    PLACE_NOT_FOUND = "PLACE_NOT_FOUND"
    GEOCODER_REQUEST_FAILED = "GEOCODER_REQUEST_FAILED"
    GEOCODER_RESPONSE_INVALID = "GEOCODER_RESPONSE_INVALID"

    # Configuration Errors
    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_INVALID = "CONFIG_INVALID"


@dataclass
class ErrorContext:
    """
    Context information for errors in the land claim system.

    Attributes:
        error_type: Type of error from ErrorType enum
        message: Human-readable message shown to the user
        recoverable: Whether the session can continue after the error
        details: Optional additional error details
        original_exception: Optional original exception that caused this error
    """

    error_type: ErrorType
    message: str
    recoverable: bool = True
    details: Optional[Dict[str, Any]] = None
    original_exception: Optional[Exception] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error context to dictionary for logging/serialization.

        Returns:
            Dictionary representation of error context
        """
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            "recoverable": self.recoverable,
            "details": self.details or {},
            "original_exception": str(self.original_exception) if self.original_exception else None
        }


class LandClaimError(Exception):
    """
    Base exception for all land claim errors.

    Every error carries an ErrorContext so the view layer can show the
    user-facing message as a blocking notice without inspecting the
    concrete exception type.

    Attributes:
        context: ErrorContext with detailed error information
    """

    def __init__(self, context: ErrorContext):
        self.context = context
        super().__init__(context.message)

    def __str__(self) -> str:
        return f"{self.context.error_type.value}: {self.context.message}"

    @property
    def error_type(self) -> ErrorType:
        return self.context.error_type

    @property
    def user_message(self) -> str:
        return self.context.message

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of error
        """
        return self.context.to_dict()


class NoLocationSelectedError(LandClaimError):
    """Raised when a claim is submitted before a location is chosen."""

    @classmethod
    def create(cls) -> "NoLocationSelectedError":
        context = ErrorContext(
            error_type=ErrorType.NO_LOCATION_SELECTED,
            message="Select a location on map first!",
        )
        return cls(context)


class NotFoundError(LandClaimError):
    """Raised when a place search matches nothing."""

    @classmethod
    def for_query(cls, query: str) -> "NotFoundError":
        """
        Create error for a search query without results.

        Args:
            query: Search text that produced no results

        Returns:
            NotFoundError instance
        """
        context = ErrorContext(
            error_type=ErrorType.PLACE_NOT_FOUND,
            message="Place not found",
            details={"query": query},
        )
        return cls(context)


class ResolverError(LandClaimError):
    """Exception for transport or parse failures during a place search."""

    @classmethod
    def request_failed(cls, query: str, error: Exception) -> "ResolverError":
        """
        Create error for a failed geocoding request.

        Args:
            query: Search text being resolved
            error: Original exception raised by the transport

        Returns:
            ResolverError instance
        """
        context = ErrorContext(
            error_type=ErrorType.GEOCODER_REQUEST_FAILED,
            message="Error fetching location",
            details={"query": query, "reason": str(error)},
            original_exception=error,
        )
        return cls(context)

    @classmethod
    def invalid_response(
        cls,
        query: str,
        reason: str,
        error: Optional[Exception] = None
    ) -> "ResolverError":
        """
        Create error for a geocoding response that could not be parsed.

        Args:
            query: Search text being resolved
            reason: Short description of what was wrong with the response
            error: Optional original exception

        Returns:
            ResolverError instance
        """
        context = ErrorContext(
            error_type=ErrorType.GEOCODER_RESPONSE_INVALID,
            message="Error fetching location",
            details={"query": query, "reason": reason},
            original_exception=error,
        )
        return cls(context)


class ConfigurationError(LandClaimError):
    """Exception for missing or malformed configuration."""

    @classmethod
    def missing(cls, config_path: str) -> "ConfigurationError":
        context = ErrorContext(
            error_type=ErrorType.CONFIG_MISSING,
            message=f"Configuration file not found at '{config_path}'",
            recoverable=False,
            details={"config_path": config_path},
        )
        return cls(context)

    @classmethod
    def invalid(
        cls,
        field_name: str,
        error: Optional[Exception] = None
    ) -> "ConfigurationError":
        """
        Create error for an invalid configuration value.

        Args:
            field_name: Dotted path of the offending setting
            error: Optional original exception

        Returns:
            ConfigurationError instance
        """
        context = ErrorContext(
            error_type=ErrorType.CONFIG_INVALID,
            message=f"Invalid configuration value for '{field_name}'",
            recoverable=False,
            details={"field": field_name},
            original_exception=error,
        )
        return cls(context)
