"""Utility modules for configuration, logging, and error handling."""

from .errors import (
    ErrorType,
    ErrorContext,
    LandClaimError,
    NoLocationSelectedError,
    NotFoundError,
    ResolverError,
    ConfigurationError,
)

__all__ = [
    'ErrorType',
    'ErrorContext',
    'LandClaimError',
    'NoLocationSelectedError',
    'NotFoundError',
    'ResolverError',
    'ConfigurationError',
]
