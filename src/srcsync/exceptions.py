"""Exception classes for srcsync."""

from typing import Any

__all__ = [
    "SrcsyncError",
    "ModelLoadError",
    "ConfigError",
    "SchemaProviderError",
    "UnknownChangeTypeError",
]


class SrcsyncError(Exception):
    """Base exception for srcsync."""


class ModelLoadError(SrcsyncError):
    """Error loading a model definition file."""


class ConfigError(SrcsyncError):
    """Error in configuration."""


class SchemaProviderError(SrcsyncError):
    """Schema provider is unusable (as opposed to a query that failed)."""


class UnknownChangeTypeError(SrcsyncError):
    """A change carries a discriminant no consumer knows how to handle."""

    def __init__(self, change_type: Any, message: str):
        self.change_type = change_type
        super().__init__(message)
