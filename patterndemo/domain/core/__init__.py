"""Core domain definitions shared by every pattern context."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    NotFoundError,
    UnsupportedKindError,
    ValidationError,
)

__all__: list[str] = [
    "DomainException",
    "UnsupportedKindError",
    "NotFoundError",
    "ValidationError",
    "ConfigurationError",
]
