# patterndemo/domain/core/exceptions.py
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class UnsupportedKindError(DomainException):
    """Raised when an enumerated selector is outside its recognized set."""
    def __init__(self, selector: str, value: Any, supported: Iterable[str]):
        self.selector = selector
        self.value = value
        self.supported = sorted(supported)
        super().__init__(
            f"Unsupported {selector} '{value}'. Supported values: {self.supported}"
        )


class NotFoundError(DomainException):
    """Raised when a registry lookup misses."""
    def __init__(self, resource_type: str, key: str):
        super().__init__(f"{resource_type} '{key}' not found")
        self.resource_type = resource_type
        self.key = key


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
