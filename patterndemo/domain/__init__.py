"""
Domain Layer - one bounded context per pattern demonstration

- base/: Shared kernel with base entities and selector enumerations
- core/: Domain exceptions
- transport/: Factory Method (logistics creators and transport products)
- payment/: Payment method factory keyed by name
- connection/: The shared object behind the Singleton demonstration
- document/: Prototype (clonable documents and built-in templates)
- ui/: Abstract Factory with widget families
- database/: Abstract Factory with connection/statement families
- notification/: Services resolved through the service registry
"""

from .base import Entity, Prototype, Selector
from .core import (
    ConfigurationError,
    DomainException,
    NotFoundError,
    UnsupportedKindError,
    ValidationError,
)

__all__ = [
    # Base primitives
    "Entity",
    "Prototype",
    "Selector",
    # Exceptions
    "DomainException",
    "UnsupportedKindError",
    "NotFoundError",
    "ValidationError",
    "ConfigurationError",
]
