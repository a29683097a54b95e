"""Infrastructure registry patterns."""

from .prototype_registry import PrototypeRegistry
from .service_registry import ServiceRegistration, ServiceRegistry

__all__ = [
    'PrototypeRegistry',
    'ServiceRegistration',
    'ServiceRegistry'
]
