"""Service Registry - explicit mapping from service name to factory.

Names are bound to factory callables at registration time; nothing is looked
up by reflection.
"""

from typing import Any, Callable, Dict, List
import threading

from patterndemo.domain.core.exceptions import ConfigurationError, NotFoundError
from patterndemo.infrastructure.logging.logger import get_logger


class ServiceRegistration:
    """Container for service registration information."""

    def __init__(self, name: str, factory: Callable[..., Any]):
        """
        Initialize service registration.

        Args:
            name: Service name (e.g., 'email', 'sms')
            factory: Callable creating the service
        """
        self.name = name
        self.factory = factory

    def __repr__(self) -> str:
        return f"ServiceRegistration(name='{self.name}')"


class ServiceRegistry:
    """
    Registry for named service factories.

    Thread-safe; every registry instance is independent.
    """

    def __init__(self):
        """Initialize service registry."""
        self._registrations: Dict[str, ServiceRegistration] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, name: str, factory: Callable[..., Any]) -> None:
        """
        Register a service factory.

        Raises:
            ConfigurationError: If name is already registered or factory is not callable
        """
        if not callable(factory):
            raise ConfigurationError(f"Factory for service '{name}' is not callable")

        with self._registry_lock:
            if name in self._registrations:
                raise ConfigurationError(f"Service '{name}' is already registered")

            registration = ServiceRegistration(name=name, factory=factory)
            self._registrations[name] = registration

            self.logger.info(f"Registered service: {name}")
            self.logger.debug(f"Service registration: {registration}")

    def resolve(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Create the service registered under a name.

        Raises:
            NotFoundError: If name is not registered
        """
        with self._registry_lock:
            registration = self._registrations.get(name)

        if registration is None:
            self.logger.error(
                f"Service '{name}' is not registered. "
                f"Available services: {self.names()}"
            )
            raise NotFoundError("Service", name)

        service = registration.factory(*args, **kwargs)
        self.logger.debug(f"Resolved service: {name}")
        return service

    def names(self) -> List[str]:
        with self._registry_lock:
            return list(self._registrations.keys())

    def is_registered(self, name: str) -> bool:
        with self._registry_lock:
            return name in self._registrations

    def clear(self) -> None:
        """
        Clear all service registrations.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._registrations.clear()
            self.logger.debug("Cleared all service registrations")
