"""Prototype Registry - named templates that are cloned on request.

Callers never receive a registered template itself, only clones of it, so a
template cannot be modified through the registry.
"""

from typing import Dict, List, Optional
import threading

from patterndemo.domain.base.entity import Prototype
from patterndemo.domain.core.exceptions import ConfigurationError, NotFoundError
from patterndemo.infrastructure.logging.logger import get_logger


class PrototypeRegistry:
    """
    Registry mapping a string key to a clonable template.

    Thread-safe; every registry instance is independent.
    """

    def __init__(self):
        """Initialize prototype registry."""
        self._prototypes: Dict[str, Prototype] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

        self.logger.debug("Prototype registry initialized")

    def register(self, key: str, prototype: Prototype) -> None:
        """
        Register a template under a key.

        Args:
            key: Template key (e.g., 'report', 'invoice')
            prototype: Template instance; the registry keeps its own clone

        Raises:
            ConfigurationError: If key is already registered
        """
        with self._registry_lock:
            if key in self._prototypes:
                raise ConfigurationError(f"Prototype '{key}' is already registered")

            self._prototypes[key] = prototype.clone()

            self.logger.info(f"Registered prototype: {key}")

    def clone(self, key: str) -> Prototype:
        """
        Create an independent copy of a registered template.

        Raises:
            NotFoundError: If key is not registered
        """
        prototype = self._get_prototype(key)
        copy = prototype.clone()
        self.logger.debug(f"Cloned prototype: {key}")
        return copy

    def unregister(self, key: str) -> None:
        """
        Remove a template.

        Raises:
            NotFoundError: If key is not registered
        """
        with self._registry_lock:
            if self._prototypes.pop(key, None) is None:
                raise NotFoundError("Prototype", key)
            self.logger.info(f"Unregistered prototype: {key}")

    def keys(self) -> List[str]:
        """
        Get list of registered template keys.

        Returns:
            List of registered keys
        """
        with self._registry_lock:
            return list(self._prototypes.keys())

    def is_registered(self, key: str) -> bool:
        with self._registry_lock:
            return key in self._prototypes

    def clear(self) -> None:
        """
        Clear all registrations.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._prototypes.clear()
            self.logger.debug("Cleared all prototype registrations")

    def _get_prototype(self, key: str) -> Prototype:
        with self._registry_lock:
            prototype: Optional[Prototype] = self._prototypes.get(key)
            if prototype is None:
                self.logger.error(
                    f"Prototype '{key}' is not registered. "
                    f"Available prototypes: {list(self._prototypes.keys())}"
                )
                raise NotFoundError("Prototype", key)
            return prototype
