"""Singleton registry - explicit lifecycle object for process-wide instances."""

import threading
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from patterndemo.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Holds named singleton slots.

    A slot starts unset and is set exactly once, by the first get() for its
    key; the construction arguments of every later get() are ignored. There is
    no teardown. clear() exists for test isolation only.

    The registry is an ordinary object so it can be injected; the process-wide
    registry is available through get_instance().
    """

    _instance: Optional['SingletonRegistry'] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._slots: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> 'SingletonRegistry':
        """Get the process-wide registry."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """
        Drop the process-wide registry.

        This method is primarily for testing purposes.
        """
        with cls._instance_lock:
            cls._instance = None

    def get_or_create(self, key: str, factory: Callable[..., T],
                      *args: Any, **kwargs: Any) -> Tuple[T, bool]:
        """
        Return the instance held in slot ``key``, constructing it on first access.

        Args:
            key: Slot name
            factory: Callable used to construct the instance on first access
            *args: Positional arguments for the factory (first access only)
            **kwargs: Keyword arguments for the factory (first access only)

        Returns:
            Tuple of (instance, created) where created is True only for the
            call that constructed the instance
        """
        if key in self._slots:
            return self._slots[key], False

        with self._lock:
            if key in self._slots:
                return self._slots[key], False
            instance = factory(*args, **kwargs)
            self._slots[key] = instance

        self.logger.debug(f"Singleton slot '{key}' initialized with {instance!r}")
        return instance, True

    def get(self, key: str, factory: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Return the instance held in slot ``key``, constructing it on first access."""
        instance, _ = self.get_or_create(key, factory, *args, **kwargs)
        return instance

    def is_initialized(self, key: str) -> bool:
        return key in self._slots

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._slots.keys())

    def clear(self) -> None:
        """
        Clear all slots.

        This method is primarily for testing purposes.
        """
        with self._lock:
            self._slots.clear()
            self.logger.debug("Cleared all singleton slots")
