"""Standard singleton access functions."""

from typing import Any, Optional, Type, TypeVar

from patterndemo.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any,
                  registry: Optional[SingletonRegistry] = None, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    Instances are keyed by class name. Only the first call for a class
    constructs it; arguments passed to later calls are ignored.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        registry: Registry holding the slot; defaults to the process-wide one
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    registry = registry or SingletonRegistry.get_instance()
    return registry.get(singleton_class.__name__, singleton_class, *args, **kwargs)
