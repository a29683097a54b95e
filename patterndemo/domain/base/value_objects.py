"""Shared value objects for the domain layer."""
from enum import Enum
from typing import List, Type, TypeVar

from patterndemo.domain.core.exceptions import UnsupportedKindError

E = TypeVar('E', bound='Selector')


class Selector(str, Enum):
    """
    Base class for the literal enumerations that pick a pattern variant.

    Subclasses set ``selector_name`` to the name reported in
    UnsupportedKindError messages (e.g. 'transport kind').
    """

    @classmethod
    def selector_name(cls) -> str:
        return cls.__name__

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls: Type[E], value: str) -> E:
        """
        Convert a raw selector value into an enum member.

        Raises:
            UnsupportedKindError: If value is not one of the members
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        raise UnsupportedKindError(cls.selector_name(), value, cls.values())
