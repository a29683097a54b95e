"""Base domain entities - foundation for clonable demo objects."""
import uuid
from datetime import datetime, timezone
from typing import Any, Optional, TypeVar
from abc import ABC, abstractmethod
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar('T', bound='Entity')


def new_entity_id() -> str:
    """Generate a fresh entity identifier."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Entity(BaseModel, ABC):
    """Base class for all domain entities."""
    model_config = ConfigDict(
        frozen=False,  # Entities are mutable
        validate_assignment=True,
        arbitrary_types_allowed=True
    )

    id: str = Field(default_factory=new_entity_id)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash((self.__class__, self.id))

    def touch(self) -> None:
        """Record a modification."""
        self.updated_at = utc_now()


class Prototype(Entity):
    """Base class for entities that produce independent copies of themselves."""

    @abstractmethod
    def clone(self: T) -> T:
        """Return a value-independent copy with a fresh identity."""

    @abstractmethod
    def describe(self) -> Any:
        """Return the human-readable trace of this object."""
