"""Base DTO class with stable API and clean snake_case format."""
from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for all DTOs.

    Provides a stable to_dict() API so callers never depend on
    pydantic method names directly.
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return a snake_case dictionary, omitting unset optional sections."""
        return self.model_dump(exclude_none=True)
