"""Configuration schemas for the individual pattern demonstrations."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class PaymentConfig(BaseModel):
    """Payment factory configuration."""
    model_config = ConfigDict(extra="forbid")

    currency_symbol: str = Field("$", description="Symbol printed in front of amounts")
    allow_negative_amounts: bool = Field(
        True, description="Accept negative amounts instead of rejecting them"
    )


class DocumentTemplateConfig(BaseModel):
    """A document template registered with the prototype registry."""

    title: str
    content: str
    metadata: Dict[str, Any] = Field(default_factory=dict)


class PrototypeConfig(BaseModel):
    """Prototype registry configuration."""
    model_config = ConfigDict(extra="forbid")

    templates: Dict[str, DocumentTemplateConfig] = Field(
        default_factory=dict,
        description="Additional templates registered next to the built-in ones",
    )
