"""Main application configuration schema."""

from pydantic import BaseModel, Field, field_validator

from .demo_schema import PaymentConfig, PrototypeConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    payment: PaymentConfig = Field(default_factory=lambda: PaymentConfig())
    prototype: PrototypeConfig = Field(default_factory=lambda: PrototypeConfig())

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v
