"""Data transfer objects."""

from .base import BaseDTO
from .responses import DemoResultDTO

__all__: list[str] = ["BaseDTO", "DemoResultDTO"]
