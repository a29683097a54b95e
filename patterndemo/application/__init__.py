"""Application layer - runs pattern demonstrations over the domain object graphs."""

from .dto import BaseDTO, DemoResultDTO
from .runner import PatternDemoRunner, PatternName

__all__: list[str] = ["PatternDemoRunner", "PatternName", "DemoResultDTO", "BaseDTO"]
