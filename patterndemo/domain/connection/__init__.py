"""Connection bounded context - the shared object behind the Singleton demo."""

from .database_connection import DatabaseConnection

__all__: list[str] = ["DatabaseConnection"]
