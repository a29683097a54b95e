"""Database bounded context - the Abstract Factory demonstration with driver families."""

from .factories import (
    Connection,
    DatabaseEngine,
    DatabaseFactory,
    MySQLFactory,
    PostgreSQLFactory,
    Statement,
    get_database_factory,
)

__all__: list[str] = [
    "Connection",
    "Statement",
    "DatabaseEngine",
    "DatabaseFactory",
    "MySQLFactory",
    "PostgreSQLFactory",
    "get_database_factory",
]
