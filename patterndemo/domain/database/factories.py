"""Connection/statement families for the database abstract factory."""
from abc import ABC, abstractmethod
from typing import Dict, Type

from patterndemo.domain.base.value_objects import Selector


class DatabaseEngine(Selector):
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"

    @classmethod
    def selector_name(cls) -> str:
        return "database engine"


class Connection(ABC):
    @abstractmethod
    def describe(self) -> str:
        pass


class Statement(ABC):
    @abstractmethod
    def describe(self) -> str:
        pass


class MySQLConnection(Connection):
    def describe(self) -> str:
        return "Opening a MySQL connection"


class MySQLStatement(Statement):
    def describe(self) -> str:
        return "Preparing a MySQL statement"


class PostgreSQLConnection(Connection):
    def describe(self) -> str:
        return "Opening a PostgreSQL connection"


class PostgreSQLStatement(Statement):
    def describe(self) -> str:
        return "Preparing a PostgreSQL statement"


class DatabaseFactory(ABC):
    """Abstract factory for a matched connection/statement pair."""

    @abstractmethod
    def create_connection(self) -> Connection:
        pass

    @abstractmethod
    def create_statement(self) -> Statement:
        pass


class MySQLFactory(DatabaseFactory):
    def create_connection(self) -> Connection:
        return MySQLConnection()

    def create_statement(self) -> Statement:
        return MySQLStatement()


class PostgreSQLFactory(DatabaseFactory):
    def create_connection(self) -> Connection:
        return PostgreSQLConnection()

    def create_statement(self) -> Statement:
        return PostgreSQLStatement()


_FACTORIES: Dict[DatabaseEngine, Type[DatabaseFactory]] = {
    DatabaseEngine.MYSQL: MySQLFactory,
    DatabaseEngine.POSTGRESQL: PostgreSQLFactory,
}


def get_database_factory(engine: str) -> DatabaseFactory:
    """
    Select the driver factory for an engine.

    Raises:
        UnsupportedKindError: If engine is not 'mysql' or 'postgresql'
    """
    return _FACTORIES[DatabaseEngine.parse(engine)]()
