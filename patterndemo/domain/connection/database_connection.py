"""Process-wide database connection used by the singleton demonstration."""
from patterndemo.domain.base.entity import new_entity_id


class DatabaseConnection:
    """
    A connection that is meant to exist once per process.

    The class itself does not enforce uniqueness; callers obtain it through
    SingletonRegistry, which constructs it on first access and hands back the
    same object on every later access regardless of the arguments given.
    """

    def __init__(self, host: str, user: str):
        self.host = host
        self.user = user
        self.connection_id = new_entity_id()

    @property
    def initialization_message(self) -> str:
        return f"Initializing database connection to {self.host} as {self.user}"

    def describe(self) -> str:
        return f"connected to {self.host} as {self.user}"

    def __repr__(self) -> str:
        return f"DatabaseConnection(host='{self.host}', user='{self.user}')"
