"""Transport products created by the logistics creators."""
from abc import ABC, abstractmethod


class Transport(ABC):
    """Common capability contract for everything a creator can produce."""

    @abstractmethod
    def deliver(self) -> str:
        """Return the delivery description."""


class Truck(Transport):
    def deliver(self) -> str:
        return "Truck delivery by land in a box"


class Ship(Transport):
    def deliver(self) -> str:
        return "Ship delivery by sea in a container"
