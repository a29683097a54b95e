"""
Logistics creators.

Each creator subclass overrides ``create_transport`` to decide which product
is built; ``plan_delivery`` is shared and only talks to the Transport contract.
"""
from abc import ABC, abstractmethod
from typing import Dict, Type

from patterndemo.domain.transport.products import Ship, Transport, Truck
from patterndemo.domain.transport.value_objects import TransportKind


class Logistics(ABC):
    """Creator base class."""

    @abstractmethod
    def create_transport(self) -> Transport:
        """Factory method."""

    def plan_delivery(self) -> str:
        transport = self.create_transport()
        return f"Logistics: Planning delivery using {transport.deliver()}"


class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()


_CREATORS: Dict[TransportKind, Type[Logistics]] = {
    TransportKind.ROAD: RoadLogistics,
    TransportKind.SEA: SeaLogistics,
}


def get_logistics(kind: str) -> Logistics:
    """
    Select a creator variant by kind.

    Raises:
        UnsupportedKindError: If kind is not 'road' or 'sea'
    """
    return _CREATORS[TransportKind.parse(kind)]()
