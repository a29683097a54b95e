"""Transport bounded context - the Factory Method demonstration."""

from .creators import Logistics, RoadLogistics, SeaLogistics, get_logistics
from .products import Ship, Transport, Truck
from .value_objects import TransportKind

__all__: list[str] = [
    "Transport",
    "Truck",
    "Ship",
    "Logistics",
    "RoadLogistics",
    "SeaLogistics",
    "TransportKind",
    "get_logistics",
]
