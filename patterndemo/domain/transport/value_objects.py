"""Transport value objects."""
from patterndemo.domain.base.value_objects import Selector


class TransportKind(Selector):
    """Logistics variants understood by the factory method demo."""
    ROAD = "road"
    SEA = "sea"

    @classmethod
    def selector_name(cls) -> str:
        return "transport kind"
