"""Tests for the logistics creators and transport products."""

import pytest

from patterndemo.domain.core.exceptions import UnsupportedKindError
from patterndemo.domain.transport import (
    Logistics,
    RoadLogistics,
    SeaLogistics,
    Ship,
    Transport,
    TransportKind,
    Truck,
    get_logistics,
)


class TestLogisticsCreators:
    """Test factory method selection and delivery planning."""

    def test_road_logistics_creates_truck(self):
        assert isinstance(RoadLogistics().create_transport(), Truck)

    def test_sea_logistics_creates_ship(self):
        assert isinstance(SeaLogistics().create_transport(), Ship)

    def test_plan_delivery_uses_product_description(self):
        line = RoadLogistics().plan_delivery()
        assert line == f"Logistics: Planning delivery using {Truck().deliver()}"

    @pytest.mark.parametrize("kind,creator", [("road", RoadLogistics), ("sea", SeaLogistics)])
    def test_get_logistics_selects_creator(self, kind, creator):
        assert type(get_logistics(kind)) is creator

    def test_get_logistics_accepts_enum_member(self):
        assert isinstance(get_logistics(TransportKind.SEA), SeaLogistics)

    def test_unknown_kind_raises_unsupported_kind(self):
        with pytest.raises(UnsupportedKindError) as exc_info:
            get_logistics("air")

        assert exc_info.value.selector == "transport kind"
        assert exc_info.value.value == "air"
        assert exc_info.value.supported == ["road", "sea"]

    def test_selector_is_case_sensitive(self):
        with pytest.raises(UnsupportedKindError):
            get_logistics("Road")

    def test_custom_creator_only_overrides_factory_method(self):
        """A new creator plugs in by overriding create_transport alone."""

        class Drone(Transport):
            def deliver(self) -> str:
                return "drone delivery by air"

        class AirLogistics(Logistics):
            def create_transport(self) -> Transport:
                return Drone()

        assert AirLogistics().plan_delivery() == "Logistics: Planning delivery using drone delivery by air"
