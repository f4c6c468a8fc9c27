"""Unit tests for the delivery service area."""

from datetime import datetime

import pytest

from pizzeria.domain.service.service_area import (
    CampusServiceArea,
    Estimate,
    estimate_delivery_minutes,
    estimate_distance_km,
    format_address,
    is_delivery_hours,
)


class TestIsDeliverable:

    @pytest.mark.parametrize(
        "address",
        [
            "Edificio C, salón 4",
            "BIBLIOTECA planta alta",
            "Cafetería central, mesa 3",
            "Aula 12",
            "Calle Hidalgo 45, Tepatitlan",
            "CUAltos, coordinación de carrera",
        ],
    )
    def test_campus_addresses(self, address):
        assert CampusServiceArea().is_deliverable(address)

    @pytest.mark.parametrize("address", ["Av. Insurgentes 123, CDMX", "", "   "])
    def test_outside_addresses(self, address):
        assert not CampusServiceArea().is_deliverable(address)

    def test_custom_keywords(self):
        area = CampusServiceArea(locations=(), keywords=("oficina",))
        assert area.is_deliverable("Oficina 3")
        assert not area.is_deliverable("Edificio C")


class TestEstimates:

    def test_campus_building_is_closest(self):
        assert estimate_distance_km("Edificio A") == Estimate(0.1, 0.5)
        assert estimate_delivery_minutes("Edificio A") == Estimate(21, 22)

    def test_university_keyword(self):
        assert estimate_distance_km("Universidad, puerta 2") == Estimate(0.5, 2.0)

    def test_rest_of_town(self):
        assert estimate_delivery_minutes("Calle Hidalgo, Tepatitlán") == Estimate(26, 35)

    def test_estimate_str(self):
        assert str(Estimate(21, 22)) == "21-22"


class TestDeliveryHours:

    @pytest.mark.parametrize(
        "hour, open_",
        [(10, False), (11, True), (18, True), (22, True), (23, False)],
    )
    def test_hours(self, hour, open_):
        assert is_delivery_hours(datetime(2024, 3, 1, hour, 30)) is open_


def test_format_address():
    assert format_address("  edificio c, cualtos, tepatitlan ") == "Edificio C, CUAltos, Tepatitlán"
