"""Tests for the static location catalogue."""

from fulfilment.domain.locations import Location
from fulfilment.infrastructure.locations import StaticLocationPolicy


class TestStaticLocationPolicy:
    """Test StaticLocationPolicy."""

    def test_known_location(self, location_policy):
        location = location_policy.resolve_by_identifier("ZWOLLE-001")

        assert location.max_capacity == 40
        assert location.max_number_of_warehouses == 1

    def test_unknown_location(self, location_policy):
        assert location_policy.resolve_by_identifier("INVALID-LOCATION") is None
        assert location_policy.resolve_by_identifier(None) is None

    def test_custom_catalogue(self):
        policy = StaticLocationPolicy([Location("LAB-001", 2, 10)])

        assert policy.resolve_by_identifier("LAB-001").max_capacity == 10
        assert policy.resolve_by_identifier("AMSTERDAM-001") is None
