"""Unit tests for service area checks and polygon validation."""

from uuid import uuid4

import pytest

from rolloff.config import settings
from rolloff.schemas.serviceability import GeoJsonPolygon, ServiceArea
from rolloff.services.serviceability_service import (
    check_serviceability,
    is_point_in_geojson_polygon,
    is_point_in_polygon,
    is_valid_polygon,
    polygon_errors,
)
from tests.conftest import HOLE_RING, SQUARE_RING, make_area


# =============================================================================
# Point in ring
# =============================================================================


class TestIsPointInPolygon:
    def test_inside(self):
        assert is_point_in_polygon((5, 5), SQUARE_RING)

    def test_outside(self):
        assert not is_point_in_polygon((15, 15), SQUARE_RING)

    @pytest.mark.parametrize("point", [(10, 5), (5, 0), (0, 7.5), (5, 10)])
    def test_on_edge(self, point):
        assert is_point_in_polygon(point, SQUARE_RING)

    @pytest.mark.parametrize("point", [(0, 0), (10, 0), (10, 10), (0, 10)])
    def test_on_vertex(self, point):
        assert is_point_in_polygon(point, SQUARE_RING)

    def test_just_outside_edge(self):
        assert not is_point_in_polygon((10.000000000000002, 5), SQUARE_RING)

    def test_open_ring(self):
        assert is_point_in_polygon((5, 5), SQUARE_RING[:-1])

    def test_concave_ring(self):
        # U shape opening upwards
        ring = [[0, 0], [9, 0], [9, 9], [6, 9], [6, 3], [3, 3], [3, 9], [0, 9], [0, 0]]
        assert is_point_in_polygon((1, 8), ring)
        assert is_point_in_polygon((8, 8), ring)
        assert not is_point_in_polygon((4.5, 6), ring)
        assert is_point_in_polygon((4.5, 3), ring)


# =============================================================================
# GeoJSON polygons with holes
# =============================================================================


class TestIsPointInGeoJsonPolygon:
    def test_inside_exterior(self, square_polygon):
        assert is_point_in_geojson_polygon((5, 5), square_polygon)

    def test_outside_exterior(self, square_polygon):
        assert not is_point_in_geojson_polygon((-1, 5), square_polygon)

    def test_inside_hole_is_outside(self, square_with_hole):
        assert not is_point_in_geojson_polygon((5, 5), square_with_hole)

    def test_between_exterior_and_hole(self, square_with_hole):
        assert is_point_in_geojson_polygon((1, 1), square_with_hole)
        assert is_point_in_geojson_polygon((8, 5), square_with_hole)

    def test_on_hole_edge_is_outside(self, square_with_hole):
        assert not is_point_in_geojson_polygon((3, 5), square_with_hole)

    def test_empty_coordinates(self):
        assert not is_point_in_geojson_polygon((0, 0), GeoJsonPolygon(coordinates=[]))

    def test_plain_dict_polygon(self):
        polygon = {"type": "Polygon", "coordinates": [SQUARE_RING]}
        assert is_valid_polygon(polygon)
        assert is_point_in_geojson_polygon((5, 5), polygon)
        assert not is_point_in_geojson_polygon((-1, 5), polygon)

    def test_plain_dict_polygon_with_hole(self):
        polygon = {"type": "Polygon", "coordinates": [SQUARE_RING, HOLE_RING]}
        assert is_valid_polygon(polygon)
        assert not is_point_in_geojson_polygon((5, 5), polygon)
        assert is_point_in_geojson_polygon((1, 1), polygon)


# =============================================================================
# Service area check
# =============================================================================


class TestCheckServiceability:
    def test_inside_square(self, square_area):
        result = check_serviceability(5, 5, [square_area])

        assert result.is_serviceable
        assert result.matched_area_id == "area-square"
        assert result.matched_area_name == "Test Square"
        assert result.message == "Location is within the Test Square service area"

    def test_outside_square(self, square_area):
        result = check_serviceability(15, 15, [square_area])

        assert not result.is_serviceable
        assert result.matched_area_id is None
        assert result.matched_area_name is None
        assert result.message == settings.OUT_OF_AREA_MESSAGE

    def test_lat_lng_order(self, pittsburgh_area):
        assert check_serviceability(40.44, -79.99, [pittsburgh_area]).is_serviceable
        assert not check_serviceability(-79.99, 40.44, [pittsburgh_area]).is_serviceable

    def test_empty_list(self):
        result = check_serviceability(5, 5, [])
        assert not result.is_serviceable
        assert result.message == settings.NO_ACTIVE_AREAS_MESSAGE

    def test_all_inactive(self):
        area = make_area("area-off", "Disabled", SQUARE_RING, active=False)
        result = check_serviceability(5, 5, [area])

        assert not result.is_serviceable
        assert result.message == settings.NO_ACTIVE_AREAS_MESSAGE
        assert result.message != settings.OUT_OF_AREA_MESSAGE

    def test_inactive_area_skipped(self, square_area):
        disabled = make_area("area-off", "Disabled", SQUARE_RING, active=False)
        result = check_serviceability(5, 5, [disabled, square_area])
        assert result.matched_area_id == "area-square"

    def test_first_match_wins(self):
        big = make_area("area-big", "Big", [[0, 0], [100, 0], [100, 100], [0, 100], [0, 0]])
        small = make_area("area-small", "Small", SQUARE_RING)

        assert check_serviceability(5, 5, [big, small]).matched_area_id == "area-big"
        assert check_serviceability(5, 5, [small, big]).matched_area_id == "area-small"

    def test_point_in_hole_not_serviceable(self):
        area = make_area("area-donut", "Donut", SQUARE_RING, holes=[HOLE_RING])
        result = check_serviceability(5, 5, [area])
        assert not result.is_serviceable
        assert result.message == settings.OUT_OF_AREA_MESSAGE

    def test_boundary_is_serviceable(self, square_area):
        assert check_serviceability(10, 10, [square_area]).is_serviceable

    def test_uuid_area_id_reported_as_str(self):
        area_id = uuid4()
        area = ServiceArea(
            id=area_id,
            name="Test Square",
            polygon={"type": "Polygon", "coordinates": [SQUARE_RING]},
        )
        result = check_serviceability(5, 5, [area])

        assert area.id == str(area_id)
        assert result.matched_area_id == str(area_id)


# =============================================================================
# Polygon validation
# =============================================================================


SQUARE = {"type": "Polygon", "coordinates": [SQUARE_RING]}


class TestIsValidPolygon:
    def test_valid_square(self):
        assert is_valid_polygon(SQUARE)

    def test_valid_with_hole(self):
        assert is_valid_polygon({"type": "Polygon", "coordinates": [SQUARE_RING, HOLE_RING]})

    def test_model_instance(self, square_polygon):
        assert is_valid_polygon(square_polygon)

    @pytest.mark.parametrize("value", [None, 42, "Polygon", [SQUARE_RING]])
    def test_not_an_object(self, value):
        assert not is_valid_polygon(value)

    def test_wrong_type(self):
        assert not is_valid_polygon({"type": "Point", "coordinates": [0, 0]})

    def test_missing_coordinates(self):
        assert not is_valid_polygon({"type": "Polygon"})

    def test_empty_coordinates(self):
        assert not is_valid_polygon({"type": "Polygon", "coordinates": []})

    def test_three_point_ring(self):
        assert not is_valid_polygon({"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [0, 0]]]})

    def test_short_hole(self):
        assert not is_valid_polygon({"type": "Polygon", "coordinates": [SQUARE_RING, [[3, 3], [4, 4]]]})

    @pytest.mark.parametrize("bad_point", [["0", 0], [0], [0, 0, 0], [True, 0], [None, 1], 5])
    def test_bad_point(self, bad_point):
        ring = [[0, 0], [10, 0], bad_point, [0, 10], [0, 0]]
        assert not is_valid_polygon({"type": "Polygon", "coordinates": [ring]})

    def test_tuples_accepted(self):
        ring = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 0.0)]
        assert is_valid_polygon({"type": "Polygon", "coordinates": (ring,)})

    def test_unclosed_ring_lenient_by_default(self):
        ring = [[0, 0], [10, 0], [10, 10], [0, 10]]
        polygon = {"type": "Polygon", "coordinates": [ring]}
        assert is_valid_polygon(polygon)
        assert not is_valid_polygon(polygon, require_closed=True)

    def test_closed_ring_strict(self):
        assert is_valid_polygon(SQUARE, require_closed=True)


class TestPolygonErrors:
    def test_valid(self):
        assert polygon_errors(SQUARE) == []

    def test_not_object(self):
        assert polygon_errors(None) == ["Polygon must be an object"]

    def test_wrong_type(self):
        assert polygon_errors({"type": "LineString"}) == ["Expected type 'Polygon', got 'LineString'"]

    def test_reports_every_bad_ring(self):
        polygon = {
            "type": "Polygon",
            "coordinates": [
                [[0, 0], [1, 0], [0, 0]],
                [[0, 0], [1, 0], ["x", 1], [0, 0]],
            ],
        }
        errors = polygon_errors(polygon)
        assert len(errors) == 2
        assert errors[0] == "Ring 0 has 3 points, needs at least 4"
        assert errors[1].startswith("Ring 1 has invalid points at [2]")

    def test_unclosed_ring_message(self):
        polygon = {"type": "Polygon", "coordinates": [[[0, 0], [10, 0], [10, 10], [0, 10]]]}
        assert polygon_errors(polygon, require_closed=True) == [
            "Ring 0 is not closed (first point != last point)"
        ]
