"""
Serviceability Service.

Handles:
1. Point-in-ring test (boundary counts as inside)
2. Point-in-polygon test with holes
3. Checking a lat/lng against the active service areas
4. Validating polygons entered or imported by admins

Coordinates are GeoJSON order, (lng, lat). check_serviceability() is the
only function that takes lat/lng and it swaps them before testing.
"""
import logging
from numbers import Real
from typing import Any, List, Mapping, Sequence, Union

from rolloff.config import settings
from rolloff.core.geometry import classify_point, OUTSIDE
from rolloff.schemas.serviceability import (
    GeoJsonPolygon,
    Point,
    ServiceArea,
    ServiceabilityResult,
)

logger = logging.getLogger(__name__)

MIN_RING_POINTS = 4  # triangle + closing point


def is_point_in_polygon(point: Point, ring: Sequence[Point]) -> bool:
    """True if the point is inside the ring or exactly on its boundary."""
    return classify_point(ring, point) != OUTSIDE


def is_point_in_geojson_polygon(
    point: Point,
    polygon: Union[GeoJsonPolygon, Mapping[str, Any]],
) -> bool:
    """
    True if the point is in the exterior ring and in none of the holes.

    A point on a hole's edge is on the hole, so it is outside the polygon.
    Plain GeoJSON dicts that passed is_valid_polygon() are accepted as-is.
    """
    if not isinstance(polygon, GeoJsonPolygon):
        polygon = GeoJsonPolygon.model_validate(polygon)

    if not polygon.coordinates:
        return False

    if not is_point_in_polygon(point, polygon.exterior):
        return False

    for hole in polygon.holes:
        if is_point_in_polygon(point, hole):
            return False

    return True


def check_serviceability(
    lat: float,
    lng: float,
    service_areas: Sequence[ServiceArea],
) -> ServiceabilityResult:
    """
    Check a location against the active service areas.

    Areas are tried in the order given and the first containing area wins;
    overlapping areas are not ranked by size or specificity.
    """
    point: Point = (lng, lat)

    active_areas = [area for area in service_areas if area.active]

    if not active_areas:
        logger.info(f"Serviceability: no active service areas ({len(service_areas)} configured)")
        return ServiceabilityResult(
            is_serviceable=False,
            message=settings.NO_ACTIVE_AREAS_MESSAGE,
        )

    for area in active_areas:
        if is_point_in_geojson_polygon(point, area.polygon):
            logger.debug(f"Serviceability: ({lat}, {lng}) matched area {area.id} ({area.name})")
            return ServiceabilityResult(
                is_serviceable=True,
                matched_area_id=area.id,
                matched_area_name=area.name,
                message=f"Location is within the {area.name} service area",
            )

    logger.info(f"Serviceability: ({lat}, {lng}) is outside {len(active_areas)} active areas")
    return ServiceabilityResult(
        is_serviceable=False,
        message=settings.OUT_OF_AREA_MESSAGE,
    )


# ==================== Validation ====================

def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def polygon_errors(value: Any, require_closed: bool = False) -> List[str]:
    """
    Reasons a value is not a usable GeoJSON polygon (empty list if it is).

    Winding order is not checked. Ring closure (first point == last point)
    is only checked when require_closed is set.
    """
    if isinstance(value, GeoJsonPolygon):
        value = value.model_dump()

    if not isinstance(value, Mapping):
        return ["Polygon must be an object"]

    if value.get("type") != "Polygon":
        return [f"Expected type 'Polygon', got {value.get('type')!r}"]

    coordinates = value.get("coordinates")
    if not _is_sequence(coordinates):
        return ["Polygon coordinates must be an array of rings"]

    if len(coordinates) == 0:
        return ["Polygon must have at least one ring"]

    errors = []
    for ring_index, ring in enumerate(coordinates):
        if not _is_sequence(ring):
            errors.append(f"Ring {ring_index} must be an array of points")
            continue

        if len(ring) < MIN_RING_POINTS:
            errors.append(
                f"Ring {ring_index} has {len(ring)} points, needs at least {MIN_RING_POINTS}"
            )
            continue

        bad_points = [
            i for i, p in enumerate(ring)
            if not (_is_sequence(p) and len(p) == 2 and all(_is_number(c) for c in p))
        ]
        if bad_points:
            errors.append(
                f"Ring {ring_index} has invalid points at {bad_points[:5]} "
                f"(each point must be [lng, lat])"
            )
            continue

        if require_closed and list(ring[0]) != list(ring[-1]):
            errors.append(f"Ring {ring_index} is not closed (first point != last point)")

    return errors


def is_valid_polygon(value: Any, require_closed: bool = False) -> bool:
    """Check that untrusted data is a well-formed GeoJSON polygon."""
    return not polygon_errors(value, require_closed=require_closed)
