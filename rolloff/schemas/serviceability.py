"""
Serviceability Schemas.

Covers:
1. Point / Ring - GeoJSON coordinates, always (longitude, latitude)
2. GeoJsonPolygon - exterior ring plus optional holes
3. ServiceArea - admin-defined polygon
4. ServiceabilityResult - outcome of a location check
"""
from typing import List, Literal, Optional, Tuple
from uuid import UUID

from pydantic import Field, field_validator

from rolloff.schemas.base import InputSchema, FrozenSchema


# GeoJSON axis order: (lng, lat), NOT (lat, lng)
Point = Tuple[float, float]
Ring = List[Point]


class GeoJsonPolygon(InputSchema):
    """
    GeoJSON Polygon.

    coordinates[0] is the exterior ring; any further rings are holes.
    Use is_valid_polygon() on untrusted data before building one of these.
    """
    type: Literal["Polygon"] = "Polygon"
    coordinates: List[Ring] = Field(default_factory=list)

    @property
    def exterior(self) -> Ring:
        return self.coordinates[0] if self.coordinates else []

    @property
    def holes(self) -> List[Ring]:
        return self.coordinates[1:]


class ServiceArea(InputSchema):
    """Service area row as read from the database."""
    id: str
    name: str
    polygon: GeoJsonPolygon
    active: bool = True

    @field_validator('id', mode='before')
    @classmethod
    def stringify_uuid(cls, v):
        # ORM rows carry UUID primary keys
        if isinstance(v, UUID):
            return str(v)
        return v


class ServiceabilityResult(FrozenSchema):
    """Whether a location can be served, and by which area."""
    is_serviceable: bool
    matched_area_id: Optional[str] = None
    matched_area_name: Optional[str] = None
    message: str
