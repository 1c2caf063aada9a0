"""Shapes of the records read from the OpenBeta document store.

These mirror the ``areas`` and ``climbs`` collections. Only the fields the
sync job reads are listed; records may carry more.
"""

from dataclasses import dataclass
from typing import Any, TypedDict


@dataclass(frozen=True)
class Join:
    """Attach fields of a matching record from another collection.

    Each source record whose ``local_field`` equals the ``foreign_field`` of
    a record in ``from_collection`` is merged with that record's
    ``projected_fields``.
    """

    from_collection: str
    local_field: str
    foreign_field: str
    projected_fields: tuple[str, ...]


class GeoPoint(TypedDict):
    """GeoJSON point, coordinates are ``[lng, lat]``."""

    type: str
    coordinates: list[float]


class CountByGroup(TypedDict):
    count: int
    label: str


class Point(TypedDict):
    lat: float
    lng: float


class AreaMetadata(TypedDict, total=False):
    area_id: Any
    lat: float
    lng: float
    lnglat: GeoPoint
    leaf: bool
    isDestination: bool
    mp_id: str
    left_right_index: int


class Aggregate(TypedDict, total=False):
    byGrade: list[CountByGroup]
    byType: list[CountByGroup]
    bounds: list[Point]
    density: float
    totalClimbs: int


class Content(TypedDict, total=False):
    description: str


class AreaRecord(TypedDict, total=False):
    area_name: str
    metadata: AreaMetadata
    content: Content
    aggregate: Aggregate
    children: list[Any]
    ancestors: list[str]
    pathTokens: list[str]
    parentHashRef: str
    pathHash: str
    totalClimbs: int
    density: float


class ClimbMetadata(TypedDict, total=False):
    climb_id: Any
    areaRef: Any
    lnglat: GeoPoint
    mp_id: str
    left_right_index: int


class ClimbRecord(TypedDict, total=False):
    """A climb, joined with its owning area's ``ancestors`` and ``pathTokens``."""

    name: str
    type: dict[str, bool]
    yds: str
    grades: dict[str, str]
    safety: str
    fa: str
    content: Content
    metadata: ClimbMetadata
    ancestors: list[str]
    pathTokens: list[str]
