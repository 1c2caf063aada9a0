"""Map source records to search index documents."""

import uuid
from collections.abc import Mapping
from typing import Any

from openbeta_sync.models.index import AreaIndexDocument, ClimbIndexDocument
from openbeta_sync.models.source import AreaRecord, ClimbRecord, GeoPoint


def to_uuid_string(value: Any) -> str:
    """Render a stored identifier as a canonical UUID string.

    Accepts ``uuid.UUID``, 16-byte binaries (BSON UUID subtypes come back
    as ``bytes`` subclasses) and UUID strings.
    """
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, bytes):
        return str(uuid.UUID(bytes=bytes(value)))
    return str(uuid.UUID(value))


def geo_to_lat_lng(point: GeoPoint) -> list[float]:
    """Convert a GeoJSON ``[lng, lat]`` point to ``[lat, lng]`` for geo search."""
    lng, lat = point["coordinates"][:2]
    return [float(lat), float(lng)]


def disciplines_to_array(disciplines: Mapping[str, bool] | None) -> list[str]:
    """Return the names of the enabled discipline flags, in mapping order."""
    if not disciplines:
        return []
    return [name for name, enabled in disciplines.items() if enabled]


def _area_lat_lng(metadata: Mapping[str, Any]) -> list[float]:
    lnglat = metadata.get("lnglat")
    if lnglat:
        return geo_to_lat_lng(lnglat)
    return [float(metadata.get("lat", 0.0)), float(metadata.get("lng", 0.0))]


def area_to_document(record: AreaRecord) -> AreaIndexDocument:
    """Project an area record onto the ``areas`` collection schema."""
    metadata = record["metadata"]
    aggregate = record.get("aggregate") or {}
    total_climbs = record.get("totalClimbs", aggregate.get("totalClimbs"))
    density = record.get("density", aggregate.get("density"))
    return AreaIndexDocument(
        areaUUID=to_uuid_string(metadata["area_id"]),
        name=record.get("area_name") or "",
        pathTokens=list(record["pathTokens"]),
        areaLatLng=_area_lat_lng(metadata),
        leaf=bool(metadata.get("leaf", False)),
        isDestination=bool(metadata.get("isDestination", False)),
        totalClimbs=int(total_climbs or 0),
        density=float(density or 0.0),
    )


def climb_to_document(record: ClimbRecord) -> ClimbIndexDocument:
    """Project a joined climb record onto the ``climbs`` collection schema.

    The record must already carry its owning area's ``pathTokens``.
    """
    metadata = record["metadata"]
    content = record.get("content") or {}
    grade = record.get("yds") or (record.get("grades") or {}).get("yds")
    return ClimbIndexDocument(
        climbUUID=to_uuid_string(metadata["climb_id"]),
        climbName=record.get("name") or "",
        climbDesc=content.get("description") or "",
        fa=record.get("fa") or "",
        areaNames=list(record["pathTokens"]),
        disciplines=disciplines_to_array(record.get("type")),
        grade=grade or "",
        safety=record.get("safety") or "",
        cragLatLng=geo_to_lat_lng(metadata["lnglat"]),
    )
