"""Typesense collection schemas for areas and climbs."""

from typing import Any

_TOKEN_SEPARATORS = ["(", ")", "-", "."]

AREA_SCHEMA: dict[str, Any] = {
    "name": "areas",
    "fields": [
        {"name": "areaUUID", "type": "string", "index": False, "optional": True},
        {"name": "name", "type": "string"},
        {"name": "pathTokens", "type": "string[]", "facet": True},
        {"name": "areaLatLng", "type": "geopoint"},
        {"name": "leaf", "type": "bool", "facet": True},
        {"name": "isDestination", "type": "bool", "facet": True},
        {"name": "totalClimbs", "type": "int32", "facet": True},
        {"name": "density", "type": "float", "facet": True},
    ],
    "token_separators": _TOKEN_SEPARATORS,
}

CLIMB_SCHEMA: dict[str, Any] = {
    "name": "climbs",
    "fields": [
        {"name": "climbUUID", "type": "string", "index": False, "optional": True},
        {"name": "climbName", "type": "string"},
        {"name": "climbDesc", "type": "string"},
        {"name": "fa", "type": "string"},
        {"name": "areaNames", "type": "string[]", "facet": True},
        {"name": "disciplines", "type": "string[]", "facet": True},
        {"name": "grade", "type": "string", "facet": True},
        {"name": "safety", "type": "string", "facet": True},
        {"name": "cragLatLng", "type": "geopoint"},
    ],
    "token_separators": _TOKEN_SEPARATORS,
}
