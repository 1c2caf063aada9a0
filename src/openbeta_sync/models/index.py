"""Search index documents."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class AreaIndexDocument:
    """An area as stored in the ``areas`` typesense collection."""

    areaUUID: str
    name: str
    pathTokens: list[str]
    areaLatLng: list[float]
    leaf: bool = False
    isDestination: bool = False
    totalClimbs: int = 0
    density: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ClimbIndexDocument:
    """A climb as stored in the ``climbs`` typesense collection."""

    climbUUID: str
    climbName: str
    climbDesc: str
    fa: str
    areaNames: list[str]
    disciplines: list[str]
    grade: str
    safety: str
    cragLatLng: list[float]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
