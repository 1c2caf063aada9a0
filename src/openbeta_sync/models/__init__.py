"""Domain models for the sync job."""

from openbeta_sync.models.index import AreaIndexDocument, ClimbIndexDocument
from openbeta_sync.models.source import AreaRecord, ClimbRecord, Join

__all__ = ["AreaIndexDocument", "AreaRecord", "ClimbIndexDocument", "ClimbRecord", "Join"]
