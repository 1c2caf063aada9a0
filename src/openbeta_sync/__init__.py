"""Mirror OpenBeta climbing areas and climbs into a typesense search index."""

from openbeta_sync.api import TypesenseApi
from openbeta_sync.core.source.mongo import MongoSourceStore
from openbeta_sync.core.sync import SyncStats, run_sync
from openbeta_sync.protocols import IndexClientProtocol, SourceStoreProtocol

__all__ = [
    "IndexClientProtocol",
    "MongoSourceStore",
    "SourceStoreProtocol",
    "SyncStats",
    "TypesenseApi",
    "run_sync",
]
