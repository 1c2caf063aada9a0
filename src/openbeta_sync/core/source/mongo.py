"""MongoDB implementation of the source store."""

from typing import Any

from loguru import logger
from pymongo import ASCENDING, MongoClient

from openbeta_sync.models.source import Join

_JOINED_AS = "_joined"


class MongoSourceStore:
    """Read pages of records from the OpenBeta database."""

    def __init__(
        self,
        uri: str,
        database: str,
        *,
        client: MongoClient | None = None,
    ) -> None:
        self.client: MongoClient = client or MongoClient(uri, uuidRepresentation="standard")
        self.db = self.client[database]
        logger.debug("Mongo source ready: database {!r}", database)

    def find_page(self, collection: str, *, skip: int, limit: int) -> list[dict[str, Any]]:
        cursor = self.db[collection].find({}).sort("_id", ASCENDING).skip(skip).limit(limit)
        return list(cursor)

    def find_page_with_join(
        self,
        collection: str,
        join: Join,
        *,
        skip: int,
        limit: int,
    ) -> list[dict[str, Any]]:
        return list(self.db[collection].aggregate(join_pipeline(join, skip=skip, limit=limit)))

    def close(self) -> None:
        self.client.close()


def join_pipeline(join: Join, *, skip: int, limit: int) -> list[dict[str, Any]]:
    """Build the aggregation pipeline for one joined page.

    ``$unwind`` drops records without a match, and turns the one-element
    lookup result into an object that is then merged into the record.
    """
    projection: dict[str, int] = {"_id": 0}
    projection.update({field: 1 for field in join.projected_fields})
    return [
        {"$sort": {"_id": ASCENDING}},
        {
            "$lookup": {
                "from": join.from_collection,
                "localField": join.local_field,
                "foreignField": join.foreign_field,
                "as": _JOINED_AS,
                "pipeline": [{"$project": projection}],
            }
        },
        {"$unwind": f"${_JOINED_AS}"},
        {"$replaceWith": {"$mergeObjects": ["$$ROOT", f"${_JOINED_AS}"]}},
        {"$project": {_JOINED_AS: 0}},
        {"$skip": skip},
        {"$limit": limit},
    ]
