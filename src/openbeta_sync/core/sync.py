"""Mirror source collections into typesense, one entity kind at a time."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from loguru import logger

from openbeta_sync.config import CHUNK_SIZE
from openbeta_sync.core.index.provision import provision_collection
from openbeta_sync.core.index.schemas import AREA_SCHEMA, CLIMB_SCHEMA
from openbeta_sync.core.index.upload import upload_chunk
from openbeta_sync.core.pagination import iter_areas, iter_climbs
from openbeta_sync.core.transform import area_to_document, climb_to_document
from openbeta_sync.protocols import IndexClientProtocol, SourceStoreProtocol


class IndexDocument(Protocol):
    def to_dict(self) -> dict[str, Any]: ...


@dataclass(frozen=True)
class SyncStats:
    """Summary of one collection sync."""

    collection: str
    pages: int
    documents: int
    failed_chunks: int


def sync_collection(
    client: IndexClientProtocol,
    schema: dict[str, Any],
    convert: Callable[[Any], IndexDocument],
    pages: Callable[[], Iterable[list[dict[str, Any]]]],
) -> SyncStats:
    """Recreate a collection and fill it from the source.

    Args:
        client: Typesense client.
        schema: Collection schema; its ``name`` is the destination.
        convert: Maps one source record to one index document.
        pages: Factory for the page iterator. It is only called once the
            collection has been provisioned.

    Raises:
        ProvisioningError: If the collection could not be created.
    """
    name = schema["name"]
    provision_collection(client, schema)

    page_count = 0
    documents = 0
    failed_chunks = 0
    for page in pages():
        chunk = [convert(record).to_dict() for record in page]
        if upload_chunk(client, name, chunk):
            documents += len(chunk)
        else:
            failed_chunks += 1
        page_count += 1

    stats = SyncStats(
        collection=name, pages=page_count, documents=documents, failed_chunks=failed_chunks
    )
    logger.info(
        "Sync of {} complete: {} documents in {} pages, {} failed chunks",
        name, documents, page_count, failed_chunks,
    )
    return stats


def sync_areas(
    store: SourceStoreProtocol,
    client: IndexClientProtocol,
    *,
    chunk_size: int = CHUNK_SIZE,
) -> SyncStats:
    return sync_collection(
        client,
        AREA_SCHEMA,
        area_to_document,
        lambda: iter_areas(store, chunk_size),
    )


def sync_climbs(
    store: SourceStoreProtocol,
    client: IndexClientProtocol,
    *,
    chunk_size: int = CHUNK_SIZE,
) -> SyncStats:
    return sync_collection(
        client,
        CLIMB_SCHEMA,
        climb_to_document,
        lambda: iter_climbs(store, chunk_size),
    )


def run_sync(
    store: SourceStoreProtocol,
    client: IndexClientProtocol,
    *,
    areas: bool = False,
    climbs: bool = False,
    chunk_size: int = CHUNK_SIZE,
) -> list[SyncStats]:
    """Run the requested passes, areas first.

    The passes are independent: each provisions its own collection.
    """
    results: list[SyncStats] = []
    if areas:
        results.append(sync_areas(store, client, chunk_size=chunk_size))
        logger.info("Areas pushed to typesense")
    if climbs:
        results.append(sync_climbs(store, client, chunk_size=chunk_size))
        logger.info("Climbs pushed to typesense")
    return results
