"""Push chunks of documents to typesense."""

from typing import Any

from loguru import logger

from openbeta_sync.errors import ApiError
from openbeta_sync.protocols import IndexClientProtocol


def upload_chunk(
    client: IndexClientProtocol,
    collection: str,
    chunk: list[dict[str, Any]],
) -> bool:
    """Import one chunk of documents.

    A failed chunk is logged and reported, never raised, so the remaining
    chunks still get their turn.

    Returns:
        False if the import failed, True otherwise (including empty chunks).
    """
    if not chunk:
        return True

    logger.info("Pushing {} documents to typesense collection {}", len(chunk), collection)
    try:
        client.import_documents(collection, chunk)
    except ApiError as e:
        logger.error("Chunk of {} documents failed: {}", len(chunk), e)
        return False
    return True
