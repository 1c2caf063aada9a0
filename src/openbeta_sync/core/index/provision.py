"""Drop and recreate destination collections."""

from typing import Any

from loguru import logger

from openbeta_sync.errors import ApiError, ProvisioningError
from openbeta_sync.protocols import IndexClientProtocol


def provision_collection(client: IndexClientProtocol, schema: dict[str, Any]) -> None:
    """Drop the collection named by ``schema`` if it exists, then create it.

    Recreating on every run keeps the schema up to date and pre-empts
    duplicates from a previous run.

    Raises:
        ProvisioningError: If the collection could not be created.
    """
    name = schema["name"]
    try:
        client.delete_collection(name)
        logger.info("Dropped {} collection from typesense", name)
    except ApiError as e:
        logger.warning("Could not drop {} collection: {}", name, e)

    try:
        client.create_collection(schema)
    except ApiError as e:
        msg = f"Failed to create typesense collection {name!r}: {e}"
        raise ProvisioningError(msg) from e
    logger.info("Created {} typesense collection", name)
