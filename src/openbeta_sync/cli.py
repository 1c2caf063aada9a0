"""Command-line interface for openbeta-sync."""

import typer
from loguru import logger

from openbeta_sync.api import TypesenseApi
from openbeta_sync.config import CHUNK_SIZE, EXIT_FATAL, load_settings
from openbeta_sync.core.source.mongo import MongoSourceStore
from openbeta_sync.core.sync import run_sync
from openbeta_sync.errors import ConfigError, ProvisioningError
from openbeta_sync.logging_config import configure_logging

app = typer.Typer(
    help="Mirror OpenBeta areas and climbs into typesense.",
    add_completion=False,
)


@app.command()
def main(
    areas: bool = typer.Option(False, "--areas", help="Sync the areas collection"),
    climbs: bool = typer.Option(False, "--climbs", help="Sync the climbs collection"),
    chunk_size: int = typer.Option(
        CHUNK_SIZE, "--chunk-size", "-c", min=1, help="Documents per page and per import"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Drop, recreate and refill the selected typesense collections."""
    configure_logging(verbose=verbose)

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("{}", e)
        raise typer.Exit(EXIT_FATAL) from e

    if not (areas or climbs):
        logger.info("Nothing to do, pass --areas and/or --climbs")
        return

    client = TypesenseApi(settings)
    store = MongoSourceStore(settings.mongo_uri, settings.mongo_database)
    logger.info("Start pushing data to typesense")
    try:
        run_sync(store, client, areas=areas, climbs=climbs, chunk_size=chunk_size)
    except ProvisioningError as e:
        logger.error("{}", e)
        raise typer.Exit(EXIT_FATAL) from e
    finally:
        store.close()
        client.close()
