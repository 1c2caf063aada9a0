"""Configuration constants and environment settings for openbeta-sync."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from openbeta_sync.errors import ConfigError

# Maximum number of documents pushed to typesense at once.
CHUNK_SIZE: int = 5000

# A total of 4 tries (1 original try + 3 retries).
NUM_RETRIES: int = 3

# Large imports take a while.
CONNECTION_TIMEOUT_SECONDS: int = 120

DEFAULT_TYPESENSE_PORT: int = 443
DEFAULT_TYPESENSE_PROTOCOL: str = "https"
DEFAULT_MONGO_URI: str = "mongodb://localhost:27017"
DEFAULT_MONGO_DBNAME: str = "openbeta"

# Process exit code for missing configuration or provisioning failure.
EXIT_FATAL: int = 1


@dataclass(frozen=True)
class Settings:
    """Connection settings for the source store and the search index."""

    typesense_node: str
    typesense_api_key: str
    typesense_port: int = DEFAULT_TYPESENSE_PORT
    typesense_protocol: str = DEFAULT_TYPESENSE_PROTOCOL
    mongo_uri: str = DEFAULT_MONGO_URI
    mongo_database: str = DEFAULT_MONGO_DBNAME

    @property
    def typesense_url(self) -> str:
        return f"{self.typesense_protocol}://{self.typesense_node}:{self.typesense_port}"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment.

    Args:
        environ: Mapping to read from, defaults to ``os.environ``.

    Raises:
        ConfigError: If the typesense node or API key is missing, or the
            port is not an integer.
    """
    env = os.environ if environ is None else environ

    node = env.get("TYPESENSE_NODE", "").strip()
    api_key = env.get("TYPESENSE_API_KEY", "").strip()
    if not node or not api_key:
        msg = "TYPESENSE_NODE and TYPESENSE_API_KEY must both be set"
        raise ConfigError(msg)

    raw_port = env.get("TYPESENSE_PORT", str(DEFAULT_TYPESENSE_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        msg = f"TYPESENSE_PORT must be an integer, got {raw_port!r}"
        raise ConfigError(msg) from None

    return Settings(
        typesense_node=node,
        typesense_api_key=api_key,
        typesense_port=port,
        typesense_protocol=env.get("TYPESENSE_PROTOCOL", DEFAULT_TYPESENSE_PROTOCOL),
        mongo_uri=env.get("MONGO_URI", DEFAULT_MONGO_URI),
        mongo_database=env.get("MONGO_DBNAME", DEFAULT_MONGO_DBNAME),
    )
