"""Exceptions raised by the sync job."""

from typing import Any


class SyncError(RuntimeError):
    """Base class for openbeta-sync errors."""


class ConfigError(SyncError):
    """Required configuration is missing or invalid."""


class ProvisioningError(SyncError):
    """A destination collection could not be created."""


class ApiError(SyncError):
    """A typesense request failed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ObjectNotFound(ApiError):
    """The requested typesense object does not exist."""


class ImportFailed(ApiError):
    """Some documents of a bulk import were rejected."""

    def __init__(self, message: str, *, failures: list[dict[str, Any]]) -> None:
        super().__init__(message, status_code=200)
        self.failures = failures
