"""Protocols for dependency injection in the sync job."""

from typing import Any, Protocol, runtime_checkable

from openbeta_sync.models.source import Join


@runtime_checkable
class SourceStoreProtocol(Protocol):
    """Protocol for the document store records are read from."""

    def find_page(self, collection: str, *, skip: int, limit: int) -> list[dict[str, Any]]:
        """Return up to ``limit`` records of a collection after skipping ``skip``."""
        ...

    def find_page_with_join(
        self,
        collection: str,
        join: Join,
        *,
        skip: int,
        limit: int,
    ) -> list[dict[str, Any]]:
        """Return a page of records merged with fields of their joined record."""
        ...


@runtime_checkable
class IndexClientProtocol(Protocol):
    """Protocol for search index clients."""

    def delete_collection(self, name: str) -> dict[str, Any]:
        """Drop a collection."""
        ...

    def create_collection(self, schema: dict[str, Any]) -> dict[str, Any]:
        """Create a collection with the given schema."""
        ...

    def import_documents(
        self,
        name: str,
        documents: list[dict[str, Any]],
        *,
        action: str = "create",
    ) -> list[dict[str, Any]]:
        """Bulk-import documents into a collection."""
        ...
