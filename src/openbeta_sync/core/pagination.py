"""Page through source collections until an empty page comes back."""

from collections.abc import Callable, Iterator
from typing import Any

from loguru import logger

from openbeta_sync.models.source import Join
from openbeta_sync.protocols import SourceStoreProtocol

AREA_COLLECTION = "areas"
CLIMB_COLLECTION = "climbs"

# SQL equivalent:
#   SELECT climbs.*, areas.ancestors, areas.pathTokens
#   FROM climbs JOIN areas ON areas.metadata.area_id = climbs.metadata.areaRef
CLIMB_AREA_JOIN = Join(
    from_collection=AREA_COLLECTION,
    local_field="metadata.areaRef",
    foreign_field="metadata.area_id",
    projected_fields=("ancestors", "pathTokens"),
)

Page = list[dict[str, Any]]


def paginate(fetch_page: Callable[[int, int], Page], page_size: int) -> Iterator[Page]:
    """Yield pages from ``fetch_page(skip, limit)`` until one comes back empty.

    The total number of records is never asked for, so the source may grow
    or shrink while paging.
    """
    if page_size < 1:
        msg = f"page_size must be at least 1, got {page_size}"
        raise ValueError(msg)

    page_num = 0
    while True:
        page = fetch_page(page_num * page_size, page_size)
        if not page:
            return
        logger.debug("Fetched page {} ({} records)", page_num, len(page))
        yield page
        page_num += 1


def iter_areas(store: SourceStoreProtocol, page_size: int) -> Iterator[Page]:
    """Yield pages of raw area records."""

    def fetch(skip: int, limit: int) -> Page:
        return store.find_page(AREA_COLLECTION, skip=skip, limit=limit)

    return paginate(fetch, page_size)


def iter_climbs(store: SourceStoreProtocol, page_size: int) -> Iterator[Page]:
    """Yield pages of climb records joined with their area's path."""

    def fetch(skip: int, limit: int) -> Page:
        return store.find_page_with_join(CLIMB_COLLECTION, CLIMB_AREA_JOIN, skip=skip, limit=limit)

    return paginate(fetch, page_size)
