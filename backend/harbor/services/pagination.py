"""Pagination Engine - fixed-size, cursor-driven listing per kind.

Invariants:
    - At most PAGE_SIZE entities per page, one kind per query
    - "next" is present only when the store reports more results
    - Cursors are threaded through untouched; only the store reads them
"""

import logging

from harbor.core.domain_types import PAGE_SIZE, EntityKind
from harbor.core.projection import ResponseProjector
from harbor.core.records import Boat, Load
from harbor.core.repository_protocols import EntityStore

logger = logging.getLogger(__name__)


class PaginationEngine:
    """Lists boats or loads one page at a time."""

    def __init__(
        self, store: EntityStore, projector: ResponseProjector,
        page_size: int = PAGE_SIZE,
    ):
        self.store = store
        self.projector = projector
        self.page_size = page_size

    async def list_boats(self, cursor: str | None = None) -> dict:
        return await self._list(EntityKind.BOAT, cursor)

    async def list_loads(self, cursor: str | None = None) -> dict:
        return await self._list(EntityKind.LOAD, cursor)

    async def _list(self, kind: EntityKind, cursor: str | None) -> dict:
        page = await self.store.query(kind, self.page_size, cursor)
        if kind is EntityKind.BOAT:
            items = [self.projector.boat(Boat.from_entity(e)) for e in page.entities]
        else:
            items = [self.projector.load(Load.from_entity(e)) for e in page.entities]

        body = {kind.collection: items}
        if page.more_results and page.end_cursor:
            body["next"] = self.projector.next_link(kind, page.end_cursor)
        logger.debug(
            f"Listed {len(items)} {kind.collection}",
            extra={"kind": kind.value, "count": len(items)},
        )
        return body
