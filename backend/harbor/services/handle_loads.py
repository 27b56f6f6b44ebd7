"""Load Handlers - create and read loads.

Invariants:
    - A new load has no carrier; only the Relationship Manager sets one
"""

import logging

from harbor.core.domain_types import EntityKind
from harbor.core.projection import ResponseProjector
from harbor.core.records import Load
from harbor.core.repository_protocols import EntityStore
from harbor.schemas.load import LoadCreate
from harbor.services.lookup import get_load_or_404

logger = logging.getLogger(__name__)


class LoadHandlers:
    """Load create/read operations."""

    def __init__(self, store: EntityStore, projector: ResponseProjector):
        self.store = store
        self.projector = projector

    async def create(self, body: LoadCreate) -> dict:
        entity = await self.store.put(
            EntityKind.LOAD,
            {
                "volume": body.volume,
                "content": body.content,
                "creation_date": body.creation_date,
            },
        )
        load = Load.from_entity(entity)
        logger.info(f"Load {load.id} created", extra={"load_id": load.id})
        return self.projector.load(load)

    async def get(self, load_id: object) -> dict:
        return self.projector.load(await get_load_or_404(self.store, load_id))
