"""Boat Handlers - create and read boats.

Invariants:
    - A new boat is stored with an empty loads list
    - Responses always go through ResponseProjector (self-links added there)
"""

import logging

from harbor.core.domain_types import EntityKind
from harbor.core.projection import ResponseProjector
from harbor.core.records import Boat
from harbor.core.repository_protocols import EntityStore
from harbor.schemas.boat import BoatCreate
from harbor.services.lookup import get_boat_or_404

logger = logging.getLogger(__name__)


class BoatHandlers:
    """Boat create/read operations."""

    def __init__(self, store: EntityStore, projector: ResponseProjector):
        self.store = store
        self.projector = projector

    async def create(self, body: BoatCreate) -> dict:
        entity = await self.store.put(
            EntityKind.BOAT,
            {"name": body.name, "type": body.type, "length": body.length, "loads": []},
        )
        boat = Boat.from_entity(entity)
        logger.info(f"Boat {boat.id} created", extra={"boat_id": boat.id})
        return self.projector.boat(boat)

    async def get(self, boat_id: object) -> dict:
        return self.projector.boat(await get_boat_or_404(self.store, boat_id))
