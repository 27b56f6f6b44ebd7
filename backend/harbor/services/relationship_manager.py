"""Relationship Manager - keeps boat.loads and load.carrier consistent.

Invariants:
    - assign/unassign touch exactly one boat and one load, boat written first
    - Rule checks run before any write: a rejected request mutates nothing
    - delete_boat clears every carrier it owns before the boat disappears
    - delete_load removes itself from its carrier's list before it disappears
    - list_loads_for_boat returns loads in the boat's list order

Design Decisions:
    - Rules come from core/relationships.py; this class only fetches and persists
    - Boat-delete cascade is one batched fetch plus one batched update_many
      (single commit). A failed cascade raises and keeps the boat, so the
      delete can simply be retried.
    - Cascade skips loads that vanished or now name another carrier (logged)
"""

import logging

from harbor.core.domain_types import EntityKey, EntityKind, StoredEntity
from harbor.core.errors import ResourceNotFoundError
from harbor.core.projection import ResponseProjector
from harbor.core.records import Boat, Load
from harbor.core.relationships import (
    attach_load, detach_load, missing_refs, order_by_refs, release_loads,
    without_load,
)
from harbor.core.repository_protocols import EntityStore
from harbor.services.lookup import (
    boat_key_or_404, get_boat_or_404, get_load_or_404, load_key_or_404,
)

logger = logging.getLogger(__name__)


class RelationshipManager:
    """Assign, unassign and cascading deletes for boats and loads."""

    def __init__(self, store: EntityStore, projector: ResponseProjector):
        self.store = store
        self.projector = projector

    async def assign(self, boat_id: object, load_id: object) -> dict:
        """Put a load on a boat. Returns both updated projections."""
        boat, load = await self._fetch_pair(boat_id, load_id)
        boat, load = attach_load(boat, load)

        await self.store.update(boat.key, boat.to_data())
        await self.store.update(load.key, load.to_data())
        logger.info(
            f"Load {load.id} assigned to boat {boat.id}",
            extra={"boat_id": boat.id, "load_id": load.id},
        )
        return {
            "boat": self.projector.boat(boat),
            "load": self.projector.load(load),
        }

    async def unassign(self, boat_id: object, load_id: object) -> None:
        """Take a load off a boat and clear its carrier."""
        boat, load = await self._fetch_pair(boat_id, load_id)
        boat, load = detach_load(boat, load)

        await self.store.update(boat.key, boat.to_data())
        await self.store.update(load.key, load.to_data())
        logger.info(
            f"Load {load.id} removed from boat {boat.id}",
            extra={"boat_id": boat.id, "load_id": load.id},
        )

    async def delete_boat(self, boat_id: object) -> None:
        boat = await get_boat_or_404(self.store, boat_id)

        if boat.loads:
            loads = await self._loads_of(boat)
            released = release_loads(boat, loads)
            skipped = len(boat.loads) - len(released)
            if skipped:
                logger.warning(
                    f"Boat {boat.id} delete: {skipped} listed load(s) "
                    "missing or carried elsewhere, left untouched",
                    extra={"boat_id": boat.id, "count": skipped},
                )
            await self.store.update_many([
                StoredEntity(load.key, load.to_data()) for load in released
            ])

        await self.store.delete(boat.key)
        logger.info(f"Boat {boat.id} deleted", extra={"boat_id": boat.id})

    async def delete_load(self, load_id: object) -> None:
        load = await get_load_or_404(self.store, load_id)

        if load.carrier is not None:
            entity = await self.store.get(
                EntityKey(EntityKind.BOAT, load.carrier.id),
            )
            if entity is None:
                raise ResourceNotFoundError(EntityKind.BOAT.value, load.carrier.id)
            boat = without_load(Boat.from_entity(entity), load.id)
            await self.store.update(boat.key, boat.to_data())

        await self.store.delete(load.key)
        logger.info(f"Load {load.id} deleted", extra={"load_id": load.id})

    async def list_loads_for_boat(self, boat_id: object) -> list[dict]:
        boat = await get_boat_or_404(self.store, boat_id)
        if not boat.loads:
            return []
        loads = await self._loads_of(boat)
        return [self.projector.load(load) for load in order_by_refs(boat.loads, loads)]

    async def _fetch_pair(
        self, boat_id: object, load_id: object,
    ) -> tuple[Boat, Load]:
        """Resolve both ids with one batched get; 404 if either is missing."""
        boat_key = boat_key_or_404(boat_id)
        load_key = load_key_or_404(load_id)
        found = {
            entity.key: entity
            for entity in await self.store.get_many([boat_key, load_key])
        }
        if boat_key not in found:
            raise ResourceNotFoundError(EntityKind.BOAT.value, boat_key.id)
        if load_key not in found:
            raise ResourceNotFoundError(EntityKind.LOAD.value, load_key.id)
        return Boat.from_entity(found[boat_key]), Load.from_entity(found[load_key])

    async def _loads_of(self, boat: Boat) -> list[Load]:
        entities = await self.store.get_many(
            [EntityKey(EntityKind.LOAD, ref.id) for ref in boat.loads],
        )
        loads = [Load.from_entity(entity) for entity in entities]
        missing = missing_refs(boat.loads, loads)
        if missing:
            logger.warning(
                f"Boat {boat.id} lists unknown load ids {missing}",
                extra={"boat_id": boat.id},
            )
        return loads
