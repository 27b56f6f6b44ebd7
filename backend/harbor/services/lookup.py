"""Entity Lookup - resolve raw ids to Boat/Load records or raise 404.

Invariants:
    - Ids are normalized with parse_entity_id before touching the store
    - An id that does not parse resolves to nothing (404), never to a 400/500
"""

from harbor.core.domain_types import EntityKey, EntityKind, parse_entity_id
from harbor.core.errors import ResourceNotFoundError
from harbor.core.records import Boat, Load
from harbor.core.repository_protocols import EntityStore


def boat_key_or_404(raw_id: object) -> EntityKey:
    boat_id = parse_entity_id(raw_id)
    if boat_id is None:
        raise ResourceNotFoundError(EntityKind.BOAT.value, raw_id)
    return EntityKey(EntityKind.BOAT, boat_id)


def load_key_or_404(raw_id: object) -> EntityKey:
    load_id = parse_entity_id(raw_id)
    if load_id is None:
        raise ResourceNotFoundError(EntityKind.LOAD.value, raw_id)
    return EntityKey(EntityKind.LOAD, load_id)


async def get_boat_or_404(store: EntityStore, raw_id: object) -> Boat:
    key = boat_key_or_404(raw_id)
    entity = await store.get(key)
    if entity is None:
        raise ResourceNotFoundError(EntityKind.BOAT.value, key.id)
    return Boat.from_entity(entity)


async def get_load_or_404(store: EntityStore, raw_id: object) -> Load:
    key = load_key_or_404(raw_id)
    entity = await store.get(key)
    if entity is None:
        raise ResourceNotFoundError(EntityKind.LOAD.value, key.id)
    return Load.from_entity(entity)
