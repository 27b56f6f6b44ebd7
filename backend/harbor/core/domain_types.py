"""Domain Types - entity kinds, keys and id normalization.

Invariants:
    - Entity ids are positive ints; every id from outside goes through parse_entity_id
    - EntityKey pairs a kind with an id; a boat key never resolves to a load
    - Stored documents never contain their own id or self-links

Design Decisions:
    - Frozen dataclasses for keys and stored entities: hashable, usable as dict keys
    - int is the canonical id: "5" and 5 compare equal after normalization
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


PAGE_SIZE = 3

# Ids live in a 32-bit INTEGER column
MAX_ENTITY_ID = 2**31 - 1


class EntityKind(str, Enum):
    """Kinds stored in the entity store."""
    BOAT = "Boat"
    LOAD = "Load"

    @property
    def collection(self) -> str:
        """URL path segment / response field for this kind."""
        return f"{self.value.lower()}s"


@dataclass(frozen=True)
class EntityKey:
    """Store key: kind plus store-assigned integer id."""
    kind: EntityKind
    id: int


@dataclass(frozen=True)
class StoredEntity:
    """An entity as the store returns it: key plus document fields."""
    key: EntityKey
    data: dict[str, Any] = field(default_factory=dict, hash=False)


def entity_id(entity: StoredEntity) -> int:
    return entity.key.id


def entity_kind(entity: StoredEntity) -> EntityKind:
    return entity.key.kind


def parse_entity_id(raw: object) -> int | None:
    """Normalize an id from a route, a stored reference or a client.

    Accepts ints and decimal strings. Returns None for anything that cannot
    name an entity (bools, non-integral numbers, zero, negatives, junk,
    values above MAX_ENTITY_ID).
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            return None
        value = int(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text.isdigit() or not text.isascii():
            return None
        value = int(text)
    else:
        return None
    return value if 0 < value <= MAX_ENTITY_ID else None


def same_id(left: object, right: object) -> bool:
    """Compare two ids regardless of their source representation."""
    a = parse_entity_id(left)
    return a is not None and a == parse_entity_id(right)
