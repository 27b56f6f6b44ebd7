"""Records - typed Boat and Load payloads and their mapping to stored documents.

Invariants:
    - from_entity() reads every field; to_data() writes every field back
      (no partial updates can drop a field)
    - Boat.loads preserves assignment order; each entry holds only the load id
    - Load.carrier is either a full Carrier(id, name) or None; None is stored
      as an absent field, never as null
"""

from dataclasses import dataclass, replace
from typing import Any

from harbor.core.domain_types import (
    EntityKey, EntityKind, StoredEntity, parse_entity_id, same_id,
)


@dataclass(frozen=True)
class LoadRef:
    """Entry of a boat's load list."""
    id: int


@dataclass(frozen=True)
class Carrier:
    """Boat reference embedded in a load (name copied at assignment time)."""
    id: int
    name: str


@dataclass(frozen=True)
class Boat:
    id: int
    name: str
    type: str
    length: float
    loads: tuple[LoadRef, ...] = ()

    @property
    def key(self) -> EntityKey:
        return EntityKey(EntityKind.BOAT, self.id)

    @classmethod
    def from_entity(cls, entity: StoredEntity) -> "Boat":
        data = entity.data
        return cls(
            id=entity.key.id,
            name=data.get("name"),
            type=data.get("type"),
            length=data.get("length"),
            loads=_load_refs(data.get("loads")),
        )

    def to_data(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "length": self.length,
            "loads": [{"id": ref.id} for ref in self.loads],
        }

    def carries(self, load_id: object) -> bool:
        return any(same_id(ref.id, load_id) for ref in self.loads)

    def with_loads(self, loads: tuple[LoadRef, ...]) -> "Boat":
        return replace(self, loads=loads)


@dataclass(frozen=True)
class Load:
    id: int
    volume: float
    content: str
    creation_date: str
    carrier: Carrier | None = None

    @property
    def key(self) -> EntityKey:
        return EntityKey(EntityKind.LOAD, self.id)

    @classmethod
    def from_entity(cls, entity: StoredEntity) -> "Load":
        data = entity.data
        return cls(
            id=entity.key.id,
            volume=data.get("volume"),
            content=data.get("content"),
            creation_date=data.get("creation_date"),
            carrier=_carrier(data.get("carrier")),
        )

    def to_data(self) -> dict[str, Any]:
        data = {
            "volume": self.volume,
            "content": self.content,
            "creation_date": self.creation_date,
        }
        if self.carrier is not None:
            data["carrier"] = {"id": self.carrier.id, "name": self.carrier.name}
        return data

    def with_carrier(self, carrier: Carrier | None) -> "Load":
        return replace(self, carrier=carrier)


def _load_refs(raw: Any) -> tuple[LoadRef, ...]:
    refs = []
    for item in raw or []:
        load_id = parse_entity_id(item.get("id")) if isinstance(item, dict) else None
        if load_id is not None:
            refs.append(LoadRef(load_id))
    return tuple(refs)


def _carrier(raw: Any) -> Carrier | None:
    # An empty or unparseable carrier counts as unassigned
    if not isinstance(raw, dict):
        return None
    boat_id = parse_entity_id(raw.get("id"))
    if boat_id is None:
        return None
    return Carrier(id=boat_id, name=raw.get("name"))
