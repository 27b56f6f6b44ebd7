"""Response Projector - maps Boat/Load records to their wire representation.

Invariants:
    - Every projected boat and load carries self = <base_url>/<collection>/<id>
    - Each load entry inside a boat gets a load self-link
    - A load's carrier gets a boat self-link; an unassigned load has no carrier field
    - Projection happens only at the response boundary; records are never modified
"""

from harbor.core.domain_types import EntityKind
from harbor.core.records import Boat, Load


class ResponseProjector:
    """Builds response bodies with self-links under a fixed base URL."""

    def __init__(self, base_url: str):
        self._base_url = base_url.rstrip("/")

    def self_link(self, kind: EntityKind, entity_id: int) -> str:
        return f"{self._base_url}/{kind.collection}/{entity_id}"

    def next_link(self, kind: EntityKind, cursor: str) -> str:
        return f"{self._base_url}/{kind.collection}?cursor={cursor}"

    def boat(self, boat: Boat) -> dict:
        return {
            "id": boat.id,
            "name": boat.name,
            "type": boat.type,
            "length": boat.length,
            "loads": [
                {"id": ref.id, "self": self.self_link(EntityKind.LOAD, ref.id)}
                for ref in boat.loads
            ],
            "self": self.self_link(EntityKind.BOAT, boat.id),
        }

    def load(self, load: Load) -> dict:
        body = {
            "id": load.id,
            "volume": load.volume,
            "content": load.content,
            "creation_date": load.creation_date,
        }
        if load.carrier is not None:
            body["carrier"] = {
                "id": load.carrier.id,
                "name": load.carrier.name,
                "self": self.self_link(EntityKind.BOAT, load.carrier.id),
            }
        body["self"] = self.self_link(EntityKind.LOAD, load.id)
        return body
