"""Boundary Protocols - the entity store contract between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - get_many() makes no ordering promise; callers order results themselves
    - update() overwrites every stored field of the entity
    - query() cursors are opaque: produced and consumed by the store only

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake store
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from harbor.core.domain_types import EntityKey, EntityKind, StoredEntity


@dataclass(frozen=True)
class QueryPage:
    """One page of a kind query plus the store's continuation state."""
    entities: list[StoredEntity] = field(default_factory=list)
    more_results: bool = False
    end_cursor: str | None = None


class EntityStore(Protocol):
    """Contract for entity persistence - implemented by shell."""
    async def get(self, key: EntityKey) -> StoredEntity | None: ...
    async def get_many(self, keys: Sequence[EntityKey]) -> list[StoredEntity]: ...
    async def put(self, kind: EntityKind, data: dict[str, Any]) -> StoredEntity: ...
    async def update(self, key: EntityKey, data: dict[str, Any]) -> None: ...
    async def update_many(self, entities: Sequence[StoredEntity]) -> None: ...
    async def delete(self, key: EntityKey) -> None: ...
    async def query(
        self, kind: EntityKind, limit: int, cursor: str | None = None,
    ) -> QueryPage: ...
