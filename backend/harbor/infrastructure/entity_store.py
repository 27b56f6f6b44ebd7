"""SQL Entity Store - kind-scoped document store over the entities table.

Invariants:
    - Keys resolve only within their kind (a load id never answers a boat key)
    - put/update/delete commit individually; update_many commits once for the batch
    - query() pages by ascending id; cursors encode kind + last id and are
      rejected for any other kind
    - Returned documents are copies; mutating them never touches the session

Design Decisions:
    - Keyset cursor (id > last) over OFFSET: stable under concurrent inserts/deletes
    - One extra row fetched per page to answer more_results without a COUNT
"""

import base64
import binascii
import json
import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from harbor.core.domain_types import (
    MAX_ENTITY_ID, EntityKey, EntityKind, StoredEntity,
)
from harbor.core.errors import InvalidCursorError, ResourceNotFoundError
from harbor.core.repository_protocols import QueryPage
from harbor.models.entity import Entity

logger = logging.getLogger(__name__)


class SqlEntityStore:
    """EntityStore implementation backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, key: EntityKey) -> StoredEntity | None:
        row = await self._row(key)
        return _to_stored(row) if row else None

    async def get_many(self, keys: Sequence[EntityKey]) -> list[StoredEntity]:
        """Batch fetch. Missing keys are dropped; order is not guaranteed."""
        wanted = set(keys)
        if not wanted:
            return []
        result = await self.db.execute(
            select(Entity).where(Entity.id.in_(sorted({key.id for key in wanted}))),
        )
        return [
            _to_stored(row)
            for row in result.scalars().all()
            if EntityKey(EntityKind(row.kind), row.id) in wanted
        ]

    async def put(self, kind: EntityKind, data: dict[str, Any]) -> StoredEntity:
        row = Entity(kind=kind.value, data=dict(data))
        self.db.add(row)
        await self.db.commit()
        logger.debug(f"Stored {kind.value} {row.id}", extra={"kind": kind.value})
        return _to_stored(row)

    async def update(self, key: EntityKey, data: dict[str, Any]) -> None:
        """Overwrite every stored field of an existing entity."""
        row = await self._row(key)
        if row is None:
            raise ResourceNotFoundError(key.kind.value, key.id)
        row.data = dict(data)
        await self.db.commit()

    async def update_many(self, entities: Sequence[StoredEntity]) -> None:
        """Overwrite several entities in one transaction (all or nothing)."""
        if not entities:
            return
        result = await self.db.execute(
            select(Entity).where(
                Entity.id.in_(sorted({entity.key.id for entity in entities})),
            ),
        )
        rows = {
            EntityKey(EntityKind(row.kind), row.id): row
            for row in result.scalars().all()
        }
        for entity in entities:
            if entity.key not in rows:
                raise ResourceNotFoundError(entity.key.kind.value, entity.key.id)
        for entity in entities:
            rows[entity.key].data = dict(entity.data)
        await self.db.commit()

    async def delete(self, key: EntityKey) -> None:
        row = await self._row(key)
        if row is None:
            return
        await self.db.delete(row)
        await self.db.commit()

    async def query(
        self, kind: EntityKind, limit: int, cursor: str | None = None,
    ) -> QueryPage:
        statement = select(Entity).where(Entity.kind == kind.value)
        if cursor:
            statement = statement.where(Entity.id > decode_cursor(cursor, kind))
        result = await self.db.execute(
            statement.order_by(Entity.id).limit(limit + 1),
        )
        rows = list(result.scalars().all())
        page = rows[:limit]
        return QueryPage(
            entities=[_to_stored(row) for row in page],
            more_results=len(rows) > limit,
            end_cursor=encode_cursor(kind, page[-1].id) if page else cursor,
        )

    async def _row(self, key: EntityKey) -> Entity | None:
        result = await self.db.execute(
            select(Entity)
            .where(Entity.id == key.id)
            .where(Entity.kind == key.kind.value),
        )
        return result.scalar_one_or_none()


def _to_stored(row: Entity) -> StoredEntity:
    return StoredEntity(
        key=EntityKey(EntityKind(row.kind), row.id),
        data=json.loads(json.dumps(row.data or {})),
    )


# ─── Cursor Tokens ───────────────────────────────────────────────

def encode_cursor(kind: EntityKind, last_id: int) -> str:
    raw = json.dumps({"k": kind.value, "after": last_id}, separators=(",", ":"))
    return base64.urlsafe_b64encode(raw.encode()).decode().rstrip("=")


def decode_cursor(cursor: str, kind: EntityKind) -> int:
    """Return the last id seen for kind, or raise InvalidCursorError."""
    padded = cursor + "=" * (-len(cursor) % 4)
    try:
        payload = json.loads(base64.urlsafe_b64decode(padded.encode()))
    except (ValueError, binascii.Error):
        raise InvalidCursorError(cursor)
    if not isinstance(payload, dict) or payload.get("k") != kind.value:
        raise InvalidCursorError(cursor)
    after = payload.get("after")
    if isinstance(after, bool) or not isinstance(after, int):
        raise InvalidCursorError(cursor)
    if not 0 <= after <= MAX_ENTITY_ID:
        raise InvalidCursorError(cursor)
    return after
