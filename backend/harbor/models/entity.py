"""Entity ORM - one row per stored document, scoped by kind.

Invariants:
    - id is an integer primary key assigned by the database, never reused by the app
    - kind is "Boat" or "Load"; (kind, id) is the entity key
    - data holds the document fields only (no id, no self-links)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from harbor.db.base import Base


class Entity(Base):
    """Stored document for a boat or a load."""
    __tablename__ = "entities"
    __table_args__ = (Index("ix_entities_kind_id", "kind", "id"),)

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    kind: Mapped[str] = mapped_column(String(32), nullable=False)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
