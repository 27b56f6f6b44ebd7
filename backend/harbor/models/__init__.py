"""ORM Models - SQLAlchemy declarative models backing the entity store.

Design Decisions:
    - Boats and loads share one kind-scoped table; documents stay schemaless
    - Imported here so Base.metadata is populated before create_all/autogenerate
"""

from harbor.models.entity import Entity  # noqa: F401
