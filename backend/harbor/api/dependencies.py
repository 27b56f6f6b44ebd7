"""API Dependencies - wire store, projector and services per request.

Invariants:
    - One SqlEntityStore per request, bound to that request's AsyncSession
    - The projector's base URL comes from Settings.app_url via get_settings
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from harbor.config import Settings, get_settings
from harbor.core.projection import ResponseProjector
from harbor.infrastructure.database import get_db
from harbor.infrastructure.entity_store import SqlEntityStore
from harbor.services.handle_boats import BoatHandlers
from harbor.services.handle_loads import LoadHandlers
from harbor.services.pagination import PaginationEngine
from harbor.services.relationship_manager import RelationshipManager


def get_store(db: AsyncSession = Depends(get_db)) -> SqlEntityStore:
    return SqlEntityStore(db)


def get_projector(settings: Settings = Depends(get_settings)) -> ResponseProjector:
    return ResponseProjector(settings.app_url)


def get_relationship_manager(
    store: SqlEntityStore = Depends(get_store),
    projector: ResponseProjector = Depends(get_projector),
) -> RelationshipManager:
    return RelationshipManager(store, projector)


def get_pagination(
    store: SqlEntityStore = Depends(get_store),
    projector: ResponseProjector = Depends(get_projector),
) -> PaginationEngine:
    return PaginationEngine(store, projector)


def get_boat_handlers(
    store: SqlEntityStore = Depends(get_store),
    projector: ResponseProjector = Depends(get_projector),
) -> BoatHandlers:
    return BoatHandlers(store, projector)


def get_load_handlers(
    store: SqlEntityStore = Depends(get_store),
    projector: ResponseProjector = Depends(get_projector),
) -> LoadHandlers:
    return LoadHandlers(store, projector)
