"""Boat Routes - /boats collection, boat resources and boat/load relationships.

Invariants:
    - Path ids arrive as strings and are normalized by the services (bad id -> 404)
    - Successful deletes and unassigns answer 204 with an empty body
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from harbor.api.dependencies import (
    get_boat_handlers, get_pagination, get_relationship_manager,
)
from harbor.schemas.boat import BoatCreate
from harbor.services.handle_boats import BoatHandlers
from harbor.services.pagination import PaginationEngine
from harbor.services.relationship_manager import RelationshipManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/boats", tags=["boats"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_boat(
    body: BoatCreate, boats: BoatHandlers = Depends(get_boat_handlers),
):
    """Create a boat."""
    return await boats.create(body)


@router.get("")
async def list_boats(
    cursor: str | None = Query(None),
    pagination: PaginationEngine = Depends(get_pagination),
):
    """List boats, three per page."""
    return await pagination.list_boats(cursor)


@router.get("/{boat_id}")
async def get_boat(
    boat_id: str, boats: BoatHandlers = Depends(get_boat_handlers),
):
    return await boats.get(boat_id)


@router.delete("/{boat_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_boat(
    boat_id: str,
    relationships: RelationshipManager = Depends(get_relationship_manager),
):
    """Delete a boat and clear the carrier on every load it held."""
    await relationships.delete_boat(boat_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{boat_id}/loads")
async def list_boat_loads(
    boat_id: str,
    relationships: RelationshipManager = Depends(get_relationship_manager),
):
    """All loads on a boat, in assignment order."""
    return await relationships.list_loads_for_boat(boat_id)


@router.put("/{boat_id}/loads/{load_id}")
async def assign_load(
    boat_id: str, load_id: str,
    relationships: RelationshipManager = Depends(get_relationship_manager),
):
    """Put a load on a boat."""
    return await relationships.assign(boat_id, load_id)


@router.delete(
    "/{boat_id}/loads/{load_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def unassign_load(
    boat_id: str, load_id: str,
    relationships: RelationshipManager = Depends(get_relationship_manager),
):
    """Take a load off a boat."""
    await relationships.unassign(boat_id, load_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
