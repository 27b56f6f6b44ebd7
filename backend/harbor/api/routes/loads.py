"""Load Routes - /loads collection and load resources."""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from harbor.api.dependencies import (
    get_load_handlers, get_pagination, get_relationship_manager,
)
from harbor.schemas.load import LoadCreate
from harbor.services.handle_loads import LoadHandlers
from harbor.services.pagination import PaginationEngine
from harbor.services.relationship_manager import RelationshipManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/loads", tags=["loads"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_load(
    body: LoadCreate, loads: LoadHandlers = Depends(get_load_handlers),
):
    return await loads.create(body)


@router.get("")
async def list_loads(
    cursor: str | None = Query(None),
    pagination: PaginationEngine = Depends(get_pagination),
):
    """List loads, three per page."""
    return await pagination.list_loads(cursor)


@router.get("/{load_id}")
async def get_load(
    load_id: str, loads: LoadHandlers = Depends(get_load_handlers),
):
    return await loads.get(load_id)


@router.delete("/{load_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_load(
    load_id: str,
    relationships: RelationshipManager = Depends(get_relationship_manager),
):
    """Delete a load, removing it from its carrier's load list first."""
    await relationships.delete_load(load_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
