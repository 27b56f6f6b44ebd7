"""Pagination Engine - page size, next links and cursor replay."""

from urllib.parse import parse_qs, urlparse

from harbor.core.domain_types import EntityKind
from harbor.services.pagination import PaginationEngine


def _cursor_of(next_link: str) -> str:
    return parse_qs(urlparse(next_link).query)["cursor"][0]


async def test_single_page_has_no_next(store, projector):
    await store.put(EntityKind.BOAT, {"name": "Skiff", "type": "sail", "length": 1})
    body = await PaginationEngine(store, projector).list_boats()
    assert len(body["boats"]) == 1
    assert "next" not in body


async def test_replaying_next_walks_every_load_once(store, projector):
    created = [
        (await store.put(
            EntityKind.LOAD,
            {"volume": i, "content": "c", "creation_date": "2024-01-01"},
        )).key.id
        for i in range(8)
    ]
    engine = PaginationEngine(store, projector)

    seen = []
    body = await engine.list_loads()
    while True:
        assert len(body["loads"]) <= 3
        seen.extend(load["id"] for load in body["loads"])
        if "next" not in body:
            break
        assert body["next"].startswith("http://test/loads?cursor=")
        body = await engine.list_loads(_cursor_of(body["next"]))

    assert seen == created


async def test_boat_pages_exclude_loads(store, projector):
    await store.put(EntityKind.LOAD, {"volume": 1})
    body = await PaginationEngine(store, projector).list_boats()
    assert body == {"boats": []}


async def test_items_are_projected(store, projector):
    boat = await store.put(
        EntityKind.BOAT, {"name": "Skiff", "type": "sail", "length": 1, "loads": []},
    )
    body = await PaginationEngine(store, projector).list_boats()
    assert body["boats"][0]["self"] == f"http://test/boats/{boat.key.id}"
