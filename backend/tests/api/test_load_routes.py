"""Load Routes - HTTP contract for /loads."""

WOOD = {"volume": 5, "content": "wood", "creation_date": "2024-01-01"}
SKIFF = {"name": "Skiff", "type": "sail", "length": 20}


async def test_create_load_returns_201_without_carrier(client):
    res = await client.post("/loads", json=WOOD)
    assert res.status_code == 201
    body = res.json()
    assert body["self"] == f"http://test/loads/{body['id']}"
    assert body["creation_date"] == "2024-01-01"
    assert "carrier" not in body


async def test_create_load_missing_attribute_is_400(client):
    res = await client.post("/loads", json={"volume": 5, "content": "wood"})
    assert res.status_code == 400


async def test_create_load_ignores_extra_fields(client):
    res = await client.post("/loads", json={**WOOD, "carrier": {"id": 1, "name": "x"}})
    assert res.status_code == 201
    assert "carrier" not in res.json()


async def test_get_unknown_load_is_404(client):
    res = await client.get("/loads/9999")
    assert res.status_code == 404
    assert res.json() == {"Error": "No load with this load_id exists"}


async def test_out_of_range_load_id_is_404(client):
    res = await client.get("/loads/99999999999999999999")
    assert res.status_code == 404
    assert res.json() == {"Error": "No load with this load_id exists"}


async def test_boat_id_does_not_resolve_as_load(client):
    boat = (await client.post("/boats", json=SKIFF)).json()
    res = await client.get(f"/loads/{boat['id']}")
    assert res.status_code == 404


async def test_delete_carried_load_updates_boat(client):
    boat = (await client.post("/boats", json=SKIFF)).json()
    load = (await client.post("/loads", json=WOOD)).json()
    await client.put(f"/boats/{boat['id']}/loads/{load['id']}")

    res = await client.delete(f"/loads/{load['id']}")
    assert res.status_code == 204

    assert (await client.get(f"/loads/{load['id']}")).status_code == 404
    assert (await client.get(f"/boats/{boat['id']}")).json()["loads"] == []


async def test_delete_unknown_load_is_404(client):
    res = await client.delete("/loads/9999")
    assert res.status_code == 404


async def test_list_loads_pages(client):
    for _ in range(4):
        await client.post("/loads", json=WOOD)
    body = (await client.get("/loads")).json()
    assert len(body["loads"]) == 3
    assert "next" in body
