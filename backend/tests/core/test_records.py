"""Records - mapping between stored documents and Boat/Load.

Tests cover:
    - from_entity reads every field, tolerating absent loads/carrier
    - to_data writes every field back; cleared carrier is absent, not null
    - Stored string ids are normalized to ints
"""

from harbor.core.domain_types import EntityKey, EntityKind, StoredEntity
from harbor.core.records import Boat, Carrier, Load, LoadRef


def _boat_entity(**data) -> StoredEntity:
    base = {"name": "Skiff", "type": "sail", "length": 20}
    base.update(data)
    return StoredEntity(EntityKey(EntityKind.BOAT, 10), base)


def _load_entity(**data) -> StoredEntity:
    base = {"volume": 5, "content": "wood", "creation_date": "2024-01-01"}
    base.update(data)
    return StoredEntity(EntityKey(EntityKind.LOAD, 20), base)


def test_boat_without_loads_field_has_empty_loads():
    boat = Boat.from_entity(_boat_entity())
    assert boat.id == 10
    assert boat.loads == ()


def test_boat_loads_keep_order_and_normalize_ids():
    boat = Boat.from_entity(_boat_entity(loads=[{"id": 3}, {"id": "1"}, {"id": 2}]))
    assert boat.loads == (LoadRef(3), LoadRef(1), LoadRef(2))


def test_boat_to_data_writes_every_field():
    boat = Boat(id=10, name="Skiff", type="sail", length=20, loads=(LoadRef(4),))
    assert boat.to_data() == {
        "name": "Skiff", "type": "sail", "length": 20, "loads": [{"id": 4}],
    }


def test_boat_carries_matches_any_id_representation():
    boat = Boat.from_entity(_boat_entity(loads=[{"id": 4}]))
    assert boat.carries(4)
    assert boat.carries("4")
    assert not boat.carries(5)


def test_load_without_carrier():
    load = Load.from_entity(_load_entity())
    assert load.carrier is None
    assert "carrier" not in load.to_data()


def test_load_with_carrier_round_trips():
    load = Load.from_entity(_load_entity(carrier={"id": "10", "name": "Skiff"}))
    assert load.carrier == Carrier(id=10, name="Skiff")
    assert load.to_data()["carrier"] == {"id": 10, "name": "Skiff"}


def test_empty_carrier_counts_as_unassigned():
    assert Load.from_entity(_load_entity(carrier={})).carrier is None
    assert Load.from_entity(_load_entity(carrier=None)).carrier is None


def test_cleared_carrier_is_removed_from_document():
    load = Load.from_entity(_load_entity(carrier={"id": 10, "name": "Skiff"}))
    data = load.with_carrier(None).to_data()
    assert data == {"volume": 5, "content": "wood", "creation_date": "2024-01-01"}
