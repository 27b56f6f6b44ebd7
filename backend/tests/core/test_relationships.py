"""Relationship Rules - pure transitions for assign, unassign and cascades.

Tests cover:
    - attach_load links both sides and rejects an already-carried load
    - detach_load unlinks both sides and rejects a load not on the boat
    - release_loads only clears carriers pointing at the given boat
    - order_by_refs restores the boat's list order
"""

import pytest

from harbor.core.errors import LoadAlreadyAssignedError, LoadNotOnBoatError
from harbor.core.records import Boat, Carrier, Load, LoadRef
from harbor.core.relationships import (
    attach_load, detach_load, missing_refs, order_by_refs, release_loads,
    without_load,
)


def _boat(*load_ids: int, boat_id: int = 1) -> Boat:
    return Boat(
        id=boat_id, name="Skiff", type="sail", length=20,
        loads=tuple(LoadRef(i) for i in load_ids),
    )


def _load(load_id: int, carrier: Carrier | None = None) -> Load:
    return Load(
        id=load_id, volume=5, content="wood",
        creation_date="2024-01-01", carrier=carrier,
    )


def test_attach_links_both_sides():
    boat, load = attach_load(_boat(7), _load(8))
    assert boat.loads == (LoadRef(7), LoadRef(8))
    assert load.carrier == Carrier(id=1, name="Skiff")


def test_attach_does_not_mutate_inputs():
    original_boat, original_load = _boat(), _load(8)
    attach_load(original_boat, original_load)
    assert original_boat.loads == ()
    assert original_load.carrier is None


def test_attach_rejects_carried_load():
    carried = _load(8, Carrier(id=2, name="Other"))
    with pytest.raises(LoadAlreadyAssignedError) as exc_info:
        attach_load(_boat(), carried)
    assert exc_info.value.http_status == 403


def test_attach_rejects_load_already_listed_on_boat():
    with pytest.raises(LoadAlreadyAssignedError):
        attach_load(_boat(8), _load(8))


def test_detach_unlinks_both_sides():
    boat, load = detach_load(_boat(7, 8, 9), _load(8, Carrier(1, "Skiff")))
    assert boat.loads == (LoadRef(7), LoadRef(9))
    assert load.carrier is None


def test_detach_rejects_load_not_on_boat():
    with pytest.raises(LoadNotOnBoatError):
        detach_load(_boat(7), _load(8))


def test_without_load_accepts_string_id():
    assert without_load(_boat(7, 8), "8").loads == (LoadRef(7),)


def test_release_only_clears_own_loads():
    mine = _load(7, Carrier(1, "Skiff"))
    elsewhere = _load(8, Carrier(2, "Other"))
    loose = _load(9)
    released = release_loads(_boat(7, 8, 9), [mine, elsewhere, loose])
    assert [load.id for load in released] == [7]
    assert released[0].carrier is None


def test_order_by_refs_follows_boat_list():
    loads = [_load(9), _load(7), _load(8)]
    ordered = order_by_refs(_boat(8, 7, 9).loads, loads)
    assert [load.id for load in ordered] == [8, 7, 9]


def test_order_by_refs_drops_unknown_ids():
    ordered = order_by_refs(_boat(8, 99).loads, [_load(8)])
    assert [load.id for load in ordered] == [8]
    assert missing_refs(_boat(8, 99).loads, [_load(8)]) == [99]
