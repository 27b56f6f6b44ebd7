"""Relationship Rules - pure state transitions for the boat/load association.

Invariants:
    - A load's carrier is set iff its id appears in exactly one boat's loads list
    - attach_load rejects a load that already has a carrier
    - detach_load and without_load reject a load the boat does not list
    - Every function returns new records; inputs are never mutated

Design Decisions:
    - Rules live in core as plain functions; the shell only fetches and persists
    - Id matching goes through same_id so stored and routed ids compare as ints
"""

from collections.abc import Iterable, Sequence

from harbor.core.domain_types import same_id
from harbor.core.errors import LoadAlreadyAssignedError, LoadNotOnBoatError
from harbor.core.records import Boat, Carrier, Load, LoadRef


def attach_load(boat: Boat, load: Load) -> tuple[Boat, Load]:
    """Append load to boat and point the load's carrier at the boat."""
    if load.carrier is not None or boat.carries(load.id):
        raise LoadAlreadyAssignedError(load.id)
    return (
        boat.with_loads(boat.loads + (LoadRef(load.id),)),
        load.with_carrier(Carrier(id=boat.id, name=boat.name)),
    )


def detach_load(boat: Boat, load: Load) -> tuple[Boat, Load]:
    """Remove load from boat and clear its carrier entirely."""
    return without_load(boat, load.id), load.with_carrier(None)


def without_load(boat: Boat, load_id: int) -> Boat:
    """Boat with every entry for load_id removed."""
    kept = tuple(ref for ref in boat.loads if not same_id(ref.id, load_id))
    if len(kept) == len(boat.loads):
        raise LoadNotOnBoatError(boat.id, load_id)
    return boat.with_loads(kept)


def release_loads(boat: Boat, loads: Iterable[Load]) -> list[Load]:
    """Loads carried by boat, with their carrier cleared.

    Loads whose carrier points at another boat (or nowhere) are left out:
    they are not this boat's to release.
    """
    return [
        load.with_carrier(None)
        for load in loads
        if load.carrier is not None and same_id(load.carrier.id, boat.id)
    ]


def order_by_refs(refs: Sequence[LoadRef], loads: Iterable[Load]) -> list[Load]:
    """Arrange loads in the order the boat lists them; unknown ids drop out."""
    by_id = {load.id: load for load in loads}
    return [by_id[ref.id] for ref in refs if ref.id in by_id]


def missing_refs(refs: Sequence[LoadRef], loads: Iterable[Load]) -> list[int]:
    """Ids listed on a boat that did not resolve to a load."""
    found = {load.id for load in loads}
    return [ref.id for ref in refs if ref.id not in found]
