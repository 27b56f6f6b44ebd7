"""Boat Schemas - request body for boat creation.

Invariants:
    - name, type and length are all required; a missing one is a 400
    - Unknown top-level fields are ignored, not stored
"""

from pydantic import BaseModel


class BoatCreate(BaseModel):
    """POST /boats body."""
    name: str
    type: str
    length: int | float
