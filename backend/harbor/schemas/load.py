"""Load Schemas - request body for load creation.

Invariants:
    - volume, content and creation_date are all required; a missing one is a 400
    - creation_date is kept as the client sent it (opaque string)
"""

from pydantic import BaseModel


class LoadCreate(BaseModel):
    """POST /loads body."""
    volume: int | float
    content: str
    creation_date: str
