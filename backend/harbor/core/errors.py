"""Error Hierarchy - typed exceptions for every Harbor failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status (int)
    - to_response() produces the wire envelope {"Error": <message>}
    - Store-layer faults never leak driver details to the client

Design Decisions:
    - Single hierarchy with HarborError base: one FastAPI handler catches all
    - Relationship rule violations answer 403, matching the public API contract
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"


class HarborError(Exception):
    """Base exception for all Harbor errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"Error": self.message}


# ─── Request Errors (400) ────────────────────────────────────────

MISSING_ATTRIBUTES_MESSAGE = (
    "The request object is missing at least one of the required attributes"
)


class RequestDataError(HarborError):
    """Request body is malformed or incomplete."""
    def __init__(self, message: str = MISSING_ATTRIBUTES_MESSAGE):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )


class InvalidCursorError(HarborError):
    """Pagination cursor could not be decoded for the requested kind."""
    def __init__(self, cursor: str):
        super().__init__(
            "The cursor is not valid for this collection",
            "INVALID_CURSOR", ErrorCategory.VALIDATION, 400,
        )
        self.cursor = cursor


# ─── Resolution Errors (404) ─────────────────────────────────────

class ResourceNotFoundError(HarborError):
    """Requested boat or load does not exist."""
    def __init__(self, resource_type: str, resource_id: object):
        noun = resource_type.lower()
        super().__init__(
            f"No {noun} with this {noun}_id exists",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Relationship Errors (403) ───────────────────────────────────

class RelationshipConflictError(HarborError):
    """A boat/load relationship rule was violated."""
    def __init__(self, message: str, code: str):
        super().__init__(message, code, ErrorCategory.CONFLICT, 403)


class LoadAlreadyAssignedError(RelationshipConflictError):
    """Load already has a carrier."""
    def __init__(self, load_id: int):
        super().__init__(
            "A load is already assigned to another boat", "LOAD_ALREADY_ASSIGNED",
        )
        self.load_id = load_id


class LoadNotOnBoatError(RelationshipConflictError):
    """Load is not in the boat's load list."""
    def __init__(self, boat_id: int, load_id: int):
        super().__init__("The load is not in the boat", "LOAD_NOT_ON_BOAT")
        self.boat_id = boat_id
        self.load_id = load_id


# ─── Infrastructure Errors (500) ─────────────────────────────────

class DatabaseError(HarborError):
    """Store operation failed."""
    def __init__(self, operation: str):
        super().__init__(
            "The data store could not complete the request",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 500,
        )
        self.operation = operation
