"""Pydantic Schemas - request validation at the API boundary.

Design Decisions:
    - Separate from core records: schemas are API contracts, records are domain data
"""
