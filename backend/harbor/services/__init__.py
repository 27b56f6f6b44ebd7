"""Services Layer - async orchestration of store calls around the pure core.

Invariants:
    - Services receive their store and projector through the constructor
    - Relationship rules are delegated to core/relationships.py
"""
