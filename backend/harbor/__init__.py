"""Harbor - boats and loads REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
