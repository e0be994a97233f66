"""Schemas: pydantic record models and HTTP request bodies.

Invariants:
    - Records are frozen; a write always produces a new record value
    - Python names are snake_case, serialized aliases are camelCase
"""
