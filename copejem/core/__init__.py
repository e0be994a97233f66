"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - Functions are pure and deterministic; the current time is always passed in

Design Decisions:
    - Functional core separated from the storage shell; record shapes come from schemas/
"""
