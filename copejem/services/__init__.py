"""Service Layer: repositories and business rules over the storage boundary.

Invariants:
    - Services depend on RecordStore capabilities only, never on a concrete backend
    - Rule checks come from core/; services orchestrate the IO around them
"""
