"""Infrastructure Layer: storage backends, database sessions, logging setup.

Invariants:
    - Everything here does IO; nothing here holds business rules
"""
