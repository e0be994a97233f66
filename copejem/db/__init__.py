"""Database Infrastructure: SQLAlchemy declarative base for the remote backend.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)
"""
