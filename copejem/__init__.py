"""COPEJEM Association Manager: companies, members and projects.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
