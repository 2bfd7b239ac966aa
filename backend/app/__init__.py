"""Player Registry Application Package - CRUD service for game player records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
