"""Core Layer - pure player domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
    - Core returns structured results (FieldViolation | None, int | None); it never raises
"""
