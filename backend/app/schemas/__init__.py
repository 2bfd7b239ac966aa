"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and types at the system boundary (unknown enum values,
      wrong JSON types); business rules live in core/validate_player.py
    - Domain enums from core/ used for enum fields
"""
