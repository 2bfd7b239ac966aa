"""Services Layer - orchestrates storage around the pure player core.

Invariants:
    - Services own IO ordering; every rule they apply lives in core/
    - Core results (FieldViolation, None ids) become typed PlayerRegistryError subclasses here
"""
