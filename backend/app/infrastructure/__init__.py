"""Infrastructure Layer - database access, repositories and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy exceptions are mapped to core DatabaseError before leaving this layer
"""
