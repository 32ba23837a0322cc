"""Infrastructure Layer: database engine/session management and observability.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures mapped to DatabaseError before leaving this layer
"""
