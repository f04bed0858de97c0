"""Infrastructure Layer — database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core validation logic
    - All SQLAlchemy failures mapped to DatabaseError
"""
