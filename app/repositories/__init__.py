"""Repository Layer: SQLAlchemy implementations of core/repository_protocols.

Invariants:
    - No business logic: no ownership checks, no defaults, no uniqueness rules
    - Every write is a single-row statement followed by commit

Design Decisions:
    - One repository per entity, constructed per request around the request's AsyncSession
"""
