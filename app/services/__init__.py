"""Services Layer: business rules between routes and repositories.

Invariants:
    - Services depend on repository Protocols, never on AsyncSession directly
    - Every task operation on an existing row goes through check_task_access

Design Decisions:
    - One service per entity; routes receive them through FastAPI dependencies
"""
