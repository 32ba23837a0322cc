"""API Layer: FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All JSON endpoints answer with the {success, data|error} envelope

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
