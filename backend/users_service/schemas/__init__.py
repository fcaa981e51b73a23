"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)

Design Decisions:
    - Separate from core: schemas are API contracts, core holds the domain model
"""
