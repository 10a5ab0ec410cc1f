"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Schemas convert to and from core domain types; routes never touch ORM models

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
