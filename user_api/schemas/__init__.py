"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas live at the system boundary (user input, API responses)
    - Domain types from core/ are converted here, never serialized directly

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
