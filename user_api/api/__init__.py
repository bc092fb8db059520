"""API Layer — FastAPI routes, request handlers, and the error translator.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response is a success payload or {"error", "status"}, never a mix

Design Decisions:
    - Thin routes delegate to handlers, handlers delegate to the user service
"""
