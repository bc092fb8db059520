"""Services Layer — the user-management collaborator called by the HTTP layer.

Invariants:
    - Services depend on core protocols, never on a concrete repository

Design Decisions:
    - One service class per aggregate (User)
"""
