"""User API Package — REST interface over the user directory.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
