"""Infrastructure Layer — storage backends and cross-cutting concerns (logging).

Invariants:
    - Infrastructure implements core protocols; core never imports it back
"""
