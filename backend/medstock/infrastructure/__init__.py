"""Infrastructure Layer — storage adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; it never holds domain rules
    - OS-level failures are mapped to core/errors.py types before leaving

Design Decisions:
    - One adapter per concern (file storage, logging)
"""
