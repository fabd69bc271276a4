"""Pydantic Schemas — input/output validation for the calling shell.

Invariants:
    - Schemas validate at the system boundary (operator input, displayed records)
    - Field capacities and status labels come from core/domain_types.py

Design Decisions:
    - Separate from core records: schemas are shell contracts, records are state
"""
