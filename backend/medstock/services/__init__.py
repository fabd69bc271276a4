"""Services Layer — record handlers consumed by the operator shell.

Invariants:
    - Handlers take schema models in and return schema models out
    - Handlers split by intent: commands mutate, queries only read/refresh

Design Decisions:
    - Errors propagate as MedStockError; the shell renders to_response()
"""
