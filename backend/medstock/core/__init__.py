"""Core Layer — record model, status rules, codec and the ordered store.

Invariants:
    - No module in core/ imports from infrastructure/, schemas/ or config
    - Persistence reaches the store only through RecordRepository (injected)

Design Decisions:
    - Functional core separated from imperative shell: status, comparison and
      codec are pure functions; RecordStore is the single owner of state
"""
