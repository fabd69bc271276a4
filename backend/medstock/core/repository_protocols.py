"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - All IO reaches the store through RecordRepository
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, an in-memory test double needs
      no inheritance
    - Synchronous: single exclusive accessor, no suspension points
    - Line-level contract: the repository frames lines, the codec owns fields
"""

from typing import Iterable, Protocol


class RecordRepository(Protocol):
    """Contract for record persistence, implemented by the shell."""

    def load_lines(self) -> list[str]:
        """Return every persisted line in storage order ([] if nothing stored)."""
        ...

    def save_lines(self, lines: Iterable[str]) -> None:
        """Replace all persisted content with lines (full rewrite)."""
        ...
