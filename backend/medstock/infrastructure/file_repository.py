"""File Record Repository — flat-file RecordRepository with full-rewrite saves.

Invariants:
    - One record line per file line, each terminated by "\\n", no header
    - save_lines truncates and rewrites the whole file (last writer wins)
    - A missing file reads as empty storage, not as an error
    - load_lines returns the lines before the first undecodable one
    - OSError is mapped to PersistenceReadError / PersistenceWriteError

Design Decisions:
    - No temp-file swap or locking: single exclusive accessor; a crash
      mid-rewrite can leave a truncated file, which load() tolerates by
      keeping the well-formed prefix
    - Bytes are decoded line by line: a character cut in half at the tail
      drops that line and everything after it, like a malformed record
    - newline="" on write: line terminators pass through untranslated
"""

import logging
from pathlib import Path
from typing import Iterable

from medstock.core.errors import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)


class FileRecordRepository:
    """Persists encoded record lines to a single text file."""

    def __init__(self, path: Path | str, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def load_lines(self) -> list[str]:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            logger.info(
                f"Store file {self.path} not found, starting empty",
                extra={"operation": "read", "path": str(self.path)},
            )
            return []
        except OSError as e:
            logger.error(
                f"Store file read error: {e}",
                extra={"operation": "read", "path": str(self.path)},
            )
            raise PersistenceReadError(str(e)) from e

        lines: list[str] = []
        for line_number, raw in enumerate(data.splitlines(keepends=True), start=1):
            try:
                lines.append(raw.decode(self.encoding))
            except UnicodeDecodeError as e:
                logger.warning(
                    f"Stopping read at line {line_number}: {e.reason}",
                    extra={
                        "operation": "read", "path": str(self.path),
                        "line_number": line_number, "record_count": len(lines),
                        "raw": repr(raw),
                    },
                )
                break
        return lines

    def save_lines(self, lines: Iterable[str]) -> None:
        try:
            with self.path.open("w", encoding=self.encoding, newline="") as fp:
                for line in lines:
                    fp.write(line + "\n")
        except OSError as e:
            logger.error(
                f"Store file write error: {e}",
                extra={"operation": "write", "path": str(self.path)},
            )
            raise PersistenceWriteError(str(e)) from e
