"""Append-only ledger file store."""

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ledgerline.domain.models import Record
from ledgerline.domain.records import format_record_line, parse_record_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading the ledger file.

    Attributes:
        loaded: Number of records now held in memory.
        skipped: Lines ignored because they did not have five fields.
        created: True if the file was missing and an empty one was created.
        error: Reason the load was aborted, or None on success.
    """

    loaded: int = 0
    skipped: int = 0
    created: bool = False
    error: str | None = None


class LedgerStore:
    """Ordered, append-only collection of records backed by a pipe-delimited file.

    Records are kept in file order (oldest first). The file is opened and
    closed for every operation; no handle is held between calls.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._records: list[Record] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    @property
    def records(self) -> tuple[Record, ...]:
        """Snapshot of all records in insertion order."""
        return tuple(self._records)

    def load(self) -> LoadResult:
        """Read every record from the backing file.

        A missing file is created empty. Lines without exactly five fields are
        skipped. Any other unparseable line aborts the load and leaves the
        in-memory records untouched.

        Returns:
            LoadResult describing what happened.
        """
        if not self.path.exists():
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
            except OSError as e:
                logger.warning("Could not create ledger file %s: %s", self.path, e)
                return LoadResult(error=f"Could not create {self.path}: {e}")
            self._records = []
            logger.info("Created empty ledger file at %s", self.path)
            return LoadResult(created=True)

        records: list[Record] = []
        skipped = 0

        try:
            with open(self.path, encoding="utf-8") as f:
                for line_number, line in enumerate(f, 1):
                    if not line.strip():
                        continue
                    try:
                        record = parse_record_line(line)
                    except ValueError as e:
                        logger.warning("Aborting load of %s at line %d: %s", self.path, line_number, e)
                        return LoadResult(error=f"Line {line_number}: {e}")
                    if record is None:
                        logger.debug("Skipping line %d of %s: wrong number of fields", line_number, self.path)
                        skipped += 1
                        continue
                    records.append(record)
        except UnicodeDecodeError as e:
            logger.warning("Ledger file %s is not valid UTF-8: %s", self.path, e)
            return LoadResult(error=f"Could not decode {self.path}: {e}")
        except OSError as e:
            logger.warning("Could not read ledger file %s: %s", self.path, e)
            return LoadResult(error=f"Could not read {self.path}: {e}")

        self._records = records
        logger.info("Loaded %d records from %s (%d skipped)", len(records), self.path, skipped)
        return LoadResult(loaded=len(records), skipped=skipped)

    def _ends_mid_line(self) -> bool:
        """Whether the file is non-empty and its last line has no terminator."""
        if not self.path.exists():
            return False

        with open(self.path, "rb") as f:
            f.seek(0, os.SEEK_END)
            if f.tell() == 0:
                return False
            f.seek(-1, os.SEEK_END)
            return f.read(1) != b"\n"

    def append(self, record: Record) -> str | None:
        """Write a record to the end of the file, then keep it in memory.

        Args:
            record: Record to persist.

        Returns:
            Error message if the write failed (memory is unchanged), otherwise None.
        """
        line = format_record_line(record)

        try:
            prefix = "\n" if self._ends_mid_line() else ""
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(prefix + line + "\n")
        except OSError as e:
            logger.warning("Could not append to %s: %s", self.path, e)
            return f"Could not write to {self.path}: {e}"

        self._records.append(record)
        logger.debug("Appended record: %s", line)
        return None
