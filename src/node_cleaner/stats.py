"""Thread-safe scan statistics."""

import threading


class ScanStatistics:
    """Counters shared between the walker and the deletion workers.

    Every mutation and every read goes through a single lock, so a snapshot
    always reflects one consistent moment of the scan.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._scanned = 0
        self._found = 0
        self._deleted = 0
        self._errors = 0
        self._bytes_freed = 0

    def add_scanned(self) -> None:
        with self._lock:
            self._scanned += 1

    def add_found(self) -> None:
        with self._lock:
            self._found += 1

    def add_deleted(self) -> None:
        with self._lock:
            self._deleted += 1

    def add_error(self) -> None:
        with self._lock:
            self._errors += 1

    def add_bytes_freed(self, size_bytes: int) -> None:
        """Record bytes reclaimed by a successful deletion."""
        if size_bytes <= 0:
            return
        with self._lock:
            self._bytes_freed += size_bytes

    def counts(self) -> tuple[int, int, int, int]:
        """Return (scanned, found, deleted, errors)."""
        with self._lock:
            return self._scanned, self._found, self._deleted, self._errors

    def snapshot(self) -> dict[str, int]:
        """Return all counters, including bytes freed, read under one lock."""
        with self._lock:
            return {
                "scanned": self._scanned,
                "found": self._found,
                "deleted": self._deleted,
                "errors": self._errors,
                "bytes_freed": self._bytes_freed,
            }

    def __repr__(self) -> str:
        scanned, found, deleted, errors = self.counts()
        return (
            f"ScanStatistics(scanned={scanned}, found={found}, "
            f"deleted={deleted}, errors={errors})"
        )
