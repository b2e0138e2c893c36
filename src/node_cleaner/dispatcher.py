"""Parallel deletion of discovered node_modules directories."""

import logging
import os
import shutil
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional

from node_cleaner.stats import ScanStatistics

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024


def get_directory_size(path: Path) -> int:
    """
    Calculate the total size of the files beneath a directory.

    Uses os.scandir without following symlinks. Unlike a best-effort
    estimate, any unreadable entry aborts the calculation.

    Returns:
        Total size in bytes

    Raises:
        OSError: If any directory or entry in the tree cannot be read
    """
    total_size = 0
    stack = [path]

    while stack:
        current = stack.pop()
        with os.scandir(current) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    stack.append(Path(entry.path))
                else:
                    total_size += entry.stat(follow_symlinks=False).st_size

    return total_size


def effective_worker_count(workers: int, target_count: int) -> int:
    """Never start more workers than there are targets."""
    return min(workers, target_count)


def delete_target(
    path: Path,
    stats: ScanStatistics,
    dry_run: bool = False,
    cancel_event: Optional[threading.Event] = None,
) -> bool:
    """
    Delete a single node_modules directory tree.

    Size calculation is best-effort: failing to compute it is logged and
    deletion goes ahead. Deletion failures are logged and counted, never
    raised.

    Args:
        path: Target directory
        stats: Statistics to update
        dry_run: If True, only log what would be deleted
        cancel_event: If set before this target starts, it is skipped

    Returns:
        True if the target was deleted (or would be, in dry run)
    """
    worker = threading.current_thread().name

    if cancel_event is not None and cancel_event.is_set():
        logger.debug("%s - Cancelled, skipping: %s", worker, path)
        return False

    logger.info("%s - Processing: %s", worker, path)

    if dry_run:
        logger.info("DRY RUN - Would delete: %s", path)
        stats.add_deleted()
        return True

    size = 0
    try:
        size = get_directory_size(path)
    except OSError as e:
        logger.warning("%s - Cannot calculate size of %s: %s", worker, path, e)
    else:
        logger.info("%s - Size: %.2f MB for %s", worker, size / BYTES_PER_MB, path)

    try:
        shutil.rmtree(path)
    except OSError as e:
        logger.error("%s - Error deleting %s: %s", worker, path, e)
        stats.add_error()
        return False

    logger.info("%s - Successfully deleted: %s", worker, path)
    stats.add_deleted()
    stats.add_bytes_freed(size)
    return True


def dispatch(
    targets: list[Path],
    workers: int,
    dry_run: bool,
    stats: ScanStatistics,
    cancel_event: Optional[threading.Event] = None,
) -> None:
    """
    Delete all targets using a bounded pool of worker threads.

    Workers pull targets from the executor's shared queue, so one slow
    deletion never holds up the rest. Returns only once every target has
    been attempted (or skipped after cancellation).

    Args:
        targets: Paths found by the walker
        workers: Maximum number of concurrent deletions
        dry_run: If True, nothing is removed from disk
        stats: Statistics to update
        cancel_event: Optional event that stops targets not yet started
    """
    if not targets:
        return

    worker_count = effective_worker_count(workers, len(targets))
    logger.debug("Starting %d deletion workers for %d targets", worker_count, len(targets))

    with ThreadPoolExecutor(
        max_workers=worker_count, thread_name_prefix="Worker"
    ) as executor:
        futures = [
            executor.submit(delete_target, target, stats, dry_run, cancel_event)
            for target in targets
        ]
        try:
            for future in as_completed(futures):
                # Surface unexpected (non-filesystem) errors from workers
                future.result()
        except KeyboardInterrupt:
            logger.warning("Interrupted, waiting for running deletions to finish")
            for future in futures:
                future.cancel()
            raise
