"""Scan orchestration: discover targets, then delete them in parallel."""

import logging
import threading
import time
from datetime import datetime
from typing import Optional

from node_cleaner.dispatcher import dispatch
from node_cleaner.models import ScanConfiguration, ScanSummary
from node_cleaner.stats import ScanStatistics
from node_cleaner.walker import walk

logger = logging.getLogger(__name__)


def run_scan(
    config: ScanConfiguration,
    cancel_event: Optional[threading.Event] = None,
    stats: Optional[ScanStatistics] = None,
) -> ScanSummary:
    """
    Find and delete every node_modules directory beneath the configured root.

    The walk finishes before any deletion starts, so the tree is never
    modified while it is being enumerated.

    Args:
        config: Validated scan configuration
        cancel_event: Optional event that stops deletions not yet started
        stats: Statistics to update; a fresh instance is used if omitted

    Returns:
        Final counts for the run

    Raises:
        WalkError: If the root directory cannot be read
    """
    stats = stats if stats is not None else ScanStatistics()
    started_at = datetime.now()
    start = time.monotonic()

    logger.info("Starting directory scan: %s", config.root_path)
    logger.info("Workers: %d", config.workers)
    if config.dry_run:
        logger.info("DRY RUN mode - no actual deletion")

    targets = walk(config.root_path, stats)
    dispatch(targets, config.workers, config.dry_run, stats, cancel_event)

    duration = time.monotonic() - start
    summary = ScanSummary(
        root_path=config.root_path,
        dry_run=config.dry_run,
        started_at=started_at,
        duration_seconds=duration,
        **stats.snapshot(),
    )

    logger.info("Completed!")
    logger.info(
        "Scanned %d directories, found %d node_modules, deleted %d, errors %d in %.2fs",
        summary.scanned,
        summary.found,
        summary.deleted,
        summary.errors,
        summary.duration_seconds,
    )
    return summary
