"""Single-pass discovery of node_modules directories.

The walk is depth-first and sequential. It never follows symlinks, never
descends into a target, and prunes system and hidden directories using
the rules in :mod:`node_cleaner.rules`.
"""

import logging
import os
import stat
from pathlib import Path

from node_cleaner.rules import is_target, should_prune
from node_cleaner.stats import ScanStatistics

logger = logging.getLogger(__name__)


class WalkError(Exception):
    """The root of a scan could not be read at all."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


def _list_subdirectories(path: Path, stats: ScanStatistics) -> list[Path]:
    """
    List the immediate subdirectories of a directory, sorted by name.

    Symlinks are not followed. Entries whose type cannot be determined are
    logged and counted as errors.

    Raises:
        OSError: If the directory itself cannot be listed
    """
    subdirectories = []
    with os.scandir(path) as entries:
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirectories.append(Path(entry.path))
            except OSError as e:
                logger.warning("Error accessing path %s: %s", entry.path, e)
                stats.add_error()

    subdirectories.sort(key=lambda p: p.name)
    return subdirectories


def walk(root: Path, stats: ScanStatistics) -> list[Path]:
    """
    Find every node_modules directory beneath root.

    Every directory touched is counted as scanned, including the root and
    the targets themselves. Targets are additionally counted as found.
    The root goes through the same rules as every other directory, so a
    root named like a skipped directory (".git", "dev", ...) yields nothing.

    Args:
        root: Directory to start from
        stats: Statistics to update while walking

    Returns:
        Target paths in discovery order

    Raises:
        WalkError: If root does not exist, is not a directory, or cannot be
            listed
    """
    root = Path(root)

    try:
        mode = root.stat().st_mode
    except OSError as e:
        raise WalkError(root, e.strerror or str(e)) from e

    if not stat.S_ISDIR(mode):
        raise WalkError(root, "not a directory")

    targets: list[Path] = []

    stats.add_scanned()
    if is_target(root.name):
        logger.info("Found node_modules: %s", root)
        stats.add_found()
        return [root]

    if should_prune(root.name):
        logger.info("Skipping %s, nothing to scan", root)
        return []

    try:
        stack = list(reversed(_list_subdirectories(root, stats)))
    except OSError as e:
        raise WalkError(root, e.strerror or str(e)) from e

    while stack:
        path = stack.pop()
        stats.add_scanned()

        if is_target(path.name):
            logger.info("Found node_modules: %s", path)
            stats.add_found()
            targets.append(path)
            continue

        if should_prune(path.name):
            logger.debug("Skipping %s", path)
            continue

        try:
            children = _list_subdirectories(path, stats)
        except OSError as e:
            # Unreadable or removed while walking
            logger.warning("Error accessing path %s: %s", path, e)
            stats.add_error()
            continue

        stack.extend(reversed(children))

    return targets
