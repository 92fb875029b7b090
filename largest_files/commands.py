from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import load_settings
from .models import FileRecord
from .report import to_json
from .scanner import PathLike, ScanStats, scan
from .selector import TopKSelector


logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    records: List[FileRecord]
    stats: ScanStats

    @property
    def largest(self):
        """The single largest file, or None for an empty tree."""
        return self.records[0] if self.records else None


def find_largest_files(root: PathLike, count: int, *, min_size: int = 0) -> ScanResult:
    """
    Scan `root` and return the `count` largest files, biggest first.

    Raises RootUnreadableError if `root` cannot be listed and ValueError for count < 1.
    """
    selector = TopKSelector(count)
    stats = scan(root, selector, min_size=min_size)
    return ScanResult(records=selector.finalize(), stats=stats)


def analyze_dir(name: str, count: Optional[int] = None) -> str:
    """
    GUI command: JSON array of the largest files under `name`.

    Without `count`, the configured `gui_count` (20 by default) is used.
    """
    if count is None:
        count = load_settings().gui_count
    result = find_largest_files(name, count)
    logger.info("Time elapsed: %.3fs", result.stats.elapsed)
    if result.largest is None:
        logger.info("No files found under %s", name)
    else:
        logger.info("Largest file under %s: %s (%d bytes)", name, result.largest.path, result.largest.size)
    return to_json(result.records)
