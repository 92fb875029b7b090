from __future__ import annotations

"""
Directory traversal feeding a TopKSelector.

scan() walks a tree depth-first with an explicit work stack and offers every
non-directory entry to the selector. Only the root is fatal: a root that cannot
be opened raises RootUnreadableError. Unreadable subdirectories and entries are
recorded as ScanIssue items, logged, and skipped.
"""

import logging
import os
import time
from dataclasses import dataclass, field
from typing import List, Union

from .models import FileRecord
from .selector import TopKSelector


logger = logging.getLogger(__name__)

ISSUE_SUBTREE = "subtree"
ISSUE_ENTRY = "entry"

PathLike = Union[str, "os.PathLike[str]"]


class ScanError(Exception):
    """Base class for scan failures that stop a run."""


class RootUnreadableError(ScanError):
    def __init__(self, root: str, reason: str):
        super().__init__(f"Cannot read directory {root}: {reason}")
        self.root = root
        self.reason = reason


@dataclass(frozen=True)
class ScanIssue:
    kind: str
    path: str
    reason: str


@dataclass
class ScanStats:
    files_seen: int = 0
    dirs_seen: int = 0
    files_filtered: int = 0
    issues: List[ScanIssue] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def skipped_dirs(self) -> int:
        return sum(1 for i in self.issues if i.kind == ISSUE_SUBTREE)

    @property
    def skipped_entries(self) -> int:
        return sum(1 for i in self.issues if i.kind == ISSUE_ENTRY)


def _describe(exc: OSError) -> str:
    return exc.strerror or type(exc).__name__


def _read_dir(path: str) -> List[os.DirEntry]:
    with os.scandir(path) as it:
        return list(it)


def _record_issue(stats: ScanStats, kind: str, path: str, exc: OSError) -> None:
    issue = ScanIssue(kind=kind, path=path, reason=_describe(exc))
    stats.issues.append(issue)
    if kind == ISSUE_SUBTREE:
        logger.warning("Error analyzing directory %s: %s", path, issue.reason)
    else:
        logger.warning("Skipping unreadable entry %s: %s", path, issue.reason)


def scan(root: PathLike, selector: TopKSelector, *, min_size: int = 0) -> ScanStats:
    """
    Walk `root` and offer every file to `selector`.

    Files smaller than `min_size` bytes are counted but not offered.
    Raises RootUnreadableError if `root` itself cannot be listed.
    """
    root_path = os.path.abspath(os.fspath(root))
    stats = ScanStats()
    start = time.perf_counter()
    logger.debug("scan: root=%s capacity=%s min=%s", root_path, selector.capacity, min_size)

    stack: List[str] = [root_path]
    while stack:
        path = stack.pop()
        try:
            entries = _read_dir(path)
        except OSError as e:
            if not stats.dirs_seen:
                raise RootUnreadableError(root_path, _describe(e)) from e
            _record_issue(stats, ISSUE_SUBTREE, path, e)
            continue
        stats.dirs_seen += 1

        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError as e:
                _record_issue(stats, ISSUE_ENTRY, entry.path, e)
                continue

            if is_dir:
                stack.append(entry.path)
                continue

            try:
                size = entry.stat().st_size
            except OSError as e:
                _record_issue(stats, ISSUE_ENTRY, entry.path, e)
                continue

            stats.files_seen += 1
            if size < min_size:
                stats.files_filtered += 1
                continue
            selector.offer(FileRecord(name=entry.name, size=size, path=entry.path))

    stats.elapsed = time.perf_counter() - start
    logger.debug(
        "scan: done files=%d dirs=%d issues=%d in %.3fs",
        stats.files_seen, stats.dirs_seen, len(stats.issues), stats.elapsed,
    )
    return stats
