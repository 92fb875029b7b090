from .models import FileRecord
from .selector import TopKSelector
from .scanner import (
    ISSUE_ENTRY,
    ISSUE_SUBTREE,
    RootUnreadableError,
    ScanError,
    ScanIssue,
    ScanStats,
    scan,
)
from .size_utils import format_bytes_decimal, parse_size_to_bytes
from .report import build_report, format_listing, to_json
from .commands import ScanResult, analyze_dir, find_largest_files

__all__ = [
    "FileRecord",
    "TopKSelector",
    "ISSUE_ENTRY",
    "ISSUE_SUBTREE",
    "RootUnreadableError",
    "ScanError",
    "ScanIssue",
    "ScanStats",
    "scan",
    "format_bytes_decimal",
    "parse_size_to_bytes",
    "build_report",
    "format_listing",
    "to_json",
    "ScanResult",
    "analyze_dir",
    "find_largest_files",
]
