from __future__ import annotations

"""
Rendering of finalized scan results: JSON for UI callers, a Markdown report,
a plain console listing and a Rich table.
"""

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

from . import ui
from .models import FileRecord
from .scanner import ScanStats
from .size_utils import format_bytes_decimal


SEPARATOR = "-" * 39


def record_to_display(record: FileRecord) -> Dict[str, str]:
    return {
        "name": record.name,
        "size": format_bytes_decimal(record.size),
        "path": record.path,
    }


def to_json(records: Sequence[FileRecord], indent: Optional[int] = None) -> str:
    """Serialize records (already sorted) with human-readable sizes."""
    return json.dumps([record_to_display(r) for r in records], indent=indent)


def dumps(data: Dict[str, Any], indent: Optional[int] = 2) -> str:
    """Serialize a structured report from build_report()."""
    return json.dumps(data, indent=indent)


def summarize_total_size(records: Sequence[FileRecord]) -> int:
    return sum(r.size for r in records)


def build_report(
    records: Sequence[FileRecord],
    stats: ScanStats,
    root: str,
) -> Tuple[Dict[str, Any], str]:
    """
    Build a structured JSON object and a Markdown summary.
    """
    total = summarize_total_size(records)
    data: Dict[str, Any] = {
        "root": root,
        "items": [dict(r.to_dict(), size_human=format_bytes_decimal(r.size)) for r in records],
        "count": len(records),
        "total_bytes": total,
        "total_human": format_bytes_decimal(total),
        "files_seen": stats.files_seen,
        "dirs_seen": stats.dirs_seen,
        "issues": [{"kind": i.kind, "path": i.path, "reason": i.reason} for i in stats.issues],
        "elapsed_sec": round(stats.elapsed, 3),
    }

    lines: List[str] = [
        "# Largest Files",
        "",
        f"Root: `{root}`",
        "",
    ]
    if records:
        for i, r in enumerate(records, start=1):
            lines.append(f"{i}. {format_bytes_decimal(r.size)}  {r.path}")
    else:
        lines.append("_No files found._")
    lines.append("")
    lines.append(f"Total: {data['total_human']} across {len(records)} files")
    lines.append(f"Scanned {stats.files_seen} files in {stats.dirs_seen} directories")
    if stats.issues:
        lines.append("")
        lines.append("## Skipped")
        for issue in stats.issues:
            lines.append(f"- {issue.kind}: {issue.path} ({issue.reason})")

    md = "\n".join(lines)
    return data, md


def format_listing(records: Sequence[FileRecord]) -> str:
    out: List[str] = []
    for i, r in enumerate(records, start=1):
        out.append(f"File Number: {i}")
        out.append(f"File Name: {r.name}")
        out.append(f"File Path: {r.path}")
        out.append(f"File size: {format_bytes_decimal(r.size)}")
        out.append(SEPARATOR)
    return "\n".join(out)


def print_table(records: Sequence[FileRecord], title: Optional[str] = None) -> None:
    rows = [[i, format_bytes_decimal(r.size), r.name, r.path] for i, r in enumerate(records, start=1)]
    ui.print_table(["#", "Size", "Name", "Path"], rows, title=title, right_align=("#", "Size"))
