from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class FileRecord:
    """One regular file discovered during a scan."""

    name: str
    size: int
    path: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "path": self.path, "size_bytes": self.size}
