from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict

import pytest

# Ensure the largest_files package is importable when running tests from a checkout
_PROJECT_DIR = Path(__file__).resolve().parents[1]
if str(_PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(_PROJECT_DIR))


@pytest.fixture
def make_tree(tmp_path):
    """Create files of given sizes under tmp_path: {"a/b.bin": 10, ...}."""

    def _make(layout: Dict[str, int], root: Path = tmp_path) -> Path:
        for rel, size in layout.items():
            p = root / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_bytes(b"x" * size)
        return root

    return _make
