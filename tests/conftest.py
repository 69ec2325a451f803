from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   installation.
2. Provides shared scan configurations and a sample project tree.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from foldersnap.domain.config import ScanConfig  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def default_config() -> ScanConfig:
    """Unfiltered configuration with the default sentinel."""
    return ScanConfig()


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small project tree.

    Structure:
    /project
      /src
        app.ts
        util.js
        /nested
          deep.txt
      /node_modules
        /lib
          index.js
      /docs
        guide.md
      secret.txt
      README
    """
    root = tmp_path / "project"
    (root / "src" / "nested").mkdir(parents=True)
    (root / "node_modules" / "lib").mkdir(parents=True)
    (root / "docs").mkdir()

    (root / "src" / "app.ts").write_text("// hi\nconst x = 1;\n", encoding="utf-8")
    (root / "src" / "util.js").write_text(
        "/* helper\n * module */\nfunction add(a, b) {\n    return a + b; // sum\n}\n",
        encoding="utf-8",
    )
    (root / "src" / "nested" / "deep.txt").write_text("deep  text\n", encoding="utf-8")
    (root / "node_modules" / "lib" / "index.js").write_text("module.exports = 1;", encoding="utf-8")
    (root / "docs" / "guide.md").write_text("# Guide\n", encoding="utf-8")
    (root / "secret.txt").write_text("hunter2", encoding="utf-8")
    (root / "README").write_text("Read me", encoding="utf-8")
    return root
