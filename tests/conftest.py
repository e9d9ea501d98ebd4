from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and project layouts.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def write_files(root: Path, files: Dict[str, str]) -> Path:
    """Create every relative path in files under root with the given content."""
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


PAGES_FIXTURE: Iterable[str] = (
    "index.tsx",
    "about.tsx",
    "contact.tsx",
    "blog/index.tsx",
    "blog/[slug].tsx",
    "products/[...categories].tsx",
    "docs/[[...path]].tsx",
    "api/users/index.ts",
    "api/posts/[id].ts",
)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the structure defined in 'routescope.domain.config'.
    """
    return {
        # Target
        "path": "/tmp/test_project",

        # Enumeration
        "extensions": [".js", ".jsx", ".ts", ".tsx"],
        "ignore_patterns": [],
        "respect_gitignore": True,

        # Dev servers
        "nextjs_port": 3000,
        "react_port": 5173,

        # Output
        "pretty": False,
    }


@pytest.fixture
def pages_project(tmp_path: Path) -> Path:
    """
    Next.js project with the nine-route pages fixture plus bootstrap files.

    Structure:
    /project
      /pages
        _app.tsx, _document.tsx, index.tsx, about.tsx, ...
    """
    root = tmp_path / "project"
    files = {f"pages/{rel}": "export default function Page() { return null }\n" for rel in PAGES_FIXTURE}
    files["pages/_app.tsx"] = "export default function App() { return null }\n"
    files["pages/_document.tsx"] = "export default function Document() { return null }\n"
    return write_files(root, files)


@pytest.fixture
def write_tree():
    """Expose write_files to tests as a fixture."""
    return write_files
