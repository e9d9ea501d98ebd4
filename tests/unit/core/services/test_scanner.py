from __future__ import annotations

"""
Unit tests for the File Discovery Service.

Verifies extension filtering, pruning of excluded directories and the
aggregation of built-in, user and .gitignore rules.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from routescope.core.services.scanner import prepare_exclusion_rules, scan_directory
from routescope.domain.errors import DirectoryNotFoundError, PathNotADirectoryError

EXTS = [".js", ".jsx", ".ts", ".tsx"]


@pytest.fixture
def mock_fs_structure(write_tree, tmp_path: Path) -> Path:
    """Create a temporary project layout for scanning tests."""
    root = tmp_path / "project"
    return write_tree(root, {
        "src/App.tsx": "export default App",
        "src/main.jsx": "render()",
        "src/styles.css": "body {}",
        "src/App.test.tsx": "test()",
        "README.md": "# Project",
        "node_modules/lib/index.js": "module.exports = 1",
        ".next/server/page.js": "compiled",
        "dist/bundle.js": "bundled",
        ".gitignore": "dist/\n*.test.tsx\n",
    })


def _rel(root: Path, files):
    return [os.path.relpath(f, root).replace(os.sep, "/") for f in files]


def test_scan_filters_extensions_and_defaults(mock_fs_structure: Path) -> None:
    """Only source files outside excluded trees are returned, sorted."""
    files = scan_directory(str(mock_fs_structure), EXTS)

    assert _rel(mock_fs_structure, files) == ["src/App.tsx", "src/main.jsx"]
    assert all(os.path.isabs(f) for f in files)


def test_scan_without_gitignore(mock_fs_structure: Path) -> None:
    """Disabling .gitignore brings ignored files back; defaults still apply."""
    files = _rel(mock_fs_structure, scan_directory(str(mock_fs_structure), EXTS, respect_gitignore=False))

    assert files == ["dist/bundle.js", "src/App.test.tsx", "src/App.tsx", "src/main.jsx"]


def test_scan_user_ignore_patterns(mock_fs_structure: Path) -> None:
    """User globs are applied on top of the defaults."""
    files = scan_directory(str(mock_fs_structure), EXTS, ignore_patterns=["*.jsx"])
    assert _rel(mock_fs_structure, files) == ["src/App.tsx"]


def test_scan_extension_match_is_case_insensitive(write_tree, tmp_path: Path) -> None:
    """Upper-case extensions on disk still match."""
    write_tree(tmp_path, {"Legacy.JSX": "x"})
    assert len(scan_directory(str(tmp_path), [".jsx"])) == 1


def test_scan_invalid_root(tmp_path: Path) -> None:
    """Missing or non-directory roots raise domain errors."""
    with pytest.raises(DirectoryNotFoundError):
        scan_directory(str(tmp_path / "missing"), EXTS)

    f = tmp_path / "file.ts"
    f.write_text("", encoding="utf-8")
    with pytest.raises(PathNotADirectoryError):
        scan_directory(str(f), EXTS)


def test_prepare_exclusion_rules_integration(mock_fs_structure: Path) -> None:
    """Aggregation of default, user and gitignore patterns."""
    with patch("routescope.core.services.scanner.load_gitignore_patterns") as mock_git:
        mock_git.return_value = [r"custom_ignore"]

        exc = prepare_exclusion_rules(str(mock_fs_structure), ["tmp_*"], respect_gitignore=True)

        mock_git.assert_called_once_with(str(mock_fs_structure))
        assert any(rx.pattern == r"custom_ignore" for rx in exc)
        assert any(rx.search("tmp_file") for rx in exc)


def test_prepare_exclusion_rules_skips_gitignore(mock_fs_structure: Path) -> None:
    """respect_gitignore=False never reads the file."""
    with patch("routescope.core.services.scanner.load_gitignore_patterns") as mock_git:
        prepare_exclusion_rules(str(mock_fs_structure), None, respect_gitignore=False)
        mock_git.assert_not_called()
