from __future__ import annotations

"""
Unit tests for Vite configuration discovery.
"""

import logging
from unittest.mock import patch

import pytest

from routescope.core.react.vite_config import detect_vite_config, extract_vite_port
from routescope.domain.models import ViteConfigResult


@pytest.mark.parametrize("content, expected", [
    ("export default defineConfig({ plugins: [react()], server: { port: 3000 } })", 3000),
    ("export default defineConfig({ port: 3001 })", 3001),
    ("const PORT = 8080;\nexport default {}", 8080),
    ("export default defineConfig({ plugins: [react()] })", None),
])
def test_extract_vite_port(content, expected) -> None:
    """All supported port declarations are recognized."""
    assert extract_vite_port(content) == expected


def test_first_candidate_wins(write_tree, tmp_path) -> None:
    """vite.config.js is probed before vite.config.ts."""
    write_tree(tmp_path, {
        "vite.config.ts": "export default { server: { port: 4000 } }",
        "vite.config.js": "export default { server: { port: 4100 } }",
    })
    result = detect_vite_config(str(tmp_path))

    assert result.config_path == str(tmp_path / "vite.config.js")
    assert result.port == 4100


def test_config_without_port(write_tree, tmp_path) -> None:
    """A config file with no port still reports its path."""
    write_tree(tmp_path, {"vite.config.mjs": "export default {}"})
    result = detect_vite_config(str(tmp_path))

    assert result.config_path == str(tmp_path / "vite.config.mjs")
    assert result.port is None


def test_no_config(tmp_path) -> None:
    """An empty directory yields an empty result."""
    assert detect_vite_config(str(tmp_path)) == ViteConfigResult()


def test_unreadable_config_logs_warning(write_tree, tmp_path, caplog) -> None:
    """A read failure is logged and the port left undetected."""
    write_tree(tmp_path, {"vite.config.ts": "export default {}"})

    with patch("routescope.core.react.vite_config.read_text", side_effect=OSError("denied")):
        with caplog.at_level(logging.WARNING):
            result = detect_vite_config(str(tmp_path))

    assert result.port is None
    assert result.config_path is not None
    assert "Error reading" in caplog.text
