from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Merging of persisted sessions over defaults, without touching real user data.
"""

import json
from unittest.mock import patch

import pytest

from routescope.domain.config import (
    get_config_file,
    get_default_app_state,
    get_default_config,
    load_app_state,
    load_config,
)
from routescope.domain.constants import CURRENT_CONFIG_VERSION


@pytest.fixture
def mock_user_data_dir(tmp_path):
    """
    Fixture to mock the user data directory.
    Prevents tests from reading/writing to the real OS user folder.
    """
    config_dir = tmp_path / ".routescope"
    config_dir.mkdir()

    with patch("routescope.domain.config.get_user_data_dir", return_value=str(config_dir)):
        yield config_dir


def test_config_file_lives_in_user_data_dir(mock_user_data_dir):
    """The state file is config.json inside the data directory."""
    assert get_config_file() == str(mock_user_data_dir / "config.json")


def test_load_fresh_state_returns_defaults(mock_user_data_dir):
    """If no config file exists, the default state structure is returned."""
    state = load_app_state()

    assert state == get_default_app_state()
    assert state["version"] == CURRENT_CONFIG_VERSION


def test_load_corrupted_file_returns_defaults(mock_user_data_dir, caplog):
    """Malformed JSON falls back to defaults and logs an error."""
    (mock_user_data_dir / "config.json").write_text("{ incomplete json ", encoding="utf-8")

    state = load_app_state()

    assert state["last_session"] == get_default_config()
    assert "Failed to load config" in caplog.text


def test_load_non_dict_returns_defaults(mock_user_data_dir):
    """A JSON document that is not an object is treated as corrupted."""
    (mock_user_data_dir / "config.json").write_text("[1, 2]", encoding="utf-8")
    assert load_app_state() == get_default_app_state()


def test_load_config_merges_last_session(mock_user_data_dir):
    """Persisted keys override defaults; missing keys are filled in."""
    stored = {"version": "0.1.0", "last_session": {"react_port": 4000, "pretty": True}}
    (mock_user_data_dir / "config.json").write_text(json.dumps(stored), encoding="utf-8")

    config = load_config()

    assert config["react_port"] == 4000
    assert config["pretty"] is True
    assert config["nextjs_port"] == 3000
    assert load_app_state()["version"] == CURRENT_CONFIG_VERSION


def test_get_default_config_completeness():
    """Ensure default config contains all critical keys."""
    defaults = get_default_config()

    for k in ["path", "extensions", "ignore_patterns", "respect_gitignore",
              "nextjs_port", "react_port", "pretty"]:
        assert k in defaults

    assert defaults["nextjs_port"] == 3000
    assert defaults["react_port"] == 5173


def test_defaults_are_fresh_copies():
    """Mutating one default dict never leaks into the next."""
    first = get_default_config()
    first["extensions"].append(".vue")
    assert ".vue" not in get_default_config()["extensions"]
