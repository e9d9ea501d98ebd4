from __future__ import annotations

"""
Configuration Domain Management.

Loads the persisted JSON application state and builds the dict-based runtime
configuration consumed by the CLI commands. Missing or corrupted state
files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from routescope.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_NEXTJS_PORT,
    DEFAULT_VITE_PORT,
    SOURCE_EXTENSIONS,
)
from routescope.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"


def get_config_file() -> str:
    """Absolute path of the persisted state file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target
        "path": ".",

        # Enumeration
        "extensions": list(SOURCE_EXTENSIONS),
        "ignore_patterns": [],
        "respect_gitignore": True,

        # Dev servers
        "nextjs_port": DEFAULT_NEXTJS_PORT,
        "react_port": DEFAULT_VITE_PORT,

        # Output
        "pretty": False,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    default_state = get_default_app_state()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    # Merge with defaults to ensure new keys exist
    session = data.get("last_session")
    if isinstance(session, dict):
        default_state["last_session"].update(session)

    default_state["version"] = CURRENT_CONFIG_VERSION
    return default_state


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Retrieve the active configuration (last session) merged over defaults.
    """
    state = load_app_state()
    defaults = get_default_config()
    defaults.update(state.get("last_session", {}))
    return defaults

