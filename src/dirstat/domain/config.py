from __future__ import annotations

"""
Configuration Domain Management.

Provides the default run options and loads user preferences from the JSON
config file in the application data directory. A missing or unreadable file
always degrades to the defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from dirstat.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"


def get_config_path() -> str:
    """Location of the persistent config file (not created on lookup)."""
    return os.path.join(get_user_data_dir(create=False), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Output Format
        "continuous": False,
        "linear": False,
        "csv": False,
        "quiet": False,

        # Traversal
        "recurse": False,
        "skip_dot_entries": False,

        # Destinations
        "output_file": "",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state(path: str = "") -> Dict[str, Any]:
    """
    Load the raw application state from disk.

    Args:
        path: Explicit config file location; defaults to get_config_path().

    Returns:
        Dict[str, Any]: The stored state, or an empty dict on any failure.
    """
    config_file = path or get_config_path()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_file}': {e}. Using defaults.")
        return {}

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return {}

    return data


def load_config(path: str = "") -> Dict[str, Any]:
    """
    Retrieve the active configuration: defaults overlaid with `last_session`.

    Unknown keys are kept so the validator can report them.
    """
    state = load_app_state(path)
    session = state.get("last_session", {})
    defaults = get_default_config()
    if isinstance(session, dict):
        defaults.update(session)
    else:
        logger.warning("Config 'last_session' is not an object. Ignored.")
    return defaults
