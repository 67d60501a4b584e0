from __future__ import annotations

"""
Configuration Domain Management.

Handles the persisted shell settings (default state file, prompt, startup
behaviour) stored as JSON in the user data directory, with default
fallback and forward-compatible merging of stored values.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from treeshell.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_LOCALE,
    DEFAULT_PROMPT,
    DEFAULT_STATE_FILE,
)
from treeshell.infra.fs import get_user_data_dir, safe_mkdir

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "settings.json"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default shell configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Persistence
        "state_file": DEFAULT_STATE_FILE,
        "load_on_start": False,
        "autosave_on_quit": True,

        # Interaction
        "prompt": DEFAULT_PROMPT,
        "show_menu": True,
        "locale": DEFAULT_LOCALE,
    }


def get_config_file() -> str:
    """Absolute path of the persisted settings file."""
    return os.path.join(get_user_data_dir(), SETTINGS_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load persisted settings merged over the defaults.

    Unknown keys are ignored and a missing or corrupted file yields the
    defaults.

    Args:
        config_file: Optional explicit settings path.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    path = config_file or get_config_file()
    config = get_default_config()

    if not os.path.exists(path):
        logger.debug("Settings file not found. Returning defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load settings: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted settings file. Resetting to defaults.")
        return config

    stored = data.get("settings", {})
    if isinstance(stored, dict):
        config.update({k: v for k, v in stored.items() if k in config})
    return config


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> bool:
    """
    Persist the provided settings to disk.

    Args:
        config: The configuration to save.
        config_file: Optional explicit settings path.

    Returns:
        bool: True if the file was written.
    """
    path = config_file or get_config_file()
    ok, err = safe_mkdir(os.path.dirname(os.path.abspath(path)))
    if not ok:
        logger.error(f"Failed to create settings directory: {err}")
        return False

    payload = {"version": CURRENT_CONFIG_VERSION, "settings": config}
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save settings: {e}")
        return False

    logger.debug(f"Settings saved to {path}")
    return True
