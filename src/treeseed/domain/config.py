from __future__ import annotations

"""
Configuration Domain Management.

Handles the persisted user preferences (JSON in the user data directory)
that seed the CLI defaults. A missing or corrupted file falls back to the
built-in defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from treeseed.domain.constants import CURRENT_CONFIG_VERSION
from treeseed.domain.tree_models import Format
from treeseed.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_config_path() -> str:
    """Absolute path of the persisted configuration file."""
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
        # Parsing
        "format": Format.TREE.value,

        # Planting
        "target_dir": "",
        "dry_run": False,

        # Console & Diagnostics
        "silent": False,
        "color": True,
        "log_file": "",
        "locale": "en",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str = "") -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Args:
        path: Optional explicit file; defaults to the user data directory.

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    config_path = path or get_config_path()
    defaults = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    version = data.pop("version", CURRENT_CONFIG_VERSION)
    if version != CURRENT_CONFIG_VERSION:
        logger.debug(f"Config schema {version} read as {CURRENT_CONFIG_VERSION}.")

    defaults.update(data)
    return defaults


def save_config(config: Dict[str, Any], path: str = "") -> None:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.
        path: Optional explicit file; defaults to the user data directory.
    """
    config_path = path or get_config_path()
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
