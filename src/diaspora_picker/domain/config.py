from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of application settings and of the last
onboarding session (selected skills, availability and locations) using
JSON. Supports default fallback and forward-compatible key merging.
"""

import json
import logging
import os
from typing import Any, Dict

from diaspora_picker.domain.constants import AVAILABILITY_FULL_TIME, CURRENT_CONFIG_VERSION
from diaspora_picker.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default onboarding session.
    This dictionary seeds the pickers and the onboarding form.

    Returns:
        Dict[str, Any]: Default session values.
    """
    return {
        # Expertise
        "skills": [],

        # Availability
        "availability": {
            "type": AVAILABILITY_FULL_TIME,
            "start_date": None,
            "end_date": None,
        },

        # Locations (stored as separate columns)
        "volunteer_countries": [],
        "volunteer_states": [],
        "volunteer_lgas": [],
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.
    Includes global settings and the last active session.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "app_settings": {
            "theme": "System",
            "locale": "en",
            "backend_url": "",
            "api_key": "",
            "profile_id": "",
            "sync_enabled": False,
        },
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

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            logger.warning("Corrupted config file. Resetting to defaults.")
            return default_state

        # Merge with defaults to ensure new keys exist
        state = default_state
        if isinstance(data.get("app_settings"), dict):
            state["app_settings"].update(data["app_settings"])
        if isinstance(data.get("last_session"), dict):
            state["last_session"].update(data["last_session"])

        # Update version stamp
        state["version"] = CURRENT_CONFIG_VERSION
        return state

    except Exception as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return get_default_app_state()


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Retrieve the active session (Last Session) directly.
    """
    state = load_app_state()
    defaults = get_default_config()
    defaults.update(state.get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """
    Save the provided session as the 'last_session'.
    """
    state = load_app_state()
    state["last_session"] = config
    save_app_state(state)
