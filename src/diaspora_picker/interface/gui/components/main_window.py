from __future__ import annotations

"""
Main Application Window Factory.

Creates the root CustomTkinter window, applies the persisted appearance
mode and lays out the two-column grid (sidebar, content).
"""

from typing import Any, Dict

import customtkinter as ctk

from diaspora_picker.domain import constants as const

VALID_THEMES = ("System", "Light", "Dark")


def create_main_window(app_settings: Dict[str, Any]) -> ctk.CTk:
    """
    Instantiate and configure the primary application window.

    Args:
        app_settings: Persisted 'app_settings' block (theme is read from it).

    Returns:
        ctk.CTk: The configured root application instance.
    """
    theme = app_settings.get("theme", "System")
    ctk.set_appearance_mode(theme if theme in VALID_THEMES else "System")
    ctk.set_default_color_theme("green")

    app = ctk.CTk()
    app.title(f"{const.APP_DISPLAY_NAME} - v{const.CURRENT_CONFIG_VERSION}")
    app.geometry("1100x720")

    # Column 0 (Sidebar), Column 1 (Content)
    app.grid_columnconfigure(1, weight=1)
    app.grid_rowconfigure(0, weight=1)

    return app
