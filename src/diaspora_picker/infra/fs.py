from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform resolution of the per-user data directory and of
the read-only resources bundled inside the package. Acts as an abstraction
over the 'os' module to ensure uniform behavior across Windows and
Unix-like systems.
"""

import os

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "DiasporaPicker"
UNIX_APP_DIR_NAME = ".diaspora_picker"
RESOURCES_DIR_NAME = "resources"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/DiasporaPicker
    - Linux/Mac: ~/.diaspora_picker

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    # Idempotent directory creation
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def get_resource_path(file_name: str) -> str:
    """
    Resolve the absolute path of a bundled read-only resource.

    Args:
        file_name: Name of the file inside the package 'resources' folder.

    Returns:
        str: Absolute path (existence is not checked).
    """
    package_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(package_dir, RESOURCES_DIR_NAME, file_name)
