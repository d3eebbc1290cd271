from __future__ import annotations

from typing import Dict

from diaspora_picker.domain.constants import CURRENT_CONFIG_VERSION

USER_AGENT = f"DiasporaPicker-Client/{CURRENT_CONFIG_VERSION}"
DEFAULT_TIMEOUT = 10


def build_headers(api_key: str) -> Dict[str, str]:
    """Headers expected by the hosted REST gateway (key doubles as bearer token)."""
    return {
        "User-Agent": USER_AGENT,
        "apikey": api_key,
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
