from __future__ import annotations

"""
Background Worker Threads for GUI Operations.

Runs the network round-trips of the onboarding flow (profile fetch and
profile sync) off the Tk main loop. Results are handed to callbacks that
the controller marshals back onto the UI thread.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from diaspora_picker.core.services.session import session_from_profile, sync_session
from diaspora_picker.infra import network

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PROFILE WORKERS
# -----------------------------------------------------------------------------

def sync_profile_task(
        session: Mapping[str, Any],
        settings: Mapping[str, Any],
        on_complete: Callable[[Tuple[bool, str, List[str]]], None]
) -> None:
    """
    Validate and push the session to the hosted profile.

    Args:
        session: Snapshot of the session to submit.
        settings: App settings with the backend coordinates.
        on_complete: Receives (ok, message, validation problems).
    """
    try:
        result = sync_session(session, settings)
    except Exception as e:
        logger.critical(f"Sync Thread: Critical failure detected: {e}", exc_info=True)
        result = (False, str(e), [])
    on_complete(result)


def fetch_profile_task(
        settings: Mapping[str, Any],
        on_complete: Callable[[Optional[Dict[str, Any]]], None]
) -> None:
    """
    Download the hosted profile and convert it to the session shape.

    Args:
        settings: App settings with the backend coordinates.
        on_complete: Receives the session dict, or None on failure.
    """
    try:
        row = network.fetch_profile(
            settings.get("backend_url", ""),
            settings.get("api_key", ""),
            settings.get("profile_id", ""),
        )
        on_complete(session_from_profile(row) if row is not None else None)
    except Exception as e:
        logger.error(f"Profile Task: Fetch failed: {e}")
        on_complete(None)
