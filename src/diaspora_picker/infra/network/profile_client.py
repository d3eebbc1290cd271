from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests

from diaspora_picker.domain.constants import PROFILE_COLUMNS, PROFILES_TABLE
from diaspora_picker.infra.network.common import DEFAULT_TIMEOUT, build_headers

logger = logging.getLogger(__name__)


def profile_endpoint(base_url: str) -> str:
    """Table URL of the profiles on the hosted REST gateway."""
    return f"{base_url.rstrip('/')}/rest/v1/{PROFILES_TABLE}"


def profile_filter(profile_id: str) -> Dict[str, str]:
    """Query parameters matching one profile row. Values are percent-encoded by requests."""
    return {"id": f"eq.{profile_id}"}


def update_profile(
        base_url: str,
        api_key: str,
        profile_id: str,
        payload: Dict[str, Any]
) -> Tuple[bool, str]:
    """
    Push an onboarding update to the hosted profile row.

    Args:
        base_url: Root URL of the hosted backend.
        api_key: Project key sent as 'apikey' and bearer token.
        profile_id: Primary key of the profile row.
        payload: Column values to update.

    Returns:
        Tuple[bool, str]: Success flag and a short status message.
    """
    if not (base_url and api_key and profile_id):
        return False, "Backend URL, API key and profile id are required."

    url = profile_endpoint(base_url)
    headers = build_headers(api_key)
    headers["Prefer"] = "return=minimal"
    logger.debug(f"Network: Updating profile {profile_id} ({len(payload)} columns).")

    try:
        response = requests.patch(
            url,
            params=profile_filter(profile_id),
            json=payload,
            headers=headers,
            timeout=DEFAULT_TIMEOUT,
        )
        if response.status_code in (200, 204):
            logger.info(f"Network: Profile {profile_id} updated.")
            return True, "Success"
        logger.warning(f"Network: Profile update rejected with HTTP {response.status_code}.")
        return False, f"HTTP {response.status_code}: {response.text[:200]}"
    except requests.exceptions.Timeout:
        logger.warning(f"Network: Profile update timed out after {DEFAULT_TIMEOUT}s.")
        return False, "Timeout"
    except requests.exceptions.RequestException as e:
        logger.error(f"Network: Communication error during profile update: {e}")
        return False, str(e)


def fetch_profile(base_url: str, api_key: str, profile_id: str) -> Optional[Dict[str, Any]]:
    """
    Read the onboarding columns of one profile.

    Returns:
        Optional[Dict[str, Any]]: The row, or None if missing or unreachable.
    """
    if not (base_url and api_key and profile_id):
        return None

    url = profile_endpoint(base_url)
    params = {**profile_filter(profile_id), "select": ",".join(PROFILE_COLUMNS)}

    try:
        response = requests.get(url, params=params, headers=build_headers(api_key), timeout=DEFAULT_TIMEOUT)
        response.raise_for_status()
        rows = response.json()
    except requests.exceptions.RequestException as e:
        logger.error(f"Network: Could not fetch profile {profile_id}: {e}")
        return None
    except ValueError:
        logger.warning("Network: Received malformed profile data (not JSON).")
        return None

    if not isinstance(rows, list) or not rows or not isinstance(rows[0], dict):
        logger.warning(f"Network: Profile {profile_id} not found.")
        return None
    return rows[0]
