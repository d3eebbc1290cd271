from __future__ import annotations

"""
Onboarding Session Service.

Moves selections between the pickers and the persisted session shape
(config 'last_session' and the hosted profile row), and pushes a
validated session to the profile store. Shared by the CLI and the GUI
controller.
"""

import logging
from typing import Any, Dict, List, Mapping, Tuple

from diaspora_picker.core.selection.hydrate import build_selection, build_selection_from_leaves
from diaspora_picker.core.services.onboarding import collect_skills, validate_onboarding
from diaspora_picker.domain.config import get_default_config
from diaspora_picker.domain.profile_models import Availability
from diaspora_picker.domain.selection_models import FlatSelection, SelectionState
from diaspora_picker.domain.taxonomy_models import EXPERTISE_SCHEMA, LOCATION_SCHEMA, Taxonomy
from diaspora_picker.infra.network import update_profile

logger = logging.getLogger(__name__)

_LOCATION_FIELDS = tuple(f"volunteer_{name}" for name in LOCATION_SCHEMA.column_names)


# -----------------------------------------------------------------------------
# SESSION <-> SELECTION
# -----------------------------------------------------------------------------

def selection_from_session(taxonomy: Taxonomy, session: Mapping[str, Any]) -> SelectionState:
    """
    Rebuild the picker state of taxonomy from a stored session.

    Expertise is rebuilt from the skill list alone; locations from the
    three location columns.
    """
    if taxonomy.schema.name == EXPERTISE_SCHEMA.name:
        return build_selection_from_leaves(taxonomy, session.get("skills") or [])

    countries, states, lgas = (session.get(name) or [] for name in _LOCATION_FIELDS)
    return build_selection(taxonomy, countries, states, lgas)


def selection_to_session(
        schema_name: str,
        flat: FlatSelection,
        session: Mapping[str, Any]
) -> Dict[str, Any]:
    """Return a copy of session with the columns owned by schema_name replaced."""
    updated = dict(session)
    if schema_name == EXPERTISE_SCHEMA.name:
        updated["skills"] = collect_skills(flat)
    else:
        for name, column in zip(_LOCATION_FIELDS, flat.columns()):
            updated[name] = column
    return updated


def session_from_profile(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert a fetched profile row into the local session shape."""
    session = get_default_config()
    session["skills"] = list(row.get("skills") or [])
    session["availability"] = Availability.deserialize(row.get("availability")).to_dict()
    for name in _LOCATION_FIELDS:
        session[name] = list(row.get(name) or [])
    return session


# -----------------------------------------------------------------------------
# SYNC
# -----------------------------------------------------------------------------

def sync_session(
        session: Mapping[str, Any],
        settings: Mapping[str, Any]
) -> Tuple[bool, str, List[str]]:
    """
    Validate a session and push it to the hosted profile.

    Args:
        session: Session dict ('skills', 'availability', 'volunteer_*').
        settings: App settings holding 'backend_url', 'api_key', 'profile_id'.

    Returns:
        Tuple[bool, str, List[str]]: Success flag, status message and the
        validation problems (empty when the submission was valid).
    """
    locations = {name: session.get(f"volunteer_{name}") for name in LOCATION_SCHEMA.column_names}
    update, errors = validate_onboarding(
        session.get("skills"),
        locations,
        session.get("availability"),
    )
    if update is None:
        return False, "Validation failed", errors

    ok, msg = update_profile(
        _setting(settings, "backend_url"),
        _setting(settings, "api_key"),
        _setting(settings, "profile_id"),
        update.to_payload(),
    )
    if not ok:
        logger.warning(f"Session: Sync failed: {msg}")
    return ok, msg, []


def _setting(settings: Mapping[str, Any], key: str) -> str:
    value = settings.get(key)
    return str(value).strip() if value else ""
