from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants, including
resource file names for the static taxonomies, the hosted profile table
contract, onboarding vocabularies and system versioning.
"""

from typing import Dict, List

CURRENT_CONFIG_VERSION = "1.2.0"
APP_DISPLAY_NAME = "DiasporaPicker"

# -----------------------------------------------------------------------------
# TAXONOMY RESOURCES
# -----------------------------------------------------------------------------
EXPERTISE_KIND = "expertise"
LOCATION_KIND = "location"

TAXONOMY_RESOURCES: Dict[str, str] = {
    EXPERTISE_KIND: "expertise.json",
    LOCATION_KIND: "african_locations.json",
}

# -----------------------------------------------------------------------------
# HOSTED PROFILE STORE
# -----------------------------------------------------------------------------
PROFILES_TABLE = "profiles"
PROFILE_COLUMNS: List[str] = [
    "skills",
    "availability",
    "volunteer_countries",
    "volunteer_states",
    "volunteer_lgas",
]

# -----------------------------------------------------------------------------
# ONBOARDING VOCABULARY
# -----------------------------------------------------------------------------
AVAILABILITY_FULL_TIME = "full-time"
AVAILABILITY_SPECIFIC_PERIOD = "specific-period"
AVAILABILITY_TYPES: List[str] = [AVAILABILITY_FULL_TIME, AVAILABILITY_SPECIFIC_PERIOD]
DATE_FORMAT = "%Y-%m-%d"
