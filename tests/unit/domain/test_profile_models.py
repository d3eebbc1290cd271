from __future__ import annotations

"""
Unit tests for the profile DTOs and the availability column encoding.
"""

import json
from datetime import date

import pytest

from diaspora_picker.domain.profile_models import Availability, ProfileUpdate


def test_full_time_serializes_as_keyword() -> None:
    """TC-01: Full-time is stored as a bare keyword."""
    assert Availability().serialize() == "full-time"


def test_period_serializes_as_json() -> None:
    """TC-02: A period is stored as JSON with camelCase date keys."""
    window = Availability("specific-period", date(2026, 1, 1), date(2026, 3, 31))
    assert json.loads(window.serialize()) == {"startDate": "2026-01-01", "endDate": "2026-03-31"}
    assert Availability.deserialize(window.serialize()) == window


@pytest.mark.parametrize("raw", [None, "", "full-time", "not json", "[1, 2]"])
def test_unreadable_column_falls_back_to_full_time(raw) -> None:
    """TC-03: Anything that is not a period decodes as full-time."""
    assert Availability.deserialize(raw) == Availability()


def test_dict_form() -> None:
    """TC-04: The session dict form uses ISO date strings."""
    window = Availability.from_dict({"type": "specific-period", "start_date": "2026-02-01", "end_date": None})
    assert window.start_date == date(2026, 2, 1)
    assert window.to_dict() == {"type": "specific-period", "start_date": "2026-02-01", "end_date": None}
    assert Availability.from_dict(None) == Availability()


def test_payload_sends_empty_locations_as_null() -> None:
    """TC-05: Empty location lists are cleared on the profile row."""
    update = ProfileUpdate(skills=["ml"], availability=Availability(), countries=["Ghana"])
    payload = update.to_payload()

    assert payload == {
        "skills": ["ml"],
        "availability": "full-time",
        "volunteer_countries": ["Ghana"],
        "volunteer_states": None,
        "volunteer_lgas": None,
    }
