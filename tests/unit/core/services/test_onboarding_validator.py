from __future__ import annotations

"""
Unit tests for the onboarding submission validator.
"""

from datetime import date

import pytest

from diaspora_picker.core.services.onboarding import collect_skills, validate_onboarding
from diaspora_picker.domain.profile_models import Availability
from diaspora_picker.domain.selection_models import FlatSelection

_PERIOD = {"type": "specific-period", "start_date": "2026-01-01", "end_date": "2026-03-31"}


def test_valid_submission_builds_update() -> None:
    """TC-01: Clean inputs yield a ProfileUpdate and no problems."""
    update, errors = validate_onboarding(
        ["ml", " ml ", "frontend"],
        {"countries": ["Nigeria"], "states": ["Lagos"], "lgas": ["Ikeja"]},
        _PERIOD,
    )

    assert errors == []
    assert update.skills == ["ml", "frontend"]
    assert update.countries == ["Nigeria"]
    assert update.availability.start_date == date(2026, 1, 1)


def test_location_input_forms() -> None:
    """TC-02: FlatSelection, volunteer_* mapping and triples are accepted."""
    flat = FlatSelection(
        roots=["Ghana"], branches=[("Ghana", "Ashanti")], leaves=[("Ghana", "Ashanti", "Kumasi")]
    )
    for locations in (
            flat,
            {"volunteer_countries": ["Ghana"], "volunteer_states": ["Ashanti"], "volunteer_lgas": ["Kumasi"]},
            (["Ghana"], ["Ashanti"], ["Kumasi"]),
    ):
        update, errors = validate_onboarding(["ml"], locations, None)
        assert errors == []
        assert (update.countries, update.states, update.lgas) == (["Ghana"], ["Ashanti"], ["Kumasi"])


def test_missing_skill_and_country_collected() -> None:
    """TC-03: Problems are collected when not strict."""
    update, errors = validate_onboarding([], None, None)

    assert update is None
    assert "Select at least one skill." in errors
    assert "Select at least one country." in errors


def test_strict_mode_raises() -> None:
    """TC-04: strict=True raises on the first problem."""
    with pytest.raises(ValueError, match="skill"):
        validate_onboarding([], {"countries": ["Ghana"]}, None, strict=True)

    with pytest.raises(TypeError):
        validate_onboarding(42, {"countries": ["Ghana"]}, None, strict=True)


def test_invalid_entry_types_reported() -> None:
    """TC-05: Non-string entries are dropped and reported."""
    update, errors = validate_onboarding(["ml", 7], {"countries": ["Ghana"]}, None)
    assert update is None
    assert any("expected str" in e for e in errors)


@pytest.mark.parametrize("availability, fragment", [
    ({"type": "specific-period", "start_date": "2026-01-01"}, "both a start and an end"),
    ({"type": "specific-period", "start_date": "2026-05-01", "end_date": "2026-01-01"}, "must not be after"),
    ({"type": "part-time"}, "Unknown availability type"),
    ({"type": "specific-period", "start_date": "01/05/2026", "end_date": "2026-06-01"}, "Invalid availability date"),
])
def test_availability_problems(availability, fragment) -> None:
    """TC-06: Incoherent availability windows are refused."""
    update, errors = validate_onboarding(["ml"], {"countries": ["Ghana"]}, availability)
    assert update is None
    assert any(fragment in e for e in errors)


def test_full_time_drops_dates() -> None:
    """TC-07: Dates sent with a full-time window are ignored."""
    update, _ = validate_onboarding(
        ["ml"], {"countries": ["Ghana"]},
        {"type": "full-time", "start_date": "2026-01-01", "end_date": None},
    )
    assert update.availability == Availability()


def test_stored_availability_string_is_accepted() -> None:
    """TC-08: The serialized column form is decoded."""
    raw = Availability.from_dict(_PERIOD).serialize()
    update, errors = validate_onboarding(["ml"], {"countries": ["Ghana"]}, raw)
    assert errors == []
    assert update.availability.end_date == date(2026, 3, 31)


def test_collect_skills_dedupes_across_paths() -> None:
    """TC-09: A skill checked under two categories counts once."""
    flat = FlatSelection(leaves=[
        ("tech", "ai", "ml"), ("science", "data", "ml"), ("tech", "web", "frontend"),
    ])
    assert collect_skills(flat) == ["ml", "frontend"]
