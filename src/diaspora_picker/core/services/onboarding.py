from __future__ import annotations

"""
Onboarding Submission Validator.

Gatekeeper between the pickers and the profile store. Normalizes the
skills list, the location columns and the availability window coming from
the GUI, the CLI or a saved session, and refuses submissions that lack a
skill, a country or a coherent availability period.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from diaspora_picker.domain.constants import (
    AVAILABILITY_FULL_TIME,
    AVAILABILITY_SPECIFIC_PERIOD,
    AVAILABILITY_TYPES,
)
from diaspora_picker.domain.profile_models import Availability, ProfileUpdate
from diaspora_picker.domain.selection_models import FlatSelection
from diaspora_picker.domain.taxonomy_models import LOCATION_SCHEMA

logger = logging.getLogger(__name__)

LocationInput = Union[FlatSelection, Mapping[str, Any], Sequence[Sequence[str]], None]
AvailabilityInput = Union[Availability, Mapping[str, Any], str, None]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_onboarding(
        skills: Any,
        locations: LocationInput,
        availability: AvailabilityInput,
        *,
        strict: bool = False,
) -> Tuple[Optional[ProfileUpdate], List[str]]:
    """
    Validate one onboarding submission.

    Args:
        skills: Selected skill keys (any iterable of strings).
        locations: FlatSelection from the location picker, a mapping with
                   'countries'/'states'/'lgas' (or the 'volunteer_*' column
                   names), or a (countries, states, lgas) triple.
        availability: Availability object, its dict form, or the stored string.
        strict: If True, raise on the first problem instead of collecting it.

    Returns:
        Tuple[Optional[ProfileUpdate], List[str]]: The update (None when
        invalid) and the list of problems found.

    Raises:
        TypeError: In strict mode, for inputs of the wrong type.
        ValueError: In strict mode, for missing or inconsistent values.
    """
    errors: List[str] = []

    skill_list = _as_key_list(skills, "skills", errors, strict)
    if not skill_list:
        _fail("Select at least one skill.", errors, strict)

    countries, states, lgas = _location_columns(locations, errors, strict)
    if not countries:
        _fail("Select at least one country.", errors, strict)

    window = _as_availability(availability, errors, strict)

    if errors:
        logger.warning(f"Onboarding: Submission rejected ({len(errors)} problem(s)).")
        return None, errors

    update = ProfileUpdate(
        skills=skill_list,
        availability=window,
        countries=countries,
        states=states,
        lgas=lgas,
    )
    logger.info(
        f"Onboarding: Valid submission with {len(skill_list)} skill(s) "
        f"and {len(countries)} country(ies)."
    )
    return update, errors


def collect_skills(expertise: FlatSelection) -> List[str]:
    """Distinct checked skill keys of an expertise selection, in order."""
    return _dedupe(l3 for _, _, l3 in expertise.leaves)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _fail(msg: str, errors: List[str], strict: bool, exc: type = ValueError) -> None:
    if strict:
        raise exc(msg)
    errors.append(msg)


def _dedupe(values: Any) -> List[str]:
    seen = set()
    result: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def _as_key_list(value: Any, field: str, errors: List[str], strict: bool) -> List[str]:
    """Coerce an iterable of keys into a clean, de-duplicated string list."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple, set, frozenset)):
        _fail(
            f"Invalid field '{field}': expected a list, received {type(value).__name__}.",
            errors, strict, TypeError
        )
        return []

    cleaned = []
    for item in value:
        if not isinstance(item, str):
            _fail(
                f"Invalid entry in '{field}': expected str, received {type(item).__name__}.",
                errors, strict, TypeError
            )
            continue
        item = item.strip()
        if item:
            cleaned.append(item)
    return _dedupe(cleaned)


def _location_columns(
        locations: LocationInput,
        errors: List[str],
        strict: bool
) -> Tuple[List[str], List[str], List[str]]:
    if locations is None:
        return [], [], []

    if isinstance(locations, FlatSelection):
        columns = locations.columns()
    elif isinstance(locations, Mapping):
        columns = tuple(
            locations.get(name, locations.get(f"volunteer_{name}"))
            for name in LOCATION_SCHEMA.column_names
        )
    elif isinstance(locations, (list, tuple)) and len(locations) == 3:
        columns = tuple(locations)
    else:
        _fail(
            f"Invalid field 'locations': unsupported type {type(locations).__name__}.",
            errors, strict, TypeError
        )
        return [], [], []

    countries, states, lgas = (
        _as_key_list(col, name, errors, strict)
        for col, name in zip(columns, LOCATION_SCHEMA.column_names)
    )
    return countries, states, lgas


def _as_availability(value: AvailabilityInput, errors: List[str], strict: bool) -> Availability:
    try:
        if value is None:
            window = Availability()
        elif isinstance(value, Availability):
            window = value
        elif isinstance(value, str):
            window = Availability.deserialize(value)
        elif isinstance(value, Mapping):
            window = Availability.from_dict(dict(value))
        else:
            _fail(
                f"Invalid field 'availability': unsupported type {type(value).__name__}.",
                errors, strict, TypeError
            )
            return Availability()
    except ValueError as e:
        _fail(f"Invalid availability date: {e}", errors, strict)
        return Availability()

    if window.type not in AVAILABILITY_TYPES:
        _fail(f"Unknown availability type '{window.type}'.", errors, strict)
        return Availability()

    if window.type == AVAILABILITY_FULL_TIME:
        return Availability()

    if window.type == AVAILABILITY_SPECIFIC_PERIOD:
        if window.start_date is None or window.end_date is None:
            _fail("A specific period needs both a start and an end date.", errors, strict)
        elif window.start_date > window.end_date:
            _fail("The availability start date must not be after the end date.", errors, strict)
    return window
