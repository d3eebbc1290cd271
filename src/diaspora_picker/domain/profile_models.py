from __future__ import annotations

"""
Volunteer Profile Data Models.

DTOs exchanged between the onboarding flow and the hosted profile store.
Serialization mirrors the column layout of the 'profiles' table: skills
as a plain list, locations as three separate lists, availability as a
keyword or a JSON encoded period.
"""

import json
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from diaspora_picker.domain.constants import (
    AVAILABILITY_FULL_TIME,
    AVAILABILITY_SPECIFIC_PERIOD,
    DATE_FORMAT,
)


@dataclass(frozen=True)
class Availability:
    """
    Volunteer availability window.

    Attributes:
        type: 'full-time' or 'specific-period'.
        start_date: First available day (specific-period only).
        end_date: Last available day (specific-period only).
    """
    type: str = AVAILABILITY_FULL_TIME
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def serialize(self) -> str:
        """Encode for the 'availability' text column."""
        if self.type == AVAILABILITY_FULL_TIME:
            return AVAILABILITY_FULL_TIME
        return json.dumps({
            "startDate": _fmt(self.start_date),
            "endDate": _fmt(self.end_date),
        })

    @classmethod
    def deserialize(cls, raw: Optional[str]) -> "Availability":
        """
        Decode the 'availability' column. Unreadable values fall back to full-time.
        """
        if not raw or raw == AVAILABILITY_FULL_TIME:
            return cls()
        try:
            data = json.loads(raw)
            return cls(
                type=AVAILABILITY_SPECIFIC_PERIOD,
                start_date=_parse(data.get("startDate")),
                end_date=_parse(data.get("endDate")),
            )
        except (ValueError, AttributeError):
            return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "start_date": _fmt(self.start_date),
            "end_date": _fmt(self.end_date),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Availability":
        data = data or {}
        return cls(
            type=data.get("type") or AVAILABILITY_FULL_TIME,
            start_date=_parse(data.get("start_date")),
            end_date=_parse(data.get("end_date")),
        )


@dataclass(frozen=True)
class ProfileUpdate:
    """
    Validated onboarding submission ready to be persisted.

    Attributes:
        skills: Selected level-3 expertise keys.
        availability: Availability window.
        countries: Selected countries.
        states: Selected states.
        lgas: Selected LGAs.
    """
    skills: List[str]
    availability: Availability
    countries: List[str] = field(default_factory=list)
    states: List[str] = field(default_factory=list)
    lgas: List[str] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Row update for the profile store; empty location lists are sent as null."""
        return {
            "skills": list(self.skills),
            "availability": self.availability.serialize(),
            "volunteer_countries": list(self.countries) or None,
            "volunteer_states": list(self.states) or None,
            "volunteer_lgas": list(self.lgas) or None,
        }


def _fmt(value: Optional[date]) -> Optional[str]:
    return value.strftime(DATE_FORMAT) if value else None


def _parse(value: Any) -> Optional[date]:
    if not value:
        return None
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value), DATE_FORMAT).date()
