#!/usr/bin/env python3
"""
Matching Models - Snapshots consumed by the matching engine and its results.

Everything here is constructed fresh for each ranking call from the current
state of the store; none of it is persisted.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Sequence, Union


def format_calendar_date(value: Union[date, datetime, str]) -> str:
    """
    Format a date as YYYY-MM-DD using its own calendar fields.

    Datetimes are not converted between timezones; strings are assumed to
    already be in canonical form.
    """
    if isinstance(value, str):
        return value
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


@dataclass(frozen=True)
class VolunteerProfile:
    """Read-only snapshot of a volunteer's matching-relevant profile."""
    volunteer_id: str
    full_name: str
    skills: List[str] = field(default_factory=list)
    city: str = ""
    region: str = ""  # two-letter state code
    postal_code: str = ""
    availability: List[str] = field(default_factory=list)  # YYYY-MM-DD

    @classmethod
    def build(
        cls,
        volunteer_id: str,
        full_name: str,
        skills: Optional[Sequence[str]] = None,
        city: Optional[str] = None,
        region: Optional[str] = None,
        postal_code: Optional[str] = None,
        availability: Optional[Sequence[Union[date, str]]] = None
    ) -> 'VolunteerProfile':
        """Build a profile, normalizing availability dates to YYYY-MM-DD."""
        return cls(
            volunteer_id=volunteer_id,
            full_name=full_name,
            skills=list(skills or []),
            city=city or "",
            region=region or "",
            postal_code=postal_code or "",
            availability=[format_calendar_date(d) for d in (availability or [])],
        )


@dataclass(frozen=True)
class EventRecord:
    """Read-only snapshot of an event."""
    event_id: str
    name: str
    required_skills: List[str]
    location: str
    event_date: datetime
    urgency: str = "medium"  # informational only, not scored
    description: str = ""


@dataclass(frozen=True)
class PairingRecord:
    """
    An existing volunteer/event association.

    The status is carried for callers but never inspected by the matcher:
    any record marks the pair as handled.
    """
    volunteer_id: str
    event_id: str
    status: str = "pending"  # pending|confirmed|cancelled|no-show


@dataclass
class ScoreResult:
    """Score for one (volunteer, event) pair with its tie-break components."""
    score: int = 0
    reasons: List[str] = field(default_factory=list)
    skill_overlap_count: int = 0
    availability_matched: bool = False
    locality_points: int = 0  # postal > region > none


@dataclass
class MatchResult:
    """A ranked volunteer for a single event."""
    volunteer: VolunteerProfile
    score: int
    reasons: List[str] = field(default_factory=list)


@dataclass
class GlobalMatchResult:
    """A ranked volunteer/event pair."""
    volunteer: VolunteerProfile
    event: EventRecord
    score: int
    reasons: List[str] = field(default_factory=list)


class MatchStatus(str, Enum):
    OK = "ok"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"


@dataclass
class EventMatchOutcome:
    """Typed outcome of ranking volunteers for one event."""
    status: MatchStatus
    matches: List[MatchResult] = field(default_factory=list)
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == MatchStatus.OK


@dataclass
class PairingCheck:
    """Typed outcome of checking whether a pairing already exists."""
    status: MatchStatus
    exists: bool = False
    volunteer: Optional[VolunteerProfile] = None
    event: Optional[EventRecord] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == MatchStatus.OK
