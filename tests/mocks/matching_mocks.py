#!/usr/bin/env python3
"""
Test Mock Implementations - In-memory data sources and snapshot factories.

These provide deterministic data for unit tests of the matching engine
without a database.
"""
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from core.matching.interfaces import MatchingDataSource
from core.matching.models import VolunteerProfile, EventRecord, PairingRecord


def make_volunteer(
    volunteer_id: str = "v1",
    full_name: Optional[str] = None,
    skills: Sequence[str] = (),
    city: str = "Houston",
    region: str = "TX",
    postal_code: str = "77001",
    availability: Sequence = ()
) -> VolunteerProfile:
    """Create a VolunteerProfile with defaults for easy test construction."""
    return VolunteerProfile.build(
        volunteer_id=volunteer_id,
        full_name=full_name or f"Volunteer {volunteer_id}",
        skills=skills,
        city=city,
        region=region,
        postal_code=postal_code,
        availability=availability,
    )


def make_event(
    event_id: str = "e1",
    name: Optional[str] = None,
    required_skills: Sequence[str] = (),
    location: str = "Houston, TX 77001",
    event_date: datetime = datetime(2030, 12, 1, 9, 0),
    urgency: str = "high"
) -> EventRecord:
    """Create an EventRecord with defaults for easy test construction."""
    return EventRecord(
        event_id=event_id,
        name=name or f"Event {event_id}",
        required_skills=list(required_skills),
        location=location,
        event_date=event_date,
        urgency=urgency,
    )


class InMemoryMatchingDataSource(MatchingDataSource):
    """
    MatchingDataSource over plain lists.

    Records every call in `calls` so tests can assert what was loaded.
    """

    def __init__(
        self,
        volunteers: Sequence[VolunteerProfile] = (),
        events: Sequence[EventRecord] = (),
        pairings: Sequence[PairingRecord] = ()
    ):
        self.volunteers = list(volunteers)
        self.events = list(events)
        self.pairings = list(pairings)
        self.calls: List[str] = []

    def load_event(self, event_id: str) -> Optional[EventRecord]:
        self.calls.append(f"load_event:{event_id}")
        return next((e for e in self.events if e.event_id == event_id), None)

    def load_all_events(self) -> List[EventRecord]:
        self.calls.append("load_all_events")
        return list(self.events)

    def load_all_volunteers(self) -> List[VolunteerProfile]:
        self.calls.append("load_all_volunteers")
        return list(self.volunteers)

    def load_volunteer(self, volunteer_id: str) -> Optional[VolunteerProfile]:
        self.calls.append(f"load_volunteer:{volunteer_id}")
        return next((v for v in self.volunteers if v.volunteer_id == volunteer_id), None)

    def load_pairing_history(self, volunteer_id: str) -> List[PairingRecord]:
        self.calls.append(f"load_pairing_history:{volunteer_id}")
        return [p for p in self.pairings if p.volunteer_id == volunteer_id]


class FailingHistoryDataSource(InMemoryMatchingDataSource):
    """Data source whose history store is unreachable."""

    def load_pairing_history(self, volunteer_id: str) -> List[PairingRecord]:
        raise ConnectionError("history store unavailable")
