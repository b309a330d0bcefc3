"""SQLAlchemy-backed MatchingDataSource.

Rows are converted to frozen snapshots while the session is open, so the
matching engine never touches ORM objects or lazy loads.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from core.matching.interfaces import MatchingDataSource
from core.matching.models import VolunteerProfile, EventRecord, PairingRecord
from database.models import VolunteerProfileRow, EventRow, VolunteerHistoryRow
from database.repositories.volunteer import VolunteerRepository
from database.repositories.event import EventRepository
from database.repositories.history import VolunteerHistoryRepository


def to_volunteer_profile(row: VolunteerProfileRow) -> VolunteerProfile:
    return VolunteerProfile.build(
        volunteer_id=row.user_id,
        full_name=row.full_name,
        skills=row.skills,
        city=row.city,
        region=row.state,
        postal_code=row.zip_code,
        availability=row.availability,
    )


def to_event_record(row: EventRow) -> EventRecord:
    return EventRecord(
        event_id=row.id,
        name=row.event_name,
        required_skills=list(row.required_skills or []),
        location=row.location or "",
        event_date=row.event_date,
        urgency=row.urgency or "medium",
        description=row.description or "",
    )


def to_pairing_record(row: VolunteerHistoryRow) -> PairingRecord:
    return PairingRecord(
        volunteer_id=row.user_id,
        event_id=row.event_id,
        status=row.participant_status,
    )


class SqlMatchingDataSource(MatchingDataSource):
    def __init__(self, db: Session):
        self.db = db
        self.volunteers = VolunteerRepository(db)
        self.events = EventRepository(db)
        self.history = VolunteerHistoryRepository(db)

    def load_event(self, event_id: str) -> Optional[EventRecord]:
        row = self.events.get_by_id(event_id)
        return to_event_record(row) if row else None

    def load_all_events(self) -> List[EventRecord]:
        return [to_event_record(row) for row in self.events.get_all()]

    def load_all_volunteers(self) -> List[VolunteerProfile]:
        return [to_volunteer_profile(row) for row in self.volunteers.get_all()]

    def load_volunteer(self, volunteer_id: str) -> Optional[VolunteerProfile]:
        row = self.volunteers.get_by_user_id(volunteer_id)
        return to_volunteer_profile(row) if row else None

    def load_pairing_history(self, volunteer_id: str) -> List[PairingRecord]:
        return [to_pairing_record(row) for row in self.history.get_by_user_id(volunteer_id)]
