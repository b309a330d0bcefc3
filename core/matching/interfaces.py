"""
Matching Data Source Interface - Read-only queries the matching engine needs.

Implementations wrap the persistence layer (see database.repositories) or an
in-memory fixture. Failures are raised, never swallowed: a partial snapshot
must not be scored.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from core.matching.models import VolunteerProfile, EventRecord, PairingRecord


class MatchingDataSource(ABC):
    """
    Abstract source of volunteer, event and pairing-history snapshots.
    """

    @abstractmethod
    def load_event(self, event_id: str) -> Optional[EventRecord]:
        """Return the event, or None if no event has this id."""
        pass

    @abstractmethod
    def load_all_events(self) -> List[EventRecord]:
        pass

    @abstractmethod
    def load_all_volunteers(self) -> List[VolunteerProfile]:
        pass

    @abstractmethod
    def load_volunteer(self, volunteer_id: str) -> Optional[VolunteerProfile]:
        pass

    @abstractmethod
    def load_pairing_history(self, volunteer_id: str) -> List[PairingRecord]:
        """
        Return every pairing record for a volunteer, whatever its status.
        """
        pass
