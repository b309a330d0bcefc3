#!/usr/bin/env python3
"""
Match service - translate matching outcomes into API responses.
"""

import logging
from typing import Optional

from core.matching import (
    MatchingService, MatchStatus, VolunteerProfile, EventRecord, PairingCheck
)
from ..models.responses import (
    VolunteerSummary,
    EventSummary,
    VolunteerMatch,
    EventMatchesResponse,
    GlobalPairMatch,
    GlobalMatchesResponse,
    PairingCheckResponse
)
from ..exceptions import (
    InvalidInputException,
    EventNotFoundException,
    VolunteerNotFoundException
)

logger = logging.getLogger(__name__)


class MatchService:
    """Service for volunteer match endpoints."""

    def __init__(self, matching: MatchingService):
        self.matching = matching

    def get_event_matches(self, event_id: str, top_k: Optional[int] = None) -> EventMatchesResponse:
        """
        Rank volunteers for one event.

        Args:
            event_id: The event ID.
            top_k: Maximum number of results (config default when None).

        Returns:
            Ranked volunteers, zero scores included.

        Raises:
            InvalidInputException: If event_id or top_k is malformed.
            EventNotFoundException: If the event does not exist.
        """
        outcome = self.matching.rank_volunteers_for_event(event_id, top_k)

        if outcome.status == MatchStatus.INVALID_INPUT:
            raise InvalidInputException(outcome.message)
        if outcome.status == MatchStatus.NOT_FOUND:
            raise EventNotFoundException(f"Event {event_id} not found")

        matches = [
            VolunteerMatch(
                volunteer=self._to_volunteer_summary(m.volunteer),
                score=m.score,
                reasons=m.reasons
            )
            for m in outcome.matches
        ]
        return EventMatchesResponse(
            success=True,
            event_id=event_id,
            count=len(matches),
            matches=matches
        )

    def get_global_matches(self, top_k: Optional[int] = None) -> GlobalMatchesResponse:
        """
        Rank the best volunteer/event pairs across all events.

        An empty list is a valid answer, not an error.
        """
        pairs = self.matching.rank_top_pairs_globally(top_k)
        matches = [
            GlobalPairMatch(
                volunteer=self._to_volunteer_summary(p.volunteer),
                event=self._to_event_summary(p.event),
                score=p.score,
                reasons=p.reasons
            )
            for p in pairs
        ]
        return GlobalMatchesResponse(success=True, count=len(matches), matches=matches)

    def check_pairing(self, volunteer_id: str, event_id: str) -> PairingCheckResponse:
        """
        Check whether a volunteer is already paired with an event.

        Raises:
            InvalidInputException: If either identifier is blank.
            VolunteerNotFoundException / EventNotFoundException: If unknown.
        """
        check = self.matching.check_pairing(volunteer_id, event_id)
        return self._to_check_response(check, volunteer_id, event_id)

    def check_pairing_by_name(self, volunteer_name: str, event_name: str) -> PairingCheckResponse:
        check = self.matching.check_pairing_by_name(volunteer_name, event_name)
        return self._to_check_response(check, volunteer_name, event_name)

    def _to_check_response(
        self,
        check: PairingCheck,
        volunteer_key: str,
        event_key: str
    ) -> PairingCheckResponse:
        if check.status == MatchStatus.INVALID_INPUT:
            raise InvalidInputException(check.message)
        if check.status == MatchStatus.NOT_FOUND:
            if check.volunteer is None:
                raise VolunteerNotFoundException(f"Volunteer {volunteer_key} not found")
            raise EventNotFoundException(f"Event {event_key} not found")

        logger.debug(
            f"Pairing check {check.volunteer.volunteer_id}/{check.event.event_id}: exists={check.exists}"
        )
        return PairingCheckResponse(
            success=True,
            exists=check.exists,
            volunteer=self._to_volunteer_summary(check.volunteer),
            event=self._to_event_summary(check.event)
        )

    def _to_volunteer_summary(self, volunteer: VolunteerProfile) -> VolunteerSummary:
        return VolunteerSummary(
            volunteer_id=volunteer.volunteer_id,
            full_name=volunteer.full_name,
            skills=list(volunteer.skills),
            city=volunteer.city,
            state=volunteer.region,
            zip_code=volunteer.postal_code,
            availability=list(volunteer.availability)
        )

    def _to_event_summary(self, event: EventRecord) -> EventSummary:
        return EventSummary(
            event_id=event.event_id,
            event_name=event.name,
            location=event.location,
            required_skills=list(event.required_skills),
            urgency=event.urgency,
            event_date=event.event_date
        )
