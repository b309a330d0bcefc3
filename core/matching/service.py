#!/usr/bin/env python3
"""
Matching Service - Rank volunteers for events.

Two ranking modes share one scoring function:

1. Per-event: every eligible volunteer for one event, zero scores included,
   sorted by score only (ties keep load order).
2. Global: the whole volunteer x event cross-product, zero scores dropped,
   sorted with a multi-key tie-break.

Each call re-reads fresh snapshots from the data source; nothing is cached
or persisted.
"""
from typing import Callable, Dict, List, Optional, Set
import logging

from core.config_loader import MatchingConfig
from core.matching.eligibility import build_exclusions, is_eligible, pairing_exists
from core.matching.interfaces import MatchingDataSource
from core.matching.models import (
    VolunteerProfile, EventRecord, ScoreResult, MatchResult, GlobalMatchResult,
    MatchStatus, EventMatchOutcome, PairingCheck
)
from core.matching.scoring import score_pair

logger = logging.getLogger(__name__)


def _is_valid_identifier(value) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_valid_k(k) -> bool:
    return isinstance(k, int) and not isinstance(k, bool) and k > 0


def _global_sort_key(item):
    """Score, overlap, availability, locality (all desc), then soonest event."""
    pair, details = item
    return (
        -details.score,
        -details.skill_overlap_count,
        not details.availability_matched,
        -details.locality_points,
        pair.event.event_date.timestamp(),
    )


class MatchingService:
    """
    Service for volunteer/event matching.

    Stateless between calls apart from its collaborators; safe to build once
    per request.
    """

    def __init__(
        self,
        source: MatchingDataSource,
        config: Optional[MatchingConfig] = None
    ):
        """
        Initialize matching service with dependencies.

        Args:
            source: MatchingDataSource for snapshot loads
            config: MatchingConfig with weights and default top-K
        """
        self.source = source
        self.config = config or MatchingConfig()

    def _load_exclusions(self, volunteers: List[VolunteerProfile]) -> Dict[str, Set[str]]:
        history_by_volunteer = {
            v.volunteer_id: self.source.load_pairing_history(v.volunteer_id)
            for v in volunteers
        }
        return build_exclusions(history_by_volunteer)

    def rank_volunteers_for_event(
        self,
        event_id: str,
        k: Optional[int] = None
    ) -> EventMatchOutcome:
        """
        Rank all eligible volunteers for one event.

        Zero-score volunteers are kept; an admin browsing one event sees
        everyone who could still be asked.

        Args:
            event_id: Event identifier (non-empty, non-whitespace)
            k: Maximum number of results (defaults to config.event_top_k)

        Returns:
            EventMatchOutcome with status OK, INVALID_INPUT or NOT_FOUND
        """
        if not _is_valid_identifier(event_id):
            logger.warning(f"Rejected ranking request with invalid event id: {event_id!r}")
            return EventMatchOutcome(status=MatchStatus.INVALID_INPUT, message="Invalid eventId")

        if k is None:
            k = self.config.event_top_k
        if not _is_valid_k(k):
            logger.warning(f"Rejected ranking request for event {event_id} with k={k!r}")
            return EventMatchOutcome(status=MatchStatus.INVALID_INPUT, message="Invalid top K")

        event = self.source.load_event(event_id)
        if event is None:
            return EventMatchOutcome(status=MatchStatus.NOT_FOUND, message="Event not found")

        volunteers = self.source.load_all_volunteers()
        exclusions = self._load_exclusions(volunteers)
        eligible = [
            v for v in volunteers
            if is_eligible(exclusions, v.volunteer_id, event.event_id)
        ]

        scored = []
        for volunteer in eligible:
            details = score_pair(volunteer, event, self.config.weights)
            scored.append(MatchResult(
                volunteer=volunteer,
                score=details.score,
                reasons=details.reasons
            ))

        # list.sort is stable: equal scores keep load order
        scored.sort(key=lambda m: m.score, reverse=True)

        logger.info(
            f"Event {event.event_id}: {len(volunteers)} volunteers, "
            f"{len(eligible)} eligible, returning top {min(k, len(scored))}"
        )
        return EventMatchOutcome(status=MatchStatus.OK, matches=scored[:k])

    def rank_top_pairs_globally(self, k: Optional[int] = None) -> List[GlobalMatchResult]:
        """
        Rank the best volunteer/event pairs across the whole system.

        Only pairs scoring above zero are kept. Ties on score are broken by
        skill overlap count, then availability, then locality, then the
        earlier event date.

        Args:
            k: Maximum number of pairs (defaults to config.global_top_k)

        Returns:
            Ranked pairs; an empty list when nothing matches

        Raises:
            ValueError: If k is not a positive integer
        """
        if k is None:
            k = self.config.global_top_k
        if not _is_valid_k(k):
            raise ValueError(f"k must be a positive integer, got {k!r}")

        events = self.source.load_all_events()
        volunteers = self.source.load_all_volunteers()
        exclusions = self._load_exclusions(volunteers)

        kept = []
        considered = 0
        for volunteer in volunteers:
            for event in events:
                if not is_eligible(exclusions, volunteer.volunteer_id, event.event_id):
                    continue
                considered += 1

                details: ScoreResult = score_pair(volunteer, event, self.config.weights)
                if details.score <= 0:
                    continue

                pair = GlobalMatchResult(
                    volunteer=volunteer,
                    event=event,
                    score=details.score,
                    reasons=details.reasons
                )
                kept.append((pair, details))

        kept.sort(key=_global_sort_key)

        logger.info(
            f"Global ranking: {len(volunteers)} volunteers x {len(events)} events, "
            f"{considered} eligible pairs, {len(kept)} with positive score"
        )
        return [pair for pair, _ in kept[:k]]

    def check_pairing(self, volunteer_id: str, event_id: str) -> PairingCheck:
        """
        Report whether a pairing record already exists for a volunteer/event.

        Args:
            volunteer_id: Volunteer identifier
            event_id: Event identifier

        Returns:
            PairingCheck with status OK, INVALID_INPUT or NOT_FOUND
        """
        if not _is_valid_identifier(volunteer_id) or not _is_valid_identifier(event_id):
            return PairingCheck(
                status=MatchStatus.INVALID_INPUT,
                message="volunteerId and eventId are required"
            )

        return self._check_loaded(
            self.source.load_volunteer(volunteer_id),
            lambda: self.source.load_event(event_id)
        )

    def check_pairing_by_name(self, volunteer_name: str, event_name: str) -> PairingCheck:
        """
        Same as check_pairing, but finds the volunteer by full name and the
        event by name, case-insensitively. The first match in load order wins.
        """
        if not _is_valid_identifier(volunteer_name) or not _is_valid_identifier(event_name):
            return PairingCheck(
                status=MatchStatus.INVALID_INPUT,
                message="volunteerName and eventName are required"
            )

        wanted_volunteer = volunteer_name.strip().lower()
        wanted_event = event_name.strip().lower()
        volunteer = next(
            (v for v in self.source.load_all_volunteers()
             if v.full_name.lower() == wanted_volunteer),
            None
        )
        return self._check_loaded(
            volunteer,
            lambda: next(
                (e for e in self.source.load_all_events()
                 if e.name.lower() == wanted_event),
                None
            )
        )

    def _check_loaded(
        self,
        volunteer: Optional[VolunteerProfile],
        find_event: Callable[[], Optional[EventRecord]]
    ) -> PairingCheck:
        if volunteer is None:
            return PairingCheck(status=MatchStatus.NOT_FOUND, message="Volunteer not found")

        event = find_event()
        if event is None:
            return PairingCheck(
                status=MatchStatus.NOT_FOUND,
                volunteer=volunteer,
                message="Event not found"
            )

        history = self.source.load_pairing_history(volunteer.volunteer_id)
        return PairingCheck(
            status=MatchStatus.OK,
            exists=pairing_exists(history, event.event_id),
            volunteer=volunteer,
            event=event
        )
