#!/usr/bin/env python3
"""
Eligibility Filter - Exclude pairs that already have a pairing record.

Status is ignored: pending, confirmed, cancelled and no-show records all
mark the pair as handled.
"""

from typing import Dict, Iterable, Mapping, Set

from core.matching.models import PairingRecord


def paired_event_ids(history: Iterable[PairingRecord]) -> Set[str]:
    """Event ids already paired with a volunteer, regardless of status."""
    return {record.event_id for record in history}


def build_exclusions(
    history_by_volunteer: Mapping[str, Iterable[PairingRecord]]
) -> Dict[str, Set[str]]:
    """
    Build per-volunteer exclusion sets.

    Args:
        history_by_volunteer: Pairing records keyed by volunteer id

    Returns:
        volunteer_id -> set of event ids that volunteer may not be matched to
    """
    return {
        volunteer_id: paired_event_ids(history)
        for volunteer_id, history in history_by_volunteer.items()
    }


def is_eligible(
    exclusions: Mapping[str, Set[str]],
    volunteer_id: str,
    event_id: str
) -> bool:
    """A pair is eligible iff the event is not in the volunteer's exclusion set."""
    return event_id not in exclusions.get(volunteer_id, set())


def pairing_exists(history: Iterable[PairingRecord], event_id: str) -> bool:
    return any(record.event_id == event_id for record in history)
