#!/usr/bin/env python3
"""
Scoring Engine - Fixed, explainable linear score for a volunteer/event pair.

Components are evaluated in a fixed order and each one that contributes
appends exactly one reason:

1. Skill overlap   (weights.skill per overlapping skill)
2. Availability    (weights.availability if free on the event date)
3. Locality        (weights.postal on exact ZIP, else weights.region on state)
"""

import logging
from typing import Optional

from core.config_loader import MatchWeights
from core.matching.location import extract_region_and_postal
from core.matching.models import (
    VolunteerProfile, EventRecord, ScoreResult, format_calendar_date
)

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = MatchWeights()


def score_pair(
    volunteer: VolunteerProfile,
    event: EventRecord,
    weights: Optional[MatchWeights] = None
) -> ScoreResult:
    """
    Score one volunteer against one event.

    Pure and deterministic: the same inputs always give the same score and
    reasons. A pair with no contributions scores 0 with no reasons.

    Args:
        volunteer: Volunteer snapshot
        event: Event snapshot
        weights: Optional weight override (defaults to 5/3/2/1)

    Returns:
        ScoreResult with score, ordered reasons and tie-break components
    """
    w = weights or DEFAULT_WEIGHTS
    result = ScoreResult()

    # Skill overlap, exact and case-sensitive, in the volunteer's order
    required = set(event.required_skills or [])
    overlap = [s for s in volunteer.skills if s in required]
    if overlap:
        points = len(overlap) * w.skill
        result.score += points
        result.skill_overlap_count = len(overlap)
        result.reasons.append(f"Skills overlap (+{points}): {', '.join(overlap)}")

    # Availability on the event's calendar date
    event_day = format_calendar_date(event.event_date)
    if event_day in volunteer.availability:
        result.score += w.availability
        result.availability_matched = True
        result.reasons.append(f"Available on event date {event_day} (+{w.availability})")

    # Locality: ZIP match wins and suppresses the state check
    parts = extract_region_and_postal(event.location)
    if parts.postal and volunteer.postal_code == parts.postal:
        result.score += w.postal
        result.locality_points = w.postal
        result.reasons.append(f"Exact ZIP match {parts.postal} (+{w.postal})")
    elif parts.region and volunteer.region == parts.region:
        result.score += w.region
        result.locality_points = w.region
        result.reasons.append(f"Same state {parts.region} (+{w.region})")

    logger.debug(
        f"Scored volunteer {volunteer.volunteer_id} for event {event.event_id}: "
        f"{result.score} ({len(result.reasons)} reasons)"
    )
    return result
