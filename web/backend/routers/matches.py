#!/usr/bin/env python3
"""
Match endpoints - rank volunteers for events.
"""

import math
from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.matching import MatchingService
from ..dependencies import get_matching_service
from ..exceptions import InvalidInputException
from ..services.match_service import MatchService
from ..models.responses import (
    EventMatchesResponse,
    GlobalMatchesResponse,
    PairingCheckResponse
)

router = APIRouter(prefix="/api/matches", tags=["matches"])


def parse_top(top: Optional[str]) -> Optional[int]:
    """Parse the ?top= parameter: a finite positive number, truncated to int."""
    if top is None:
        return None
    try:
        parsed = float(top)
    except ValueError:
        raise InvalidInputException("Invalid top parameter")
    # 0.5 truncates to 0 and is rejected like any non-positive value
    if not math.isfinite(parsed) or int(parsed) < 1:
        raise InvalidInputException("Invalid top parameter")
    return int(parsed)


@router.get("/global", response_model=GlobalMatchesResponse)
def get_global_matches(
    top: Optional[str] = Query(default=None, description="Maximum pairs to return (default 1)"),
    matching: MatchingService = Depends(get_matching_service)
):
    """
    Get the best volunteer/event pairs across all events.

    Pairs with a zero score are never returned.
    """
    return MatchService(matching).get_global_matches(parse_top(top))


@router.get("/check", response_model=PairingCheckResponse)
def check_pairing(
    volunteer_id: str = Query(default="", description="Volunteer identifier"),
    event_id: str = Query(default="", description="Event identifier"),
    volunteer_name: str = Query(default="", description="Volunteer full name (case-insensitive)"),
    event_name: str = Query(default="", description="Event name (case-insensitive)"),
    matching: MatchingService = Depends(get_matching_service)
):
    """
    Check whether a volunteer already has a pairing record for an event.

    Look up by volunteer_id/event_id, or by volunteer_name/event_name when
    either name is given.
    """
    service = MatchService(matching)
    if volunteer_name.strip() or event_name.strip():
        return service.check_pairing_by_name(volunteer_name.strip(), event_name.strip())
    return service.check_pairing(volunteer_id.strip(), event_id.strip())


@router.get("/{event_id}", response_model=EventMatchesResponse)
def get_event_matches(
    event_id: str,
    top: Optional[str] = Query(default=None, description="Maximum volunteers to return (default 10)"),
    matching: MatchingService = Depends(get_matching_service)
):
    """
    Rank every eligible volunteer for one event.

    Volunteers already paired with the event (any status) are excluded.
    Zero-score volunteers are included.

    Events whose id is literally "global" or "check" are shadowed by the
    routes above and cannot be ranked through this path.
    """
    return MatchService(matching).get_event_matches(event_id, parse_top(top))
