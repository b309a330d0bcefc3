#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class VolunteerSummary(BaseModel):
    """Volunteer fields relevant to matching."""
    volunteer_id: str
    full_name: str
    skills: List[str] = Field(default_factory=list)
    city: str = ""
    state: str = ""
    zip_code: str = ""
    availability: List[str] = Field(default_factory=list)


class EventSummary(BaseModel):
    """Event fields relevant to matching."""
    event_id: str
    event_name: str
    location: str
    required_skills: List[str] = Field(default_factory=list)
    urgency: str
    event_date: datetime


class VolunteerMatch(BaseModel):
    """A volunteer ranked for one event."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "volunteer": {
                    "volunteer_id": "v1",
                    "full_name": "Alpha",
                    "skills": ["First Aid", "Logistics"],
                    "city": "Houston",
                    "state": "TX",
                    "zip_code": "77001",
                    "availability": ["2030-12-01"]
                },
                "score": 15,
                "reasons": [
                    "Skills overlap (+10): First Aid, Logistics",
                    "Available on event date 2030-12-01 (+3)",
                    "Exact ZIP match 77001 (+2)"
                ]
            }
        }
    )

    volunteer: VolunteerSummary
    score: int = Field(ge=0)
    reasons: List[str] = Field(default_factory=list)


class EventMatchesResponse(BaseModel):
    """Ranked volunteers for one event."""
    success: bool
    event_id: str
    count: int
    matches: List[VolunteerMatch]


class GlobalPairMatch(BaseModel):
    """A ranked volunteer/event pair."""
    volunteer: VolunteerSummary
    event: EventSummary
    score: int = Field(gt=0)
    reasons: List[str] = Field(default_factory=list)


class GlobalMatchesResponse(BaseModel):
    """Best volunteer/event pairs across all events."""
    success: bool
    count: int
    matches: List[GlobalPairMatch]


class PairingCheckResponse(BaseModel):
    """Whether a pairing record already exists for a volunteer/event."""
    success: bool
    exists: bool
    volunteer: Optional[VolunteerSummary] = None
    event: Optional[EventSummary] = None
