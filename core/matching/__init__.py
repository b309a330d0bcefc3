"""Matching Module - Volunteer/event scoring and ranking."""
from core.matching.models import (
    VolunteerProfile, EventRecord, PairingRecord, ScoreResult,
    MatchResult, GlobalMatchResult, MatchStatus, EventMatchOutcome, PairingCheck
)
from core.matching.location import LocationParts, extract_region_and_postal
from core.matching.scoring import score_pair
from core.matching.eligibility import build_exclusions, is_eligible
from core.matching.interfaces import MatchingDataSource
from core.matching.service import MatchingService

__all__ = [
    'MatchingService', 'MatchingDataSource',
    'score_pair', 'extract_region_and_postal', 'LocationParts',
    'build_exclusions', 'is_eligible',
    'VolunteerProfile', 'EventRecord', 'PairingRecord', 'ScoreResult',
    'MatchResult', 'GlobalMatchResult', 'MatchStatus', 'EventMatchOutcome',
    'PairingCheck'
]
