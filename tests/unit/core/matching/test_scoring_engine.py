#!/usr/bin/env python3
"""
Unit tests for the volunteer/event scoring function.
"""

import unittest
from datetime import date, datetime, timezone, timedelta

from core.config_loader import MatchWeights
from core.matching.scoring import score_pair, DEFAULT_WEIGHTS
from tests.mocks.matching_mocks import make_volunteer, make_event


class TestWeights(unittest.TestCase):
    """Verify weight configuration."""

    def test_default_weights(self):
        self.assertEqual(DEFAULT_WEIGHTS.skill, 5)
        self.assertEqual(DEFAULT_WEIGHTS.availability, 3)
        self.assertEqual(DEFAULT_WEIGHTS.postal, 2)
        self.assertEqual(DEFAULT_WEIGHTS.region, 1)


class TestScorePair(unittest.TestCase):
    """Tests for score_pair."""

    def setUp(self):
        self.event = make_event(
            required_skills=["First Aid", "Logistics"],
            location="Houston, TX 77001",
            event_date=datetime(2030, 12, 1, 9, 0),
        )

    def test_full_match(self):
        volunteer = make_volunteer(
            skills=["First Aid", "Logistics"],
            postal_code="77001",
            availability=["2030-12-01"],
        )
        result = score_pair(volunteer, self.event)

        self.assertEqual(result.score, 2 * 5 + 3 + 2)
        self.assertEqual(result.reasons, [
            "Skills overlap (+10): First Aid, Logistics",
            "Available on event date 2030-12-01 (+3)",
            "Exact ZIP match 77001 (+2)",
        ])
        self.assertEqual(result.skill_overlap_count, 2)
        self.assertTrue(result.availability_matched)
        self.assertEqual(result.locality_points, 2)

    def test_partial_skill_and_same_state(self):
        volunteer = make_volunteer(skills=["First Aid"], postal_code="75001", region="TX")
        result = score_pair(volunteer, self.event)

        self.assertEqual(result.score, 5 + 1)
        self.assertEqual(len(result.reasons), 2)
        self.assertEqual(result.reasons[1], "Same state TX (+1)")
        self.assertFalse(result.availability_matched)
        self.assertEqual(result.locality_points, 1)

    def test_no_match_scores_zero_with_no_reasons(self):
        volunteer = make_volunteer(skills=["Cooking"], region="CA", postal_code="90001")
        result = score_pair(volunteer, self.event)

        self.assertEqual(result.score, 0)
        self.assertEqual(result.reasons, [])
        self.assertEqual(result.skill_overlap_count, 0)
        self.assertEqual(result.locality_points, 0)

    def test_skill_match_is_case_sensitive(self):
        volunteer = make_volunteer(skills=["first aid"], region="CA", postal_code="90001")
        self.assertEqual(score_pair(volunteer, self.event).score, 0)

    def test_overlap_follows_volunteer_order(self):
        volunteer = make_volunteer(skills=["Logistics", "Cooking", "First Aid"], region="CA")
        result = score_pair(volunteer, self.event)
        self.assertEqual(result.reasons[0], "Skills overlap (+10): Logistics, First Aid")

    def test_postal_match_suppresses_region_match(self):
        volunteer = make_volunteer(region="TX", postal_code="77001")
        result = score_pair(volunteer, self.event)

        self.assertEqual(result.score, 2)
        self.assertEqual(result.reasons, ["Exact ZIP match 77001 (+2)"])

    def test_region_match_when_event_has_no_postal(self):
        event = make_event(location="Memorial Park, Houston, TX")
        volunteer = make_volunteer(region="TX", postal_code="77001")
        result = score_pair(volunteer, event)

        self.assertEqual(result.score, 1)
        self.assertEqual(result.reasons, ["Same state TX (+1)"])

    def test_unparseable_location_scores_no_locality(self):
        event = make_event(location="Online")
        volunteer = make_volunteer(region="TX", postal_code="77001")
        self.assertEqual(score_pair(volunteer, event).score, 0)

    def test_availability_uses_event_calendar_date(self):
        # Late evening in a UTC-5 zone is already the next day in UTC;
        # the event's own calendar day is what counts.
        event = make_event(
            location="Online",
            event_date=datetime(2030, 12, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5))),
        )
        volunteer = make_volunteer(availability=["2030-12-01"])
        result = score_pair(volunteer, event)

        self.assertEqual(result.score, 3)
        self.assertEqual(result.reasons, ["Available on event date 2030-12-01 (+3)"])

    def test_availability_accepts_date_objects(self):
        event = make_event(location="Online")
        volunteer = make_volunteer(availability=[date(2030, 12, 1)])
        self.assertTrue(score_pair(volunteer, event).availability_matched)

    def test_custom_weights(self):
        weights = MatchWeights(skill=10, availability=4, postal=3, region=2)
        volunteer = make_volunteer(skills=["First Aid"], availability=["2030-12-01"], postal_code="77001")
        self.assertEqual(score_pair(volunteer, self.event, weights).score, 10 + 4 + 3)

    def test_deterministic(self):
        volunteer = make_volunteer(skills=["Logistics"], availability=["2030-12-01"])
        first = score_pair(volunteer, self.event)
        second = score_pair(volunteer, self.event)

        self.assertEqual(first.score, second.score)
        self.assertEqual(first.reasons, second.reasons)

    def test_reasons_empty_iff_score_zero(self):
        volunteers = [
            make_volunteer(skills=s, availability=a, region=r, postal_code=p)
            for s in ([], ["First Aid"])
            for a in ([], ["2030-12-01"])
            for r, p in (("CA", "90001"), ("TX", "75001"), ("TX", "77001"))
        ]
        for volunteer in volunteers:
            result = score_pair(volunteer, self.event)
            self.assertGreaterEqual(result.score, 0)
            self.assertEqual(result.score == 0, result.reasons == [])


if __name__ == '__main__':
    unittest.main(verbosity=2)
