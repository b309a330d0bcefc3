#!/usr/bin/env python3
"""
Unit tests for free-text region/postal extraction.
"""

import unittest

from core.matching.location import extract_region_and_postal, LocationParts


class TestExtractRegionAndPostal(unittest.TestCase):
    """Tests for the location heuristic."""

    def test_region_and_postal_after_comma(self):
        parts = extract_region_and_postal("Houston Community Center, 456 Oak St, Houston, TX 77002")
        self.assertEqual(parts.region, "TX")
        self.assertEqual(parts.postal, "77002")

    def test_region_and_postal_without_comma(self):
        parts = extract_region_and_postal("Downtown Austin TX 78701 near the river")
        self.assertEqual(parts, LocationParts(region="TX", postal="78701"))

    def test_region_and_postal_at_start(self):
        parts = extract_region_and_postal("TX 77002")
        self.assertEqual(parts, LocationParts(region="TX", postal="77002"))

    def test_six_digit_number_is_not_a_postal_code(self):
        parts = extract_region_and_postal("Warehouse, TX 770021")
        self.assertEqual(parts.region, "TX")
        self.assertIsNone(parts.postal)

    def test_region_only(self):
        parts = extract_region_and_postal("Memorial Park, Houston, TX")
        self.assertEqual(parts.region, "TX")
        self.assertIsNone(parts.postal)

    def test_region_only_with_trailing_text(self):
        parts = extract_region_and_postal("Somewhere in CA (exact address TBD)")
        self.assertEqual(parts, LocationParts(region="CA"))

    def test_longer_uppercase_words_are_not_regions(self):
        parts = extract_region_and_postal("USA HQ building")
        self.assertEqual(parts.region, "HQ")

        parts = extract_region_and_postal("NASA headquarters")
        self.assertEqual(parts, LocationParts())

    def test_neither(self):
        self.assertEqual(extract_region_and_postal("Online"), LocationParts())
        self.assertEqual(extract_region_and_postal("city hall, houston tx 77002"), LocationParts())

    def test_empty_and_none_do_not_raise(self):
        self.assertEqual(extract_region_and_postal(""), LocationParts())
        self.assertEqual(extract_region_and_postal(None), LocationParts())


if __name__ == '__main__':
    unittest.main(verbosity=2)
