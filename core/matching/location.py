#!/usr/bin/env python3
"""
Location Parsing - Best-effort region/postal extraction from free text.

Event locations are typed by humans ("Houston Community Center, 456 Oak St,
Houston, TX 77002"), so this is a heuristic, not an address parser. It never
raises: anything it cannot recognize simply yields no region and no postal.
"""

import re
from dataclasses import dataclass
from typing import Optional

# ", TX 77002" or " TX 77002 ..." (a 6th digit means it is not a ZIP)
_REGION_POSTAL_RE = re.compile(r'(?:^|[,\s])([A-Z]{2})\s+(\d{5})(?!\d)')

# A standalone two-letter uppercase token such as "TX" in "Austin TX"
_REGION_RE = re.compile(r'(?<![A-Za-z])([A-Z]{2})(?![A-Za-z])')


@dataclass(frozen=True)
class LocationParts:
    region: Optional[str] = None
    postal: Optional[str] = None


def extract_region_and_postal(location: Optional[str]) -> LocationParts:
    """
    Extract a two-letter region code and a 5-digit postal code.

    Tries the combined "XX 12345" pattern first; falls back to a lone
    region token, in which case postal is None.

    Args:
        location: Free-text location string (may be None or empty)

    Returns:
        LocationParts with whatever could be recognized
    """
    if not location:
        return LocationParts()

    combined = _REGION_POSTAL_RE.search(location)
    if combined:
        return LocationParts(region=combined.group(1), postal=combined.group(2))

    region_only = _REGION_RE.search(location)
    if region_only:
        return LocationParts(region=region_only.group(1))

    return LocationParts()
