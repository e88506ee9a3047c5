"""Resolve free-text locations to IATA airport codes."""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

LOG = logging.getLogger(__name__)

# Insertion order matters for the substring rule.
CITY_TO_AIRPORT: Mapping[str, str] = MappingProxyType(
    {
        "Tampa": "TPA",
        "Tampa, FL": "TPA",
        "New York": "JFK",
        "New York, NY": "JFK",
        "Los Angeles": "LAX",
        "Los Angeles, CA": "LAX",
        "Chicago": "ORD",
        "Chicago, IL": "ORD",
        "Miami": "MIA",
        "Miami, FL": "MIA",
        "San Francisco": "SFO",
        "San Francisco, CA": "SFO",
        "Boston": "BOS",
        "Boston, MA": "BOS",
        "Seattle": "SEA",
        "Seattle, WA": "SEA",
        "Atlanta": "ATL",
        "Atlanta, GA": "ATL",
        "Dallas": "DFW",
        "Dallas, TX": "DFW",
        "Houston": "IAH",
        "Houston, TX": "IAH",
        "Denver": "DEN",
        "Denver, CO": "DEN",
        "Phoenix": "PHX",
        "Phoenix, AZ": "PHX",
        "Las Vegas": "LAS",
        "Las Vegas, NV": "LAS",
        "Orlando": "MCO",
        "Orlando, FL": "MCO",
        # Country-level searches default to the main hub.
        "India": "DEL",
        "UK": "LHR",
        "United Kingdom": "LHR",
    }
)

_IATA_TOKEN = re.compile(r"\b[A-Z]{3}\b")


def match_exact(location: str, table: Mapping[str, str] = CITY_TO_AIRPORT) -> Optional[str]:
    return table.get(location.strip())


def match_iata_token(location: str) -> Optional[str]:
    match = _IATA_TOKEN.search(location)
    return match.group(0) if match else None


def match_substring(location: str, table: Mapping[str, str] = CITY_TO_AIRPORT) -> Optional[str]:
    """First table key contained in ``location``, compared case-insensitively.

    Composite strings naming two known cities resolve to whichever key comes
    first in the table.
    """
    lowered = location.strip().lower()
    for city, code in table.items():
        if city.lower() in lowered:
            return code
    return None


def truncate_code(location: str) -> str:
    return location[:3].upper()


RULES: Tuple[Tuple[str, Callable[[str], Optional[str]]], ...] = (
    ("exact", match_exact),
    ("iata_token", match_iata_token),
    ("substring", match_substring),
)


def extract_airport_code(location: str) -> str:
    """Resolve ``location`` to a 3-letter code; the first matching rule wins.

    Falls back to the first three characters of the input, upper-cased, so
    resolution never fails.
    """
    for name, rule in RULES:
        code = rule(location)
        if code:
            LOG.debug("Resolved %r to %s via %s", location, code, name)
            return code
    code = truncate_code(location)
    LOG.debug("No airport match for %r, falling back to %s", location, code)
    return code
