"""Carrier code to display name lookup."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

CARRIER_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "AA": "American Airlines",
        "DL": "Delta Air Lines",
        "UA": "United Airlines",
        "WN": "Southwest Airlines",
        "B6": "JetBlue Airways",
        "AS": "Alaska Airlines",
        "NK": "Spirit Airlines",
        "F9": "Frontier Airlines",
        "G4": "Allegiant Air",
        "HA": "Hawaiian Airlines",
        "SY": "Sun Country Airlines",
        "AC": "Air Canada",
        "BA": "British Airways",
        "LH": "Lufthansa",
        "AF": "Air France",
        "KL": "KLM",
        "EK": "Emirates",
        "QR": "Qatar Airways",
        "SQ": "Singapore Airlines",
        "CX": "Cathay Pacific",
        "NH": "All Nippon Airways",
        "JL": "Japan Airlines",
    }
)


def carrier_name(code: str) -> str:
    return CARRIER_NAMES.get(code, code)


def carrier_names(codes: Iterable[str], separator: str = ", ") -> str:
    return separator.join(carrier_name(code) for code in codes)
