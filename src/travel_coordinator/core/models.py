"""Shared domain models for flight offers and their scores."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple


class ScoringPreference(Enum):
    BALANCED = "balanced"
    PRICE = "price"
    DURATION = "duration"
    DIRECT = "direct"

    @classmethod
    def parse(cls, value: Optional[object]) -> "ScoringPreference":
        """Read a preference from user input; unknown values mean balanced."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value == text:
                return member
        return cls.BALANCED


@dataclass(frozen=True)
class FlightOffer:
    """One priced itinerary returned by a flight search.

    ``price`` and ``total_duration_minutes`` are expected to be
    non-negative; scoring does not check this (see ``validate_offers``).
    """

    id: str
    price: float
    total_duration_minutes: int
    layovers: int
    currency: str = "USD"
    carrier: Optional[str] = None
    carriers: Tuple[str, ...] = ()
    cabin_class: str = "economy"
    baggage_included: bool = False
    refundable: bool = False
    option_number: Optional[int] = None
    outbound_departure: Optional[str] = None
    outbound_arrival: Optional[str] = None
    return_departure: Optional[str] = None
    return_arrival: Optional[str] = None
    origin_airport: Optional[str] = None
    destination_airport: Optional[str] = None
    booking_url: Optional[str] = None
    offer_id: Optional[str] = None
    raw: Optional[Any] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ScoreBreakdown:
    price_score: float
    duration_score: float
    layover_score: float
    total: float


@dataclass(frozen=True)
class RankedOffer:
    offer: FlightOffer
    breakdown: ScoreBreakdown
    best_value: bool = False

    @property
    def score(self) -> float:
        return self.breakdown.total
