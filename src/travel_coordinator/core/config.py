"""Configuration helpers for booking links and scoring defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BOOKING_URL_TEMPLATE = "https://www.kayak.com/flights/{origin}-{destination}/{dates}?sort=bestflight_a"
DEFAULT_BOOKING_FALLBACK_URL = "https://www.kayak.com/flights"


@dataclass(frozen=True)
class BookingConfig:
    url_template: str
    fallback_url: str


@dataclass(frozen=True)
class ScoringConfig:
    default_preference: str
    log_level: str


def load_booking_config() -> BookingConfig:
    return BookingConfig(
        url_template=os.getenv("TRAVEL_COORDINATOR_BOOKING_URL_TEMPLATE", DEFAULT_BOOKING_URL_TEMPLATE),
        fallback_url=os.getenv("TRAVEL_COORDINATOR_BOOKING_FALLBACK_URL", DEFAULT_BOOKING_FALLBACK_URL),
    )


def load_scoring_config() -> ScoringConfig:
    return ScoringConfig(
        default_preference=os.getenv("TRAVEL_COORDINATOR_DEFAULT_PREFERENCE", "balanced").strip().lower(),
        log_level=os.getenv("TRAVEL_COORDINATOR_LOG_LEVEL", "WARNING").strip().upper(),
    )
