"""Flights module."""

from travel_coordinator.modules.flights.airports import extract_airport_code
from travel_coordinator.modules.flights.booking import resolve_booking_url
from travel_coordinator.modules.flights.scoring import compute_scores, pick_best_value

__all__ = ["compute_scores", "extract_airport_code", "pick_best_value", "resolve_booking_url"]
