"""Booking links for flight offers."""

from __future__ import annotations

import logging
from typing import Optional

from travel_coordinator.core.config import BookingConfig, load_booking_config
from travel_coordinator.core.models import FlightOffer
from travel_coordinator.core.normalization import DateLike, to_iso_date

LOG = logging.getLogger(__name__)


def build_search_url(
    origin: str,
    destination: str,
    departure_date: DateLike,
    return_date: Optional[DateLike] = None,
    config: BookingConfig | None = None,
) -> Optional[str]:
    """Deep-link into the external flight search, or ``None`` if a field is missing."""
    config = config or load_booking_config()
    depart = to_iso_date(departure_date)
    if not origin or not destination or not depart:
        return None
    dates = depart
    ret = to_iso_date(return_date)
    if ret:
        dates = f"{depart}/{ret}"
    return config.url_template.format(origin=origin, destination=destination, dates=dates)


def resolve_booking_url(
    offer: FlightOffer,
    origin: Optional[str],
    destination: Optional[str],
    departure_date: Optional[DateLike],
    return_date: Optional[DateLike] = None,
    config: BookingConfig | None = None,
) -> str:
    config = config or load_booking_config()
    if offer.booking_url:
        return offer.booking_url
    try:
        url = build_search_url(origin or "", destination or "", departure_date, return_date, config=config)
    except (KeyError, IndexError, ValueError) as exc:
        LOG.warning("Invalid booking URL template %r: %s", config.url_template, exc)
        url = None
    if url:
        return url
    LOG.debug("Falling back to generic booking page for offer %s", offer.id)
    return config.fallback_url
