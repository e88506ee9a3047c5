"""Parsing and validation of flight offers from the search provider."""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, List, Optional, Sequence, Set

from travel_coordinator.core.errors import ProviderError, ValidationError
from travel_coordinator.core.models import FlightOffer
from travel_coordinator.core.normalization import normalize_currency
from travel_coordinator.modules.flights.booking import build_search_url

LOG = logging.getLogger(__name__)

DEFAULT_OFFER_LIMIT = 10
UNKNOWN_AIRPORT = "XXX"
UNKNOWN_CARRIER = "XX"

_ISO_DURATION = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")


def parse_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    text = str(value).strip()
    if not text or text.lower() == "none":
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_iso_duration(value: Optional[str]) -> int:
    """Minutes in an ISO-8601 duration such as ``PT5H30M``; 0 when unreadable."""
    if not value:
        return 0
    match = _ISO_DURATION.search(value)
    if not match:
        return 0
    hours = int(match.group(1)) if match.group(1) else 0
    minutes = int(match.group(2)) if match.group(2) else 0
    return hours * 60 + minutes


def format_duration(minutes: int) -> str:
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m"


def _segments(offer: Dict[str, Any], index: int) -> List[Dict[str, Any]]:
    itineraries = offer.get("itineraries") or []
    if index >= len(itineraries):
        return []
    return itineraries[index].get("segments") or []


def _itinerary_duration(offer: Dict[str, Any], index: int) -> int:
    itineraries = offer.get("itineraries") or []
    if index >= len(itineraries):
        return 0
    return parse_iso_duration(itineraries[index].get("duration"))


def _baggage_included(offer: Dict[str, Any]) -> bool:
    pricings = offer.get("travelerPricings") or []
    if not pricings:
        return False
    fare_details = pricings[0].get("fareDetailsBySegment") or []
    if not fare_details:
        return False
    bags = fare_details[0].get("includedCheckedBags") or {}
    return (bags.get("quantity") or 0) > 0


def _endpoint(segment: Optional[Dict[str, Any]], key: str, field: str) -> Optional[str]:
    if not segment:
        return None
    return (segment.get(key) or {}).get(field)


def parse_offer(raw: Dict[str, Any], option_number: int) -> FlightOffer:
    price_info = raw.get("price") or {}
    price = parse_float(price_info.get("total"))
    if price is None:
        raise ProviderError(f"offer {raw.get('id')!r} has no readable price")

    outbound = _segments(raw, 0)
    inbound = _segments(raw, 1)

    carriers: List[str] = []
    for segment in outbound + inbound:
        code = segment.get("carrierCode")
        if code and code not in carriers:
            carriers.append(code)

    first_out = outbound[0] if outbound else None
    last_out = outbound[-1] if outbound else None
    first_in = inbound[0] if inbound else None
    last_in = inbound[-1] if inbound else None

    origin = _endpoint(first_out, "departure", "iataCode") or UNKNOWN_AIRPORT
    destination = _endpoint(last_out, "arrival", "iataCode") or UNKNOWN_AIRPORT
    departure = _endpoint(first_out, "departure", "at")
    return_departure = _endpoint(first_in, "departure", "at")

    offer_id = raw.get("id")
    return FlightOffer(
        id=str(offer_id) if offer_id is not None else str(option_number),
        option_number=option_number,
        price=price,
        currency=normalize_currency(price_info.get("currency")),
        cabin_class=(first_out or {}).get("cabin") or "economy",
        carrier=(first_out or {}).get("carrierCode") or UNKNOWN_CARRIER,
        carriers=tuple(carriers) or (UNKNOWN_CARRIER,),
        layovers=max(len(outbound) - 1, 0),
        total_duration_minutes=_itinerary_duration(raw, 0) + _itinerary_duration(raw, 1),
        baggage_included=_baggage_included(raw),
        refundable=False,
        outbound_departure=departure,
        outbound_arrival=_endpoint(last_out, "arrival", "at"),
        return_departure=return_departure,
        return_arrival=_endpoint(last_in, "arrival", "at"),
        origin_airport=origin,
        destination_airport=destination,
        booking_url=build_search_url(origin, destination, departure, return_departure),
        offer_id=str(offer_id) if offer_id is not None else None,
        raw=raw,
    )


def parse_provider_offers(payload: Any, limit: int = DEFAULT_OFFER_LIMIT) -> List[FlightOffer]:
    """Map a flight-offers search response to ``FlightOffer`` records.

    Only the first ``limit`` offers are read. Offers without a readable price
    are skipped with a warning; a payload without a ``data`` list yields no
    offers.
    """
    if not isinstance(payload, dict):
        return []
    data = payload.get("data")
    if not isinstance(data, list):
        return []

    offers: List[FlightOffer] = []
    for index, raw in enumerate(data[:limit], 1):
        if not isinstance(raw, dict):
            LOG.warning("Skipping offer #%d: not an object", index)
            continue
        try:
            offers.append(parse_offer(raw, index))
        except ProviderError as exc:
            LOG.warning("Skipping offer #%d: %s", index, exc)
    return offers


def validate_offers(offers: Sequence[FlightOffer]) -> None:
    """Reject offers that the scorer cannot handle.

    Raises ``ValidationError`` for negative or non-finite prices and
    durations, repeated offer ids and a batch mixing currencies.
    """
    problems: List[str] = []
    seen: Set[str] = set()
    for offer in offers:
        if offer.id in seen:
            problems.append(f"{offer.id}: duplicate id")
        seen.add(offer.id)
        if not math.isfinite(offer.price):
            problems.append(f"{offer.id}: non-finite price {offer.price}")
        elif offer.price < 0:
            problems.append(f"{offer.id}: negative price {offer.price}")
        if not math.isfinite(offer.total_duration_minutes):
            problems.append(f"{offer.id}: non-finite duration {offer.total_duration_minutes}")
        elif offer.total_duration_minutes < 0:
            problems.append(f"{offer.id}: negative duration {offer.total_duration_minutes}")
        if offer.layovers < 0:
            problems.append(f"{offer.id}: negative layovers {offer.layovers}")
    currencies = sorted({offer.currency for offer in offers})
    if len(currencies) > 1:
        problems.append(f"mixed currencies: {', '.join(currencies)}")
    if problems:
        LOG.warning("Rejected %d offer problem(s): %s", len(problems), "; ".join(problems))
        raise ValidationError("; ".join(problems))
