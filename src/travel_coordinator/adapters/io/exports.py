"""Export helpers for scored flight offers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from travel_coordinator.adapters.storage.repositories import ensure_dir
from travel_coordinator.core.errors import ValidationError
from travel_coordinator.core.models import FlightOffer, RankedOffer, ScoreBreakdown, ScoringPreference
from travel_coordinator.modules.flights.benchmark import benchmark_price
from travel_coordinator.modules.flights.booking import resolve_booking_url
from travel_coordinator.modules.flights.carriers import carrier_names
from travel_coordinator.modules.flights.cleaning import format_duration
from travel_coordinator.modules.flights.scoring import rank_offers

OFFER_HEADERS = [
    "rank",
    "id",
    "best_value",
    "score",
    "price_score",
    "duration_score",
    "layover_score",
    "price",
    "currency",
    "duration",
    "layovers",
    "carriers",
    "cabin_class",
    "origin_airport",
    "destination_airport",
    "outbound_departure",
    "return_departure",
    "booking_url",
]


def offer_from_dict(data: Mapping[str, Any]) -> FlightOffer:
    """Build an offer from its serialized (snake_case) form."""
    carriers = data.get("carriers") or ()
    if isinstance(carriers, str):
        carriers = (carriers,)
    return FlightOffer(
        id=str(data["id"]),
        price=float(data["price"]),
        total_duration_minutes=int(data["total_duration_minutes"]),
        layovers=int(data.get("layovers") or 0),
        currency=str(data.get("currency") or "USD").upper(),
        carrier=data.get("carrier"),
        carriers=tuple(carriers),
        cabin_class=data.get("cabin_class") or "economy",
        baggage_included=bool(data.get("baggage_included", False)),
        refundable=bool(data.get("refundable", False)),
        option_number=data.get("option_number"),
        outbound_departure=data.get("outbound_departure"),
        outbound_arrival=data.get("outbound_arrival"),
        return_departure=data.get("return_departure"),
        return_arrival=data.get("return_arrival"),
        origin_airport=data.get("origin_airport"),
        destination_airport=data.get("destination_airport"),
        booking_url=data.get("booking_url"),
        offer_id=data.get("offer_id"),
    )


def offers_from_list(items: Iterable[Mapping[str, Any]]) -> List[FlightOffer]:
    offers: List[FlightOffer] = []
    for index, item in enumerate(items, 1):
        if not isinstance(item, Mapping):
            raise ValidationError(f"offer #{index} is not an object: {item!r}")
        offers.append(offer_from_dict(item))
    return offers


def serialize_offer(offer: FlightOffer) -> Dict[str, Any]:
    return {
        "id": offer.id,
        "option_number": offer.option_number,
        "price": offer.price,
        "currency": offer.currency,
        "total_duration_minutes": offer.total_duration_minutes,
        "layovers": offer.layovers,
        "carrier": offer.carrier,
        "carriers": list(offer.carriers),
        "cabin_class": offer.cabin_class,
        "baggage_included": offer.baggage_included,
        "refundable": offer.refundable,
        "outbound_departure": offer.outbound_departure,
        "outbound_arrival": offer.outbound_arrival,
        "return_departure": offer.return_departure,
        "return_arrival": offer.return_arrival,
        "origin_airport": offer.origin_airport,
        "destination_airport": offer.destination_airport,
        "booking_url": offer.booking_url,
        "offer_id": offer.offer_id,
    }


def _serialize_breakdown(breakdown: ScoreBreakdown) -> Dict[str, float]:
    return {
        "price_score": round(breakdown.price_score, 2),
        "duration_score": round(breakdown.duration_score, 2),
        "layover_score": round(breakdown.layover_score, 2),
        "total": round(breakdown.total, 2),
    }


def _serialize_ranked(item: RankedOffer, rank: int) -> Dict[str, Any]:
    offer = item.offer
    payload = serialize_offer(offer)
    payload.update(
        {
            "rank": rank,
            "best_value": item.best_value,
            "score": round(item.score, 2),
            "breakdown": _serialize_breakdown(item.breakdown),
            "carrier_names": carrier_names(offer.carriers),
            "duration_label": format_duration(offer.total_duration_minutes),
            "resolved_booking_url": resolve_booking_url(
                offer,
                offer.origin_airport,
                offer.destination_airport,
                offer.outbound_departure,
                offer.return_departure,
            ),
        }
    )
    return payload


def serialize_scored_offers(
    offers: Sequence[FlightOffer],
    preference: ScoringPreference,
) -> Dict[str, Any]:
    ranked = rank_offers(offers, preference)
    best = next((item.offer.id for item in ranked if item.best_value), None)
    return {
        "preference": preference.value,
        "count": len(ranked),
        "best_value_id": best,
        "benchmark_price": benchmark_price(offers),
        "offers": [_serialize_ranked(item, rank) for rank, item in enumerate(ranked, 1)],
    }


def _offer_row(entry: Dict[str, Any]) -> Dict[str, Any]:
    breakdown = entry["breakdown"]
    return {
        "rank": entry["rank"],
        "id": entry["id"],
        "best_value": "yes" if entry["best_value"] else "",
        "score": entry["score"],
        "price_score": breakdown["price_score"],
        "duration_score": breakdown["duration_score"],
        "layover_score": breakdown["layover_score"],
        "price": entry["price"],
        "currency": entry["currency"],
        "duration": entry["duration_label"],
        "layovers": entry["layovers"],
        "carriers": entry["carrier_names"],
        "cabin_class": entry["cabin_class"],
        "origin_airport": entry["origin_airport"],
        "destination_airport": entry["destination_airport"],
        "outbound_departure": entry["outbound_departure"],
        "return_departure": entry["return_departure"],
        "booking_url": entry["resolved_booking_url"],
    }


def write_scored_excel(path: Path, scored: Dict[str, Any], headers: Optional[List[str]] = None) -> None:
    """Write a serialized scoring result to an ``.xlsx`` workbook."""
    from openpyxl import Workbook

    headers = headers or OFFER_HEADERS
    ensure_dir(path.parent)

    wb = Workbook()
    wb.remove(wb.active)

    ws = wb.create_sheet(title="Offers")
    ws.append(headers)
    for entry in scored["offers"]:
        row = _offer_row(entry)
        ws.append([row.get(col) for col in headers])
    ws.freeze_panes = "A2"
    ws.auto_filter.ref = ws.dimensions

    summary = wb.create_sheet(title="Summary")
    summary.append(["preference", scored["preference"]])
    summary.append(["count", scored["count"]])
    summary.append(["best_value_id", scored["best_value_id"]])
    summary.append(["benchmark_price", scored["benchmark_price"]])

    wb.save(path)
