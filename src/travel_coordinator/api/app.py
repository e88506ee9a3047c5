"""FastAPI entrypoint for the Travel Coordinator flight tools."""

from __future__ import annotations

import logging
from typing import Dict

from fastapi import FastAPI, HTTPException, Query

from travel_coordinator.adapters.io.exports import serialize_offer, serialize_scored_offers
from travel_coordinator.api.schemas import ProviderPayload, ScorePayload
from travel_coordinator.core.config import load_scoring_config
from travel_coordinator.core.errors import ValidationError
from travel_coordinator.core.models import ScoringPreference
from travel_coordinator.core.normalization import build_meta, is_known_currency
from travel_coordinator.modules.flights.airports import extract_airport_code
from travel_coordinator.modules.flights.cleaning import parse_provider_offers, validate_offers

LOG = logging.getLogger(__name__)

app = FastAPI(title="Travel Coordinator API")


@app.get("/api/health")
def health() -> Dict[str, object]:
    return {"status": "ok", "meta": build_meta()}


@app.post("/api/flights/score")
def score_flights(payload: ScorePayload) -> Dict[str, object]:
    preference = ScoringPreference.parse(payload.preference or load_scoring_config().default_preference)
    offers = [item.to_offer() for item in payload.offers]
    try:
        validate_offers(offers)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    currency = offers[0].currency if offers else None
    if currency and not is_known_currency(currency):
        raise HTTPException(status_code=400, detail=f"Unknown currency: {currency}")

    response = serialize_scored_offers(offers, preference)
    response["meta"] = build_meta(currency)
    return response


@app.post("/api/flights/parse")
def parse_flights(payload: ProviderPayload) -> Dict[str, object]:
    offers = parse_provider_offers(payload.payload, limit=payload.limit)
    LOG.info("Parsed %d offer(s) from provider payload", len(offers))
    return {"count": len(offers), "offers": [serialize_offer(offer) for offer in offers]}


@app.get("/api/airports/resolve")
def resolve_airport(location: str = Query(..., min_length=1)) -> Dict[str, str]:
    return {"location": location, "code": extract_airport_code(location)}
