"""Request schemas for the Travel Coordinator API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from travel_coordinator.core.models import FlightOffer


class FlightOfferPayload(BaseModel):
    id: str = Field(..., min_length=1)
    price: float
    total_duration_minutes: int
    layovers: int = 0
    currency: str = "USD"
    carrier: Optional[str] = None
    carriers: List[str] = Field(default_factory=list)
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

    def to_offer(self) -> FlightOffer:
        data = self.model_dump()
        data["carriers"] = tuple(data["carriers"])
        data["currency"] = data["currency"].strip().upper()
        return FlightOffer(**data)


class ScorePayload(BaseModel):
    offers: List[FlightOfferPayload] = Field(default_factory=list)
    preference: Optional[str] = None


class ProviderPayload(BaseModel):
    payload: Dict[str, Any]
    limit: int = Field(10, ge=1)
