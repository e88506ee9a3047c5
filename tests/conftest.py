import pytest

from travel_coordinator.core.models import FlightOffer


def build_offer(offer_id, price, duration, layovers=0, **extra):
    return FlightOffer(
        id=offer_id,
        price=price,
        total_duration_minutes=duration,
        layovers=layovers,
        carriers=extra.pop("carriers", ("AA",)),
        **extra,
    )


@pytest.fixture
def make_offer():
    return build_offer


@pytest.fixture
def amadeus_response():
    return {
        "data": [
            {
                "id": "1",
                "price": {"total": "412.50", "currency": "USD"},
                "itineraries": [
                    {
                        "duration": "PT5H30M",
                        "segments": [
                            {
                                "carrierCode": "DL",
                                "cabin": "ECONOMY",
                                "departure": {"iataCode": "JFK", "at": "2024-05-01T08:00:00"},
                                "arrival": {"iataCode": "ATL", "at": "2024-05-01T10:30:00"},
                            },
                            {
                                "carrierCode": "AA",
                                "departure": {"iataCode": "ATL", "at": "2024-05-01T11:30:00"},
                                "arrival": {"iataCode": "LAX", "at": "2024-05-01T13:30:00"},
                            },
                        ],
                    },
                    {
                        "duration": "PT6H",
                        "segments": [
                            {
                                "carrierCode": "DL",
                                "departure": {"iataCode": "LAX", "at": "2024-05-08T09:00:00"},
                                "arrival": {"iataCode": "JFK", "at": "2024-05-08T17:00:00"},
                            }
                        ],
                    },
                ],
                "travelerPricings": [
                    {"fareDetailsBySegment": [{"includedCheckedBags": {"quantity": 1}}]}
                ],
            },
            {
                "id": "2",
                "price": {"total": "298.00", "currency": "USD"},
                "itineraries": [
                    {
                        "duration": "PT6H15M",
                        "segments": [
                            {
                                "carrierCode": "B6",
                                "departure": {"iataCode": "JFK", "at": "2024-05-01T06:00:00"},
                                "arrival": {"iataCode": "LAX", "at": "2024-05-01T09:15:00"},
                            }
                        ],
                    }
                ],
            },
        ]
    }
