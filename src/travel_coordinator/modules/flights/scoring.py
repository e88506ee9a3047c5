"""Best-value scoring for flight offers.

Each offer gets three normalized components on a 0-100 scale (higher is
better):

* price and duration are scaled against the batch min/max, so the cheapest
  (shortest) offer scores 100 and the most expensive (longest) scores 0;
  a dimension where every offer is identical scores 100 for all offers;
* layovers use a fixed step penalty of 25 points per stop, floored at 0.

The components are then blended with the weights of the selected
``ScoringPreference``. The preference only changes the blend, never the
components. Offers with a negative price or duration are outside the
contract and should be rejected with ``validate_offers`` beforehand.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from travel_coordinator.core.models import FlightOffer, RankedOffer, ScoreBreakdown, ScoringPreference

MAX_SCORE = 100.0
LAYOVER_PENALTY = 25.0


@dataclass(frozen=True)
class FlightWeights:
    price: float = 0.5
    duration: float = 0.3
    layover: float = 0.2


WEIGHTS: Mapping[ScoringPreference, FlightWeights] = MappingProxyType(
    {
        ScoringPreference.PRICE: FlightWeights(price=0.8, duration=0.1, layover=0.1),
        ScoringPreference.DURATION: FlightWeights(price=0.1, duration=0.7, layover=0.2),
        ScoringPreference.DIRECT: FlightWeights(price=0.1, duration=0.1, layover=0.8),
        ScoringPreference.BALANCED: FlightWeights(price=0.5, duration=0.3, layover=0.2),
    }
)


def weights_for(preference: ScoringPreference | str | None) -> FlightWeights:
    return WEIGHTS[ScoringPreference.parse(preference)]


def _bounds(values: Sequence[float]) -> Tuple[float, float]:
    return min(values), max(values)


def normalize(value: float, lower: float, upper: float) -> float:
    """Scale ``value`` inside ``[lower, upper]`` so that ``lower`` maps to 100."""
    if upper == lower:
        return MAX_SCORE
    return MAX_SCORE - (value - lower) / (upper - lower) * MAX_SCORE


def layover_score(layovers: int) -> float:
    return max(0.0, MAX_SCORE - layovers * LAYOVER_PENALTY)


def blend(price_score: float, duration_score: float, stops_score: float, weights: FlightWeights) -> float:
    return price_score * weights.price + duration_score * weights.duration + stops_score * weights.layover


def compute_breakdowns(
    offers: Sequence[FlightOffer],
    preference: ScoringPreference | str | None = ScoringPreference.BALANCED,
) -> Dict[str, ScoreBreakdown]:
    if not offers:
        return {}

    weights = weights_for(preference)
    price_min, price_max = _bounds([offer.price for offer in offers])
    duration_min, duration_max = _bounds([offer.total_duration_minutes for offer in offers])

    breakdowns: Dict[str, ScoreBreakdown] = {}
    for offer in offers:
        price_score = normalize(offer.price, price_min, price_max)
        duration_score = normalize(offer.total_duration_minutes, duration_min, duration_max)
        stops_score = layover_score(offer.layovers)
        breakdowns[offer.id] = ScoreBreakdown(
            price_score=price_score,
            duration_score=duration_score,
            layover_score=stops_score,
            total=blend(price_score, duration_score, stops_score, weights),
        )
    return breakdowns


def compute_scores(
    offers: Sequence[FlightOffer],
    preference: ScoringPreference | str | None = ScoringPreference.BALANCED,
) -> Dict[str, float]:
    return {offer_id: breakdown.total for offer_id, breakdown in compute_breakdowns(offers, preference).items()}


def pick_best_value(
    offers: Sequence[FlightOffer],
    preference: ScoringPreference | str | None = ScoringPreference.BALANCED,
) -> Optional[FlightOffer]:
    """Return the highest scoring offer, or ``None`` when there are no offers.

    Ties keep the earliest offer in input order.
    """
    if not offers:
        return None
    scores = compute_scores(offers, preference)
    best = offers[0]
    for current in offers[1:]:
        if scores[current.id] > scores[best.id]:
            best = current
    return best


def rank_offers(
    offers: Sequence[FlightOffer],
    preference: ScoringPreference | str | None = ScoringPreference.BALANCED,
) -> List[RankedOffer]:
    breakdowns = compute_breakdowns(offers, preference)
    best = pick_best_value(offers, preference)
    ranked = [
        RankedOffer(offer=offer, breakdown=breakdowns[offer.id], best_value=best is not None and offer.id == best.id)
        for offer in offers
    ]
    ranked.sort(key=lambda item: -item.score)
    return ranked
