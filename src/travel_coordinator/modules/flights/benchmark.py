"""Benchmark prices used as reimbursement caps."""

from __future__ import annotations

from typing import Optional, Sequence

from travel_coordinator.core.models import FlightOffer


def benchmark_price(offers: Sequence[FlightOffer]) -> Optional[float]:
    if not offers:
        return None
    return max(offer.price for offer in offers)


def is_over_benchmark(amount: float, benchmark: Optional[float]) -> bool:
    if not benchmark:
        return False
    return amount > benchmark
