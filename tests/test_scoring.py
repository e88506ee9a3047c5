import pytest

from travel_coordinator.core.models import ScoringPreference
from travel_coordinator.modules.flights.scoring import (
    WEIGHTS,
    compute_breakdowns,
    compute_scores,
    layover_score,
    pick_best_value,
    rank_offers,
)


def test_weights_sum_to_one():
    for weights in WEIGHTS.values():
        assert weights.price + weights.duration + weights.layover == pytest.approx(1.0)


def test_empty_batch_has_no_scores_and_no_pick():
    assert compute_scores([], ScoringPreference.PRICE) == {}
    assert pick_best_value([], ScoringPreference.PRICE) is None
    assert rank_offers([]) == []


def test_price_preference_prefers_cheaper_offer(make_offer):
    offers = [make_offer("a", 100, 300, 0), make_offer("b", 200, 200, 1)]

    scores = compute_scores(offers, ScoringPreference.PRICE)

    assert scores["a"] > scores["b"]
    assert scores["a"] == pytest.approx(100 * 0.8 + 0 * 0.1 + 100 * 0.1)
    assert scores["b"] == pytest.approx(0 * 0.8 + 100 * 0.1 + 75 * 0.1)
    assert pick_best_value(offers, ScoringPreference.PRICE).id == "a"


def test_direct_preference_prefers_nonstop(make_offer):
    offers = [make_offer("a", 100, 300, 1), make_offer("b", 100, 200, 0)]

    assert pick_best_value(offers, ScoringPreference.DIRECT).id == "b"


def test_layover_score_clamps_at_zero(make_offer):
    assert layover_score(5) == 0
    assert layover_score(4) == 0
    assert layover_score(3) == 25

    breakdown = compute_breakdowns([make_offer("a", 250, 600, 5)])["a"]
    assert breakdown.layover_score == 0
    assert breakdown.price_score == 100
    assert breakdown.duration_score == 100


def test_identical_price_and_duration_differ_only_by_layovers(make_offer):
    offers = [make_offer("a", 150, 240, 0), make_offer("b", 150, 240, 2), make_offer("c", 150, 240, 0)]

    breakdowns = compute_breakdowns(offers, ScoringPreference.BALANCED)

    for breakdown in breakdowns.values():
        assert breakdown.price_score == 100
        assert breakdown.duration_score == 100
    assert breakdowns["a"].total == breakdowns["c"].total
    assert breakdowns["a"].total - breakdowns["b"].total == pytest.approx(50 * 0.2)


def test_scores_stay_in_range(make_offer):
    offers = [
        make_offer("a", 0, 0, 0),
        make_offer("b", 999.99, 1440, 6),
        make_offer("c", 420, 510, 1),
        make_offer("d", 88, 95, 2),
    ]
    for preference in ScoringPreference:
        for score in compute_scores(offers, preference).values():
            assert 0 <= score <= 100


def test_preference_does_not_change_components(make_offer):
    offers = [make_offer("a", 120, 300, 1), make_offer("b", 340, 180, 0), make_offer("c", 205, 420, 2)]

    baseline = compute_breakdowns(offers, ScoringPreference.BALANCED)
    for preference in ScoringPreference:
        other = compute_breakdowns(offers, preference)
        for offer_id, breakdown in baseline.items():
            assert other[offer_id].price_score == breakdown.price_score
            assert other[offer_id].duration_score == breakdown.duration_score
            assert other[offer_id].layover_score == breakdown.layover_score


def test_tie_goes_to_first_offer(make_offer):
    offers = [make_offer("first", 100, 200, 0), make_offer("second", 100, 200, 0)]

    assert pick_best_value(offers).id == "first"


def test_singleton_is_always_best(make_offer):
    offer = make_offer("only", 500, 900, 3)
    for preference in ScoringPreference:
        assert pick_best_value([offer], preference) is offer


def test_pick_is_deterministic(make_offer):
    offers = [make_offer("a", 310, 410, 1), make_offer("b", 280, 520, 1), make_offer("c", 450, 300, 0)]

    first = compute_scores(offers, "duration")
    second = compute_scores(list(offers), "duration")

    assert first == second
    assert pick_best_value(offers, "duration") is pick_best_value(offers, "duration")


def test_unknown_preference_falls_back_to_balanced(make_offer):
    offers = [make_offer("a", 100, 300, 0), make_offer("b", 200, 200, 1)]

    assert compute_scores(offers, "cheapest") == compute_scores(offers, ScoringPreference.BALANCED)
    assert compute_scores(offers, None) == compute_scores(offers, ScoringPreference.BALANCED)


def test_rank_offers_orders_by_score_and_flags_best(make_offer):
    offers = [make_offer("slow", 100, 600, 2), make_offer("fast", 105, 200, 0), make_offer("mid", 110, 400, 1)]

    ranked = rank_offers(offers, ScoringPreference.BALANCED)

    assert [item.offer.id for item in ranked] == ["fast", "slow", "mid"]
    assert [item.best_value for item in ranked] == [True, False, False]
