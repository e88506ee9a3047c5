from datetime import date, datetime

from travel_coordinator.core.config import BookingConfig
from travel_coordinator.modules.flights.airports import (
    extract_airport_code,
    match_exact,
    match_iata_token,
    match_substring,
)
from travel_coordinator.modules.flights.booking import build_search_url, resolve_booking_url
from travel_coordinator.modules.flights.carriers import carrier_name, carrier_names


def test_exact_match_wins():
    assert extract_airport_code("New York, NY") == "JFK"
    assert extract_airport_code("  Boston  ") == "BOS"


def test_embedded_iata_token():
    assert extract_airport_code("Heathrow (LHR)") == "LHR"
    assert match_iata_token("fly to CDG tomorrow") == "CDG"
    assert match_iata_token("no codes here") is None


def test_substring_match_is_case_insensitive():
    assert extract_airport_code("downtown chicago loop") == "ORD"
    assert match_substring("somewhere") is None


def test_substring_match_uses_table_order():
    # Tampa is listed before Miami, so a string naming both resolves to Tampa.
    assert match_substring("tampa or miami") == "TPA"
    assert match_exact("tampa or miami") is None


def test_unknown_location_is_truncated():
    assert extract_airport_code("Zzyzx Town") == "ZZY"
    assert extract_airport_code("ab") == "AB"


def test_existing_booking_url_is_kept(make_offer):
    offer = make_offer("a", 100, 200, booking_url="https://x")

    assert resolve_booking_url(offer, "JFK", "LAX", "2024-05-01", "2024-05-08") == "https://x"
    assert resolve_booking_url(offer, None, None, None) == "https://x"


def test_one_way_deep_link(make_offer):
    offer = make_offer("a", 100, 200)

    url = resolve_booking_url(offer, "JFK", "LAX", "2024-05-01", None)

    assert "JFK-LAX" in url
    assert "2024-05-01" in url
    assert url == "https://www.kayak.com/flights/JFK-LAX/2024-05-01?sort=bestflight_a"


def test_round_trip_deep_link_truncates_timestamps(make_offer):
    offer = make_offer("a", 100, 200)

    url = resolve_booking_url(offer, "BOS", "SEA", datetime(2024, 6, 3, 7, 45), "2024-06-10T18:20:00")

    assert url == "https://www.kayak.com/flights/BOS-SEA/2024-06-03/2024-06-10?sort=bestflight_a"


def test_missing_codes_fall_back_to_landing_page(make_offer):
    offer = make_offer("a", 100, 200, booking_url="")

    assert resolve_booking_url(offer, None, None, "2024-05-01") == "https://www.kayak.com/flights"
    assert resolve_booking_url(offer, "JFK", "LAX", "not a date") == "https://www.kayak.com/flights"


def test_custom_template():
    config = BookingConfig(url_template="https://book.test/{origin}/{destination}/{dates}", fallback_url="https://book.test")

    assert build_search_url("ORD", "MIA", date(2024, 1, 2), date(2024, 1, 9), config=config) == (
        "https://book.test/ORD/MIA/2024-01-02/2024-01-09"
    )


def test_broken_template_never_raises(make_offer):
    config = BookingConfig(url_template="https://book.test/{missing}", fallback_url="https://book.test")

    assert resolve_booking_url(make_offer("a", 1, 1), "ORD", "MIA", "2024-01-02", config=config) == "https://book.test"


def test_carrier_names():
    assert carrier_name("DL") == "Delta Air Lines"
    assert carrier_name("ZZ") == "ZZ"
    assert carrier_names(["B6", "ZZ"]) == "JetBlue Airways, ZZ"
