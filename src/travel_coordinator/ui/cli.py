"""CLI entry point for flight scoring and airport lookup."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from travel_coordinator.adapters.io.exports import offers_from_list, serialize_scored_offers, write_scored_excel
from travel_coordinator.adapters.storage.repositories import read_json, write_json
from travel_coordinator.core.config import load_scoring_config
from travel_coordinator.core.errors import TravelCoordinatorError, ValidationError
from travel_coordinator.core.models import ScoringPreference
from travel_coordinator.core.normalization import build_meta
from travel_coordinator.modules.flights.airports import extract_airport_code
from travel_coordinator.modules.flights.cleaning import parse_provider_offers, validate_offers

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Travel Coordinator CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Rank flight offers by best value")
    score.add_argument("--input", type=str, required=True, help="JSON file with offers or a provider response")
    score.add_argument(
        "--preference",
        type=str,
        choices=[p.value for p in ScoringPreference],
        default=None,
        help="Scoring preference (default: balanced)",
    )
    score.add_argument("--output", type=str, default=None, help="Output path (.json or .xlsx); stdout if omitted")

    airport = sub.add_parser("airport", help="Resolve a location to an airport code")
    airport.add_argument("location", type=str, help="City or airport name")
    return parser


def _load_offers(path: Path):
    data = read_json(path)
    if isinstance(data, dict) and "data" in data:
        return parse_provider_offers(data)
    if isinstance(data, dict):
        data = data.get("offers", [])
    if not isinstance(data, list):
        raise ValidationError(f"expected a list of offers in {path}")
    return offers_from_list(data)


def _run_score(args: argparse.Namespace) -> int:
    config = load_scoring_config()
    preference = ScoringPreference.parse(args.preference or config.default_preference)
    offers = _load_offers(Path(args.input))
    validate_offers(offers)
    if not offers:
        LOG.warning("No flight options in %s", args.input)

    payload = serialize_scored_offers(offers, preference)
    payload["meta"] = build_meta(offers[0].currency if offers else None)

    if not args.output:
        json.dump(payload, sys.stdout, indent=2, default=str)
        sys.stdout.write("\n")
        return 0
    output_path = Path(args.output)
    if output_path.suffix.lower() == ".xlsx":
        write_scored_excel(output_path, payload)
    else:
        write_json(output_path, payload)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=load_scoring_config().log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "airport":
        print(extract_airport_code(args.location))
        return 0
    try:
        return _run_score(args)
    except (TravelCoordinatorError, OSError, ValueError, KeyError) as exc:
        LOG.error("score failed: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
