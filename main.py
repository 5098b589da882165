# main.py — rank a batch of petitions exported as JSON and print the feed order
import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from petition_rank.config import settings
from petition_rank.schemas import Petition, RankedPetition
from petition_rank.services.ranking import rank_petitions

logger = logging.getLogger(__name__)

PETITIONS = TypeAdapter(list[Petition])

def load_petitions(path: Path) -> list[Petition]:
    return PETITIONS.validate_json(path.read_bytes())

def format_row(r: RankedPetition) -> str:
    if r.score is None:
        return f"   -  {'':>10}  {r.petition_id}  ({r.reason})"
    return f"{r.rank:>4}  {r.score.total:>10.4f}  {r.petition_id}"

def non_negative_int(text: str) -> int:
    n = int(text)
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a count >= 0, got {text}")
    return n

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank petitions by votes, comments and recency.")
    parser.add_argument("petitions", type=Path, help="JSON array of petitions with their vote/comment history")
    parser.add_argument("--top", type=non_negative_int, default=None, help="only print the first N entries")
    parser.add_argument("--json", action="store_true", help="emit the ranking as JSON")
    return parser

def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        petitions = load_petitions(args.petitions)
    except OSError as e:
        logger.error("cannot read %s: %s", args.petitions, e)
        return 2
    except ValidationError as e:
        logger.error("invalid petitions file %s: %s", args.petitions, e)
        return 2

    ranking = rank_petitions(petitions)
    if args.top is not None:
        ranking = ranking[: args.top]

    if args.json:
        print(json.dumps([r.model_dump(mode="json") for r in ranking], indent=2))
    else:
        for r in ranking:
            print(format_row(r))
    return 0

if __name__ == "__main__":
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL))
    sys.exit(run())
