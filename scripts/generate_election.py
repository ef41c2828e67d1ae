"""Generate a synthetic election file for fixtures and demos.

Candidate labels are fake person names from faker, and ballots rank a
random prefix of a random ordering of the candidates. Both use a fixed
seed, so the same arguments always produce the same file.

Usage:
    python scripts/generate_election.py -n 4 -b 200
    python scripts/generate_election.py -n 5 -b 1000 --blank -o election.json
"""

import argparse
import json
import random
from pathlib import Path

from faker import Faker

from runoff.models import BLANK_LABEL

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "test_parsers" / "fixtures"
DEFAULT_OUTPUT = FIXTURES_DIR / "generated.json"

SEED = 20261019


def generate_labels(count: int, seed: int) -> list[str]:
    """Generate `count` distinct fake candidate names."""
    fake = Faker()
    fake.seed_instance(seed)
    labels: list[str] = []
    while len(labels) < count:
        name = fake.name()
        if name not in labels and name != BLANK_LABEL:
            labels.append(name)
    return labels


def generate_election(
    num_alternatives: int, num_ballots: int, seed: int = SEED,
    blank: bool = False, name: str = "Synthetic Election",
) -> dict:
    """Build election data in the JSON election file layout."""
    rng = random.Random(seed)

    alternatives = []
    if blank:
        alternatives.append({"id": "0", "label": BLANK_LABEL})
    for i, label in enumerate(generate_labels(num_alternatives, seed), start=1):
        alternatives.append({"id": str(i), "label": label})

    ids = [a["id"] for a in alternatives]
    ballots = []
    for i in range(num_ballots):
        order = rng.sample(ids, len(ids))
        depth = rng.randint(0, len(order))
        ballots.append({"id": f"b{i + 1}", "preferences": order[:depth]})

    return {"name": name, "alternatives": alternatives, "ballots": ballots}


def main():
    parser = argparse.ArgumentParser(
        description="Generate a synthetic election JSON file")
    parser.add_argument("-n", "--alternatives", type=int, default=4,
                        help="Number of candidates, not counting BLANK (default: 4)")
    parser.add_argument("-b", "--ballots", type=int, default=100,
                        help="Number of ballots (default: 100)")
    parser.add_argument("--blank", action="store_true",
                        help="Include a BLANK alternative")
    parser.add_argument("--seed", type=int, default=SEED,
                        help=f"Random seed (default: {SEED})")
    parser.add_argument("-o", "--output", default=str(DEFAULT_OUTPUT),
                        help=f"Output path (default: {DEFAULT_OUTPUT})")
    args = parser.parse_args()

    data = generate_election(args.alternatives, args.ballots, args.seed, args.blank)
    print(f"Generated {len(data['alternatives'])} alternatives and "
          f"{len(data['ballots'])} ballots")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    print(f"Written to {output_path}")


if __name__ == "__main__":
    main()
