"""Tabulate an election file and print the transcript.

Usage:
    python scripts/tabulate.py tests/test_parsers/fixtures/election.json
    python scripts/tabulate.py tally.csv --threshold 0.6 --seed 7
"""

import argparse
import logging
import random
import sys
from pathlib import Path

from runoff.analyze import AnalysisError, analyze_election, run_voting_systems
from runoff.parsers.base import parse_threshold
from runoff.voting.instant_runoff import InstantRunoffSystem


def threshold_arg(value: str) -> float:
    try:
        return parse_threshold(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run instant runoff on an election file")
    parser.add_argument("input", help="Path to a JSON or CSV election file")
    parser.add_argument("--threshold", type=threshold_arg, default=None,
                        help="Winning share to exceed, overriding the file (default: 0.5)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for random tiebreaks, for reproducible runs")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log round-by-round progress and ballot anomalies")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.input)
    system = InstantRunoffSystem(rng=random.Random(args.seed))
    try:
        # Parse only; the voting system runs once any override is applied
        election = analyze_election(path.name, path.read_bytes(), systems=[]).election
    except AnalysisError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.threshold is not None:
        election.threshold = args.threshold

    print(f"{election.name}: {election.num_alternatives} alternatives, "
          f"{election.num_ballots} ballots")
    for result in run_voting_systems(election, [system]):
        print()
        print(f"== {result.system_name}")
        for line in result.trace:
            print(line)
        if "error" in result.details:
            print(f"ERROR: {result.details['error']}")
        elif result.decided:
            print(f"Winner: {election.get_label(result.winner)} ({result.winner})")
        else:
            print(f"No winner ({result.outcome.value})")
        for diagnostic in result.diagnostics:
            print(f"WARNING: {diagnostic.message}")


if __name__ == "__main__":
    main()
