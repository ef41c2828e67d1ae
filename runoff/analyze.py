"""Orchestrator: parse an election file and run all voting systems."""

from dataclasses import dataclass
from typing import Any

from runoff.models import Election, Outcome, VotingResult
from runoff.parsers import detect_parser, detect_parser_by_content, get_supported_formats
from runoff.voting import get_all_voting_systems
from runoff.voting.base import VotingSystem

# Import parsers and voting systems to register them
from runoff.parsers import csv_ballots  # noqa: F401
from runoff.parsers import json_ballots  # noqa: F401
from runoff.voting import instant_runoff  # noqa: F401


@dataclass
class AnalysisResult:
    """Complete analysis result with the election and all voting outcomes."""
    election: Election
    results: list[VotingResult]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "election_name": self.election.name,
            "alternatives": [a.to_dict() for a in self.election.alternatives],
            "num_alternatives": self.election.num_alternatives,
            "num_ballots": self.election.num_ballots,
            "threshold": self.election.threshold,
            "results": [r.to_dict() for r in self.results],
        }


class AnalysisError(Exception):
    """Error during election analysis."""
    pass


def run_voting_systems(
    election: Election, systems: list[VotingSystem] | None = None,
) -> list[VotingResult]:
    """Tabulate the election with every system, keeping failures as results."""
    if systems is None:
        systems = get_all_voting_systems()

    results = []
    for voting_system in systems:
        try:
            results.append(voting_system.calculate(election))
        except Exception as e:
            # Include error in results rather than failing entirely
            results.append(VotingResult(
                system_name=voting_system.name,
                outcome=Outcome.ERROR,
                details={"error": str(e)},
            ))
    return results


def analyze_election(
    source: str, content: bytes, systems: list[VotingSystem] | None = None,
) -> AnalysisResult:
    """Parse an election file and run all voting systems on it.

    Args:
        source: URL or filename (used to detect the appropriate parser)
        content: Raw bytes of the election file
        systems: Voting systems to run, default all registered systems

    Returns:
        AnalysisResult with the parsed election and all voting results

    Raises:
        AnalysisError: If no parser is found or parsing fails
    """
    # Find appropriate parser: try name matching first, then content detection
    parser = detect_parser(source)
    if parser is None:
        parser = detect_parser_by_content(content, source)
    if parser is None:
        raise AnalysisError(
            f"We couldn't determine the election file format.\n\n"
            f"{get_supported_formats()}"
        )

    try:
        election = parser.parse(source, content)
    except Exception as e:
        raise AnalysisError(f"Failed to parse election: {e}") from e

    return AnalysisResult(election=election, results=run_voting_systems(election, systems))
