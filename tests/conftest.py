"""Shared test helpers."""

from runoff.models import BLANK_LABEL, Alternative, Ballot, Election, VotingResult


def make_election(
    name: str,
    num_alternatives: int,
    summarized_votes: list[tuple[list[str], int]],
    threshold: float | None = None,
    blank: bool = True,
) -> Election:
    """Build an Election from a compact vote summary.

    Args:
        name: Election name
        num_alternatives: Number of candidates, labelled A, B, C, ... with
            ids "1", "2", "3", ...
        summarized_votes: [(preferences, number_of_such_ballots), ...]
        threshold: Winning threshold, or None for the default
        blank: Whether to add a BLANK alternative with id "0" first

    Returns:
        Election with one Ballot per vote.
    """
    alternatives = [Alternative("0", BLANK_LABEL)] if blank else []
    for i in range(num_alternatives):
        alternatives.append(Alternative(str(i + 1), chr(ord("A") + i)))

    ballots = []
    for preferences, num in summarized_votes:
        for _ in range(num):
            ballots.append(Ballot(id=f"b{len(ballots) + 1}", preferences=list(preferences)))

    return Election(name=name, alternatives=alternatives, ballots=ballots, threshold=threshold)


def eliminated_ids(result: VotingResult) -> list[str]:
    """Alternatives eliminated by a runoff, in order."""
    return [r["eliminated"] for r in result.details["rounds"] if "eliminated" in r]
