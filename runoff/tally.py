"""Counting, round resolution and elimination helpers for instant runoff.

Every function here returns new collections and leaves its arguments
untouched, so a runoff can be replayed from the caller's original data.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from runoff.models import Alternative, Ballot, Diagnostic

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with random.Random's choice(), used for last-resort tiebreaks."""

    def choice(self, seq: Sequence[str]) -> str: ...


@dataclass
class NormalizedInput:
    """Owned working copy of an election's input.

    Attributes:
        alternatives: Copy of the alternatives, in input order
        ballots: Copies of the non-empty ballots
        labels: alternative id -> label
        blank_id: Id of the blank alternative, or None if there is none
    """
    alternatives: list[Alternative]
    ballots: list[Ballot]
    labels: dict[str, str]
    blank_id: str | None


def normalize(
    alternatives: Iterable[Alternative], ballots: Iterable[Ballot],
) -> NormalizedInput:
    """Copy the input, drop empty ballots and locate the blank alternative."""
    alternatives = list(alternatives)
    labels = {a.id: a.label for a in alternatives}

    blank_id = None
    for alternative in alternatives:
        if alternative.is_blank:
            blank_id = alternative.id

    return NormalizedInput(
        alternatives=alternatives,
        ballots=remove_empty_ballots(b.copy() for b in ballots),
        labels=labels,
        blank_id=blank_id,
    )


def remove_empty_ballots(ballots: Iterable[Ballot]) -> list[Ballot]:
    return [b for b in ballots if not b.is_empty]


def _report(diagnostics: list[Diagnostic] | None, diagnostic: Diagnostic) -> None:
    logger.warning(diagnostic.message)
    if diagnostics is not None:
        diagnostics.append(diagnostic)


def count_nth_votes(
    ballots: Iterable[Ballot],
    alternative_ids: Iterable[str],
    n: int,
    diagnostics: list[Diagnostic] | None = None,
    round_num: int | None = None,
) -> dict[str, int]:
    """Count how many ballots rank each alternative at position n (0-indexed).

    The result has one entry per given alternative, zero if uncounted.
    Ballots shorter than n+1 contribute nothing. An id at position n that
    is not among the given alternatives is reported and skipped.
    """
    votes = {alternative_id: 0 for alternative_id in alternative_ids}

    for ballot in ballots:
        if n >= len(ballot.preferences):
            continue
        nth_vote = ballot.preferences[n]
        if nth_vote in votes:
            votes[nth_vote] += 1
        else:
            _report(diagnostics, Diagnostic(
                kind="unknown_alternative",
                message=f"Invalid alternative ID {nth_vote} at preference {n + 1}",
                round=round_num,
                alternative_id=nth_vote,
                ballot_id=ballot.id,
            ))

    return votes


def count_first_votes(
    ballots: Iterable[Ballot],
    alternative_ids: Iterable[str],
    diagnostics: list[Diagnostic] | None = None,
    round_num: int | None = None,
) -> dict[str, int]:
    return count_nth_votes(ballots, alternative_ids, 0, diagnostics, round_num)


def _extreme(votes: dict[str, int], candidates: Iterable[str], pick) -> list[str]:
    candidates = list(candidates)
    if not candidates:
        return []
    target = pick(votes[c] for c in candidates)
    return [c for c in candidates if votes[c] == target]


def round_winners(votes: dict[str, int]) -> list[str]:
    """Alternatives with the highest count; more than one on a tie."""
    return _extreme(votes, votes, max)


def round_losers(votes: dict[str, int], blank_id: str | None) -> list[str]:
    """Alternatives with the lowest count, never including the blank."""
    return _extreme(votes, (c for c in votes if c != blank_id), min)


def resolve_round(
    votes: dict[str, int], blank_id: str | None,
) -> tuple[list[str], list[str]]:
    """Return (winners, losers) for one round's first-preference counts."""
    return round_winners(votes), round_losers(votes, blank_id)


def tiebreaker_losers(nth_votes: dict[str, int], loser_pool: Sequence[str]) -> list[str]:
    """Narrow the loser pool to the members with the fewest n-th votes.

    Pool members missing from nth_votes count as zero.
    """
    votes = {c: nth_votes.get(c, 0) for c in loser_pool}
    return _extreme(votes, loser_pool, min)


def break_loser_tie(
    ballots: Sequence[Ballot],
    alternative_ids: Sequence[str],
    loser_pool: Sequence[str],
    rng: RandomSource,
    diagnostics: list[Diagnostic] | None = None,
    round_num: int | None = None,
) -> tuple[str, dict]:
    """Pick a single loser from a tied pool.

    Tiebreak procedure:
    1. Count 2nd preferences over the live alternatives and keep the pool
       members with the fewest; then 3rd preferences, and so on, up to the
       number of live alternatives.
    2. If more than one remains, choose one at random.

    Returns (loser, tiebreak_details).
    """
    tied = list(loser_pool)
    tiebreak_info = {
        "tied_candidates": list(tied),
        "steps": [],
    }

    n = 1
    while len(tied) > 1 and n <= len(alternative_ids):
        nth_votes = count_nth_votes(ballots, alternative_ids, n, diagnostics, round_num)
        pool = tied
        tied = tiebreaker_losers(nth_votes, pool)
        tiebreak_info["steps"].append({
            "method": "nth_preference",
            "preference": n + 1,
            "votes": {c: nth_votes.get(c, 0) for c in pool},
            "remaining_tied": list(tied),
            "resolved": len(tied) == 1,
        })
        n += 1

    if len(tied) == 1:
        return tied[0], tiebreak_info

    eliminated = rng.choice(tied)
    tiebreak_info["steps"].append({
        "method": "random",
        "remaining_tied": list(tied),
        "eliminated": eliminated,
    })
    return eliminated, tiebreak_info


def remove_loser_votes(
    ballots: Iterable[Ballot],
    loser: str,
    diagnostics: list[Diagnostic] | None = None,
    round_num: int | None = None,
) -> list[Ballot]:
    """Strike the loser from every ballot and drop ballots left empty.

    Only the first occurrence is struck; a ballot listing the loser more
    than once is reported and keeps its later occurrences.
    """
    result = []
    for ballot in ballots:
        preferences = list(ballot.preferences)
        occurrences = preferences.count(loser)
        if occurrences > 1:
            _report(diagnostics, Diagnostic(
                kind="duplicate_preference",
                message=f"Duplicate loser {loser} on ballot {ballot.id}",
                round=round_num,
                alternative_id=loser,
                ballot_id=ballot.id,
            ))
        if occurrences:
            preferences.remove(loser)
        result.append(Ballot(id=ballot.id, preferences=preferences))

    return remove_empty_ballots(result)


def remove_loser_alternative(
    alternatives: Iterable[Alternative], loser: str,
) -> list[Alternative]:
    return [a for a in alternatives if a.id != loser]
