"""Instant Runoff Voting (IRV) system."""

import logging
import random
from collections.abc import Iterable

from runoff.models import (
    DEFAULT_THRESHOLD, Alternative, Ballot, Diagnostic, Election, Outcome, VotingResult,
)
from runoff.tally import (
    RandomSource, break_loser_tie, count_first_votes, normalize,
    remove_loser_alternative, remove_loser_votes, resolve_round,
)
from runoff.voting import register_voting_system
from runoff.voting.base import VotingSystem

logger = logging.getLogger(__name__)


# Safety valve against a runaway loop; a well-formed election never gets here.
MAX_ROUNDS = 100

SYSTEM_NAME = "Instant Runoff"


def _describe(
    labels: dict[str, str], ids: list[str], votes: dict[str, int], total: int, which: str,
) -> str:
    count = votes[ids[0]]
    percent = 100 * count / total if total else 0.0
    if len(ids) == 1:
        return (f"{labels[ids[0]]} has the {which} number of votes, "
                f"with {count} votes ({percent:.2f}%)")
    return (f"{len(ids)} candidates have the {which} number of votes "
            f"with {count} votes ({percent:.2f}%)")


def compute_winner(
    alternatives: Iterable[Alternative],
    ballots: Iterable[Ballot],
    threshold: float | None = None,
    *,
    rng: RandomSource | None = None,
    max_rounds: int = MAX_ROUNDS,
    system_name: str = SYSTEM_NAME,
) -> VotingResult:
    """Run instant runoff until a winner, a tie or the round limit.

    Each round:
    1. Count first-preference votes among the live alternatives
    2. If the leader's share of non-empty ballots is strictly above the
       threshold, they win
    3. If only two alternatives are left, or three including a blank with
       no votes, the election is tied
    4. Otherwise eliminate the alternative with the fewest votes (never the
       blank) and strike it from every ballot

    Tiebreakers for elimination: fewest 2nd-preference votes, then 3rd and
    so on; if still unresolved, choose at random using rng.

    Args:
        alternatives: Alternatives in the order supplied
        ballots: Ranked ballots; empty ballots are ignored
        threshold: Share a winner must exceed, default 0.5
        rng: Random source for the last-resort tiebreak
        max_rounds: Round limit after which the runoff is aborted
        system_name: Name recorded on the result

    Returns:
        VotingResult whose winner is set only when the outcome is DECIDED.
    """
    if threshold is None:
        threshold = DEFAULT_THRESHOLD
    if rng is None:
        rng = random.Random()

    working = normalize(alternatives, ballots)
    live = working.alternatives
    votes_left = working.ballots
    labels = dict(working.labels)
    blank_id = working.blank_id

    trace: list[str] = []
    rounds: list[dict] = []
    diagnostics: list[Diagnostic] = []

    def finish(outcome: Outcome, winner: str | None = None) -> VotingResult:
        logger.info("Runoff finished after %d round(s): %s", len(rounds), outcome.value)
        return VotingResult(
            system_name=system_name,
            outcome=outcome,
            winner=winner,
            trace=trace,
            details={
                "threshold": threshold,
                "blank": blank_id,
                "rounds": rounds,
            },
            diagnostics=diagnostics,
        )

    for round_num in range(1, max_rounds + 1):
        live_ids = [a.id for a in live]
        total = len(votes_left)

        trace.append(f"Round #{round_num}.")
        trace.append(f"{len(labels)} candidates and {total} (non-empty) votes.")

        first_votes = count_first_votes(votes_left, live_ids, diagnostics, round_num)
        logger.debug("Round %d first votes: %s", round_num, first_votes)

        trace.append("Number of first votes per candidate:")
        for alternative_id, count in first_votes.items():
            trace.append(f"* {labels[alternative_id]}: {count}")

        winners, losers = resolve_round(first_votes, blank_id)
        winner = winners[0] if winners else None
        winner_ratio = first_votes[winner] / total if winner is not None and total else 0.0

        round_info = {
            "round": round_num,
            "active_alternatives": live_ids,
            "ballots": total,
            "votes": dict(first_votes),
            "winners": winners,
            "losers": losers,
            "winner_ratio": winner_ratio,
        }
        rounds.append(round_info)

        if winners:
            trace.append(_describe(labels, winners, first_votes, total, "highest"))
        if losers:
            trace.append(_describe(labels, losers, first_votes, total, "lowest"))

        # Check for majority winner
        if winner is not None and winner_ratio > threshold:
            trace.append(f"{labels[winner]} won!")
            round_info["method"] = "majority"
            round_info["winner"] = winner
            return finish(Outcome.DECIDED, winner)

        # Two left, or two real alternatives next to a blank nobody chose
        tie_exists = len(live) == 2
        if blank_id is not None:
            tie_exists |= first_votes[blank_id] == 0 and len(live) == 3
        if tie_exists:
            trace.append(f"There are two candidates left and no one has over "
                         f"{threshold * 100:g}% of the votes.")
            round_info["method"] = "tie"
            return finish(Outcome.TIED)

        if not losers:
            trace.append(f"No candidate can be eliminated and no one has over "
                         f"{threshold * 100:g}% of the votes.")
            round_info["method"] = "no_candidates"
            return finish(Outcome.TIED)

        # Break elimination tie if needed
        if len(losers) > 1:
            eliminated, tiebreak_info = break_loser_tie(
                votes_left, live_ids, losers, rng, diagnostics, round_num,
            )
            round_info["tiebreak"] = tiebreak_info
            for step in tiebreak_info["steps"]:
                if step["method"] == "nth_preference":
                    trace.append(f"Tiebreaker: use {step['preference']}. votes. "
                                 f"{len(step['remaining_tied'])} loser(s) left.")
                else:
                    trace.append(f"Tiebreaker: {labels[eliminated]} was randomly "
                                 f"selected as the loser of the round.")
            if tiebreak_info["steps"] and tiebreak_info["steps"][-1]["method"] != "random":
                trace.append(f"Tiebreaker: {labels[eliminated]} was selected as "
                             f"the loser of the round.")
        else:
            eliminated = losers[0]

        round_info["method"] = "elimination"
        round_info["eliminated"] = eliminated
        logger.info("Round %d: eliminating %s", round_num, eliminated)

        del labels[eliminated]
        votes_left = remove_loser_votes(votes_left, eliminated, diagnostics, round_num)
        live = remove_loser_alternative(live, eliminated)

        trace.append("")

    # No decision after the round limit; indicates a logic defect
    trace.append("Maximum number of rounds reached.")
    logger.error("No decision after %d rounds", max_rounds)
    return finish(Outcome.ABORTED)


@register_voting_system
class InstantRunoffSystem(VotingSystem):
    """Instant Runoff Voting system.

    Eliminates the weakest alternative round by round until one holds
    more than the threshold share of non-empty ballots. See compute_winner
    for the round rules and tiebreakers.
    """

    def __init__(self, rng: RandomSource | None = None, max_rounds: int = MAX_ROUNDS):
        self.rng = rng
        self.max_rounds = max_rounds

    @property
    def name(self) -> str:
        return SYSTEM_NAME

    @property
    def description(self) -> str:
        return "Eliminate the alternative with the fewest first preferences until one has a majority"

    def calculate(self, election: Election) -> VotingResult:
        return compute_winner(
            election.alternatives,
            election.ballots,
            election.threshold,
            rng=self.rng,
            max_rounds=self.max_rounds,
            system_name=self.name,
        )
