"""Core data models for elections and voting results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self


BLANK_LABEL = "BLANK"
DEFAULT_THRESHOLD = 0.5


@dataclass(frozen=True)
class Alternative:
    """An option on the ballot.

    Attributes:
        id: Opaque identifier referenced by ballots
        label: Human-readable name. The label BLANK_LABEL marks the blank
            alternative, which takes part in tallies but is never eliminated.
    """
    id: str
    label: str

    @property
    def is_blank(self) -> bool:
        return self.label == BLANK_LABEL

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build an Alternative from {"id", "label"} or {"_id", "description"}."""
        alternative_id = data["id"] if "id" in data else data["_id"]
        label = data["label"] if "label" in data else data["description"]
        return cls(id=str(alternative_id), label=str(label))


@dataclass
class Ballot:
    """One voter's ranked preferences, most preferred first.

    Duplicate ids are kept as given.
    """
    id: str | None
    preferences: list[str]

    @property
    def is_empty(self) -> bool:
        return not self.preferences

    def copy(self) -> Self:
        return type(self)(id=self.id, preferences=list(self.preferences))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "preferences": list(self.preferences)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build a Ballot from {"id", "preferences"} or {"_id", "alternatives"}."""
        ballot_id = data.get("id", data.get("_id"))
        preferences = data["preferences"] if "preferences" in data else data["alternatives"]
        return cls(
            id=None if ballot_id is None else str(ballot_id),
            preferences=[str(p) for p in preferences],
        )


@dataclass
class Election:
    """A complete election ready to be tabulated.

    Attributes:
        name: Name of the election
        alternatives: Alternatives in the order they were supplied
        ballots: All ballots, including empty ones
        threshold: Share of non-empty ballots a winner must exceed,
            or None for the default

    Example:
        >>> election = Election(
        ...     name="Club president",
        ...     alternatives=[Alternative("0", "BLANK"), Alternative("1", "Alice")],
        ...     ballots=[Ballot("b1", ["1"]), Ballot("b2", ["0"])],
        ... )
    """
    name: str
    alternatives: list[Alternative]
    ballots: list[Ballot]
    threshold: float | None = None

    @property
    def num_alternatives(self) -> int:
        return len(self.alternatives)

    @property
    def num_ballots(self) -> int:
        return len(self.ballots)

    @property
    def blank_alternative(self) -> Alternative | None:
        """The blank alternative, or None. The last one wins if several exist."""
        blank = None
        for alternative in self.alternatives:
            if alternative.is_blank:
                blank = alternative
        return blank

    def get_label(self, alternative_id: str) -> str | None:
        for alternative in self.alternatives:
            if alternative.id == alternative_id:
                return alternative.label
        return None


class Outcome(str, Enum):
    """Terminal state of a runoff; ERROR marks a voting system that raised."""
    DECIDED = "decided"
    TIED = "tied"
    ABORTED = "aborted"
    ERROR = "error"


@dataclass
class Diagnostic:
    """A non-fatal anomaly found in the ballot data.

    Attributes:
        kind: "unknown_alternative" or "duplicate_preference"
        message: Human-readable description
        round: 1-indexed round in which the anomaly was seen, if known
        alternative_id: The offending alternative id
        ballot_id: The ballot the anomaly was found on, if it has an id
    """
    kind: str
    message: str
    round: int | None = None
    alternative_id: str | None = None
    ballot_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "round": self.round,
            "alternative_id": self.alternative_id,
            "ballot_id": self.ballot_id,
        }


@dataclass
class VotingResult:
    """Result from a voting system.

    Attributes:
        system_name: Human-readable name of the voting system
        outcome: How the tabulation terminated
        winner: Id of the winning alternative, set only when decided
        trace: Human-readable transcript of the tabulation
        details: System-specific details for transparency/debugging
                 (e.g., per-round counts, eliminations, tiebreaker info)
        diagnostics: Anomalies found in the ballot data
    """
    system_name: str
    outcome: Outcome
    winner: str | None = None
    trace: list[str] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def decided(self) -> bool:
        return self.outcome is Outcome.DECIDED

    def to_dict(self) -> dict[str, Any]:
        return {
            "system_name": self.system_name,
            "outcome": self.outcome.value,
            "winner": self.winner,
            "trace": list(self.trace),
            "details": self.details,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
