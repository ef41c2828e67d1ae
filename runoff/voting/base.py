"""Abstract base class for voting systems."""

from abc import ABC, abstractmethod

from runoff.models import Election, VotingResult


class VotingSystem(ABC):
    """Abstract base class for voting systems.

    Each voting system implementation tabulates an election using its own
    algorithm. Systems are registered via the @register_voting_system
    decorator in runoff/voting/__init__.py.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this voting system."""
        pass

    @property
    def description(self) -> str:
        """Optional description of how this voting system works."""
        return ""

    @abstractmethod
    def calculate(self, election: Election) -> VotingResult:
        """Tabulate the election using this voting system.

        Args:
            election: The alternatives, ballots and winning threshold

        Returns:
            VotingResult with the outcome and calculation details
        """
        pass
