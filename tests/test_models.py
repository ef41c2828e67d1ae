"""Tests for core data models."""

from runoff.models import (
    Alternative, Ballot, Diagnostic, Election, Outcome, VotingResult,
)


class TestAlternative:
    def test_from_dict(self):
        assert Alternative.from_dict({"id": "1", "label": "Alice"}) == Alternative("1", "Alice")

    def test_from_legacy_dict(self):
        alternative = Alternative.from_dict({"_id": 7, "description": "Bob"})
        assert alternative == Alternative("7", "Bob")

    def test_is_blank(self):
        assert Alternative("0", "BLANK").is_blank
        assert not Alternative("1", "blank").is_blank

    def test_to_dict(self):
        assert Alternative("1", "Alice").to_dict() == {"id": "1", "label": "Alice"}


class TestBallot:
    def test_from_dict(self):
        ballot = Ballot.from_dict({"id": "b1", "preferences": ["1", "2"]})
        assert ballot == Ballot("b1", ["1", "2"])

    def test_from_legacy_dict_coerces_ids(self):
        ballot = Ballot.from_dict({"_id": 3, "alternatives": [1, 2, 1]})
        assert ballot == Ballot("3", ["1", "2", "1"])

    def test_from_dict_without_id(self):
        assert Ballot.from_dict({"preferences": []}).id is None

    def test_is_empty(self):
        assert Ballot("b1", []).is_empty
        assert not Ballot("b1", ["1"]).is_empty

    def test_copy_is_independent(self):
        ballot = Ballot("b1", ["1", "2"])
        copy = ballot.copy()
        copy.preferences.remove("1")
        assert ballot.preferences == ["1", "2"]


class TestElection:
    def test_blank_alternative(self):
        election = Election(
            name="Test",
            alternatives=[Alternative("0", "BLANK"), Alternative("1", "Alice")],
            ballots=[],
        )
        assert election.blank_alternative == Alternative("0", "BLANK")

    def test_last_blank_wins(self):
        election = Election(
            name="Test",
            alternatives=[Alternative("0", "BLANK"), Alternative("9", "BLANK")],
            ballots=[],
        )
        assert election.blank_alternative.id == "9"

    def test_no_blank(self):
        election = Election(name="Test", alternatives=[Alternative("1", "Alice")], ballots=[])
        assert election.blank_alternative is None

    def test_counts_and_labels(self):
        election = Election(
            name="Test",
            alternatives=[Alternative("1", "Alice"), Alternative("2", "Bob")],
            ballots=[Ballot("b1", ["1"]), Ballot("b2", [])],
        )
        assert election.num_alternatives == 2
        assert election.num_ballots == 2
        assert election.get_label("2") == "Bob"
        assert election.get_label("3") is None


class TestVotingResult:
    def test_decided(self):
        assert VotingResult("IRV", Outcome.DECIDED, winner="1").decided
        assert not VotingResult("IRV", Outcome.TIED).decided
        assert not VotingResult("IRV", Outcome.ABORTED).decided

    def test_to_dict(self):
        result = VotingResult(
            system_name="Instant Runoff",
            outcome=Outcome.TIED,
            trace=["Round #1."],
            details={"rounds": []},
            diagnostics=[Diagnostic("unknown_alternative", "Invalid alternative ID 9", 1, "9", "b1")],
        )
        assert result.to_dict() == {
            "system_name": "Instant Runoff",
            "outcome": "tied",
            "winner": None,
            "trace": ["Round #1."],
            "details": {"rounds": []},
            "diagnostics": [{
                "kind": "unknown_alternative",
                "message": "Invalid alternative ID 9",
                "round": 1,
                "alternative_id": "9",
                "ballot_id": "b1",
            }],
        }
