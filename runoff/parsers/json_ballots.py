"""Parser for JSON election files."""

import json
from pathlib import PurePosixPath
from urllib.parse import urlparse

from runoff.models import Alternative, Ballot, Election
from runoff.parsers import register_parser
from runoff.parsers.base import ElectionParser, parse_threshold


def default_election_name(source: str) -> str:
    """Derive an election name from a filename or URL."""
    path = urlparse(source).path or source
    return PurePosixPath(path).stem or "Untitled Election"


@register_parser
class JsonElectionParser(ElectionParser):
    """Parser for JSON election files.

    Expected structure:
        {
            "name": "Board election",
            "threshold": 0.5,
            "alternatives": [{"id": "1", "label": "Alice"}, ...],
            "ballots": [{"id": "b1", "preferences": ["1", "2"]}, ...]
        }

    "name" and "threshold" are optional. The older layout using "_id",
    "description", "votes" and per-ballot "alternatives" is also accepted.
    A ballot may carry a "count" to stand for that many identical ballots.
    """

    FORMAT_NAME = "JSON"
    EXAMPLE_FILENAME = "election.json"

    def can_parse(self, source: str) -> bool:
        return urlparse(source).path.lower().endswith(".json")

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Tell-tale sign: a JSON object with an "alternatives" key."""
        text = content.decode("utf-8", errors="replace").lstrip()
        return text.startswith("{") and '"alternatives"' in text

    def parse(self, source: str, content: bytes) -> Election:
        try:
            data = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Invalid JSON: {e}") from e
        return self.parse_data(data, source)

    def parse_data(self, data, source: str = "") -> Election:
        """Build an Election from already-decoded JSON data."""
        if not isinstance(data, dict):
            raise ValueError("Election JSON must be an object")
        if "alternatives" not in data:
            raise ValueError("No alternatives found in election data")

        raw_ballots = data.get("ballots", data.get("votes"))
        if raw_ballots is None:
            raise ValueError("No ballots found in election data")

        try:
            alternatives = [Alternative.from_dict(a) for a in data["alternatives"]]
            ballots = []
            for raw in raw_ballots:
                ballot = Ballot.from_dict(raw)
                count = int(raw.get("count", 1))
                if count < 0:
                    raise ValueError(f"Negative ballot count: {count}")
                ballots.extend(ballot.copy() for _ in range(count))
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Malformed election data: {e!r}") from e

        return Election(
            name=data.get("name") or default_election_name(source),
            alternatives=alternatives,
            ballots=ballots,
            threshold=parse_threshold(data.get("threshold")),
        )
