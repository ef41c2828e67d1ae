"""Parser for CSV tally sheets."""

import csv
import io
from urllib.parse import urlparse

from runoff.models import Alternative, Ballot, Election
from runoff.parsers import register_parser
from runoff.parsers.base import ElectionParser
from runoff.parsers.json_ballots import default_election_name


@register_parser
class CsvElectionParser(ElectionParser):
    """Parser for CSV tally sheets.

    Each row stands for `count` identical ballots, listing alternative
    labels from most to least preferred:

        count,rank1,rank2,rank3
        9,Alice,Bob,Carol
        5,Bob,,
        2,BLANK

    Alternatives are the labels in the order first seen, and each label
    doubles as the alternative id. An alternative nobody ranks cannot be
    expressed in this format.
    """

    FORMAT_NAME = "CSV tally sheet"
    EXAMPLE_FILENAME = "tally.csv"

    def can_parse(self, source: str) -> bool:
        return urlparse(source).path.lower().endswith(".csv")

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Tell-tale sign: a header row starting with count,rank1."""
        first_line = content.decode("utf-8-sig", errors="replace").lstrip().split("\n", 1)[0]
        header = [cell.strip().lower() for cell in first_line.split(",")]
        return header[:2] == ["count", "rank1"]

    def parse(self, source: str, content: bytes) -> Election:
        text = content.decode("utf-8-sig", errors="replace")
        rows = list(csv.reader(io.StringIO(text)))
        if not rows:
            raise ValueError("Empty tally sheet")

        header = [cell.strip().lower() for cell in rows[0]]
        if not header or header[0] != "count":
            raise ValueError("Tally sheet must start with a 'count' column")

        labels: list[str] = []
        ballots: list[Ballot] = []
        for line_number, row in enumerate(rows[1:], start=2):
            if not any(cell.strip() for cell in row):
                continue
            try:
                count = int(row[0])
            except ValueError:
                raise ValueError(f"Invalid count on line {line_number}: {row[0]!r}")
            if count < 0:
                raise ValueError(f"Negative count on line {line_number}: {count}")

            preferences = [cell.strip() for cell in row[1:] if cell.strip()]
            for label in preferences:
                if label not in labels:
                    labels.append(label)

            for i in range(count):
                ballots.append(Ballot(id=f"{line_number}-{i + 1}", preferences=list(preferences)))

        return Election(
            name=default_election_name(source),
            alternatives=[Alternative(id=label, label=label) for label in labels],
            ballots=ballots,
        )
