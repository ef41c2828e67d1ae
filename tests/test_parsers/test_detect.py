"""Tests for parser detection."""

from runoff.parsers import (
    detect_parser, detect_parser_by_content, get_all_parsers, get_supported_formats,
)
from runoff.parsers.csv_ballots import CsvElectionParser
from runoff.parsers.json_ballots import JsonElectionParser


class TestDetectParser:
    def test_detects_json_by_name(self):
        assert isinstance(detect_parser("election.json"), JsonElectionParser)

    def test_detects_csv_by_name(self):
        assert isinstance(detect_parser("https://example.com/tally.csv"), CsvElectionParser)

    def test_returns_none_for_unknown_name(self):
        assert detect_parser("election.xlsx") is None


class TestDetectParserByContent:
    def test_detects_json(self, election_json):
        parser = detect_parser_by_content(election_json, "upload")
        assert isinstance(parser, JsonElectionParser)

    def test_detects_csv(self, tally_csv):
        parser = detect_parser_by_content(tally_csv, "upload")
        assert isinstance(parser, CsvElectionParser)

    def test_returns_none_for_plain_text(self):
        assert detect_parser_by_content(b"Hello world", "notes.txt") is None

    def test_returns_none_for_empty_content(self):
        assert detect_parser_by_content(b"", "empty") is None


class TestRegistry:
    def test_all_parsers_registered(self):
        parsers = get_all_parsers()
        assert JsonElectionParser in parsers
        assert CsvElectionParser in parsers

    def test_supported_formats(self):
        text = get_supported_formats()
        assert "JSON (e.g. election.json)" in text
        assert "CSV tally sheet (e.g. tally.csv)" in text
