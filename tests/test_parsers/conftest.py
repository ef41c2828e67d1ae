"""Shared fixtures for parser tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def election_json():
    return (FIXTURES_DIR / "election.json").read_bytes()


@pytest.fixture
def legacy_json():
    """Election in the older _id/description/votes layout; BLANK wins."""
    return (FIXTURES_DIR / "legacy.json").read_bytes()


@pytest.fixture
def tally_csv():
    return (FIXTURES_DIR / "tally.csv").read_bytes()
