"""Shared fixtures for voting system tests."""

import pytest
from tests.conftest import make_election


@pytest.fixture
def three_way():
    """Three candidates, no blank, decided after one elimination.

    Round 1: A=6, B=4, C=5. B eliminated, B's ballots go to C.
    Round 2: A=6, C=9. C wins with 60%.
    """
    return make_election("Three Way", 3, [
        (["1", "2", "3"], 3),
        (["1", "3", "2"], 3),
        (["3", "2", "1"], 5),
        (["2", "3", "1"], 4),
    ], blank=False)


@pytest.fixture
def blank_wins():
    """BLANK, A, B. A is eliminated and A's voters fall back to BLANK.

    Round 1: BLANK=4, A=3, B=4. A eliminated.
    Round 2: BLANK=7, B=4. BLANK wins.
    """
    return make_election("Blank Wins", 2, [
        (["1", "0"], 3),
        (["2", "0"], 4),
        (["0"], 4),
    ])


@pytest.fixture
def five_candidates():
    """Five candidates with three eliminations before a majority.

    Round 1: BLANK=0, A=0, B=16, C=8, D=9, E=2. A eliminated (BLANK is exempt).
    Round 2: B=16, C=8, D=9, E=2. E eliminated, E's ballots go to D.
    Round 3: B=16, C=8, D=11. C eliminated, C's ballots go to D.
    Round 4: B=16, D=19. D wins with 54%.
    """
    return make_election("Five Candidates", 5, [
        (["4", "3", "1", "5", "2"], 9),
        (["2", "5", "1", "3", "4"], 5),
        (["5", "1", "4", "2", "3"], 2),
        (["2", "3", "1", "4", "5"], 5),
        (["3", "1", "4", "2", "5"], 8),
        (["2", "4", "3", "1", "5"], 6),
    ])


@pytest.fixture
def random_tiebreak():
    """Four candidates, no blank; B and C tie for last with no later preferences.

    Round 1: A=2, B=1, C=1, D=2. Cascade cannot split B and C.
    """
    return make_election("Random Tiebreak", 4, [
        (["1"], 2),
        (["2"], 1),
        (["3"], 1),
        (["4"], 2),
    ], blank=False)
