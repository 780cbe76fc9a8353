"""Shared fixtures for the test suite."""

import pytest

from icebreaker.stages.presets import WORD_HUNT_DIAGONAL
from icebreaker.wordsearch import Cell, GridModel, WordSearchPuzzle


TEAM_ROWS = ["TEAMXXXXXX"] + ["XXXXXXXXXX"] * 9
TEAM_PATH = [Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(0, 3)]

# Where each word sits in the diagonal preset, in reading order
DIAGONAL_PATHS = {
    "TRUST": [Cell(0, c) for c in range(5)],
    "SHARE": [Cell(r, 9) for r in range(1, 6)],
    "LAUGH": [Cell(2 + i, 1 + i) for i in range(5)],
    "IDEAS": [Cell(8, 8 - i) for i in range(5)],
    "SMILE": [Cell(9 - i, 1 + i) for i in range(5)],
}


@pytest.fixture
def team_grid():
    """10x10 grid with TEAM along the top row."""
    return GridModel(rows=TEAM_ROWS, words=["TEAM"])


@pytest.fixture
def team_puzzle(team_grid):
    return WordSearchPuzzle.create(team_grid)


@pytest.fixture
def diagonal_grid():
    """The authored five-word grid with reversed and diagonal words."""
    return GridModel(rows=WORD_HUNT_DIAGONAL["rows"], words=WORD_HUNT_DIAGONAL["words"])


@pytest.fixture
def diagonal_puzzle(diagonal_grid):
    return WordSearchPuzzle.create(diagonal_grid)
