"""
Tests for the match engine.

Covers purity, forward/reverse symmetry, duplicate credit, the
single-cell rule and the forward-first tie-break.
"""

import pytest

from icebreaker.wordsearch import Cell, GridModel, OutOfBoundsError, evaluate

from conftest import DIAGONAL_PATHS, TEAM_PATH


class TestTeamScenarios:
    """The TEAM example grid."""

    def test_forward_drag_matches(self, team_grid):
        result = evaluate(TEAM_PATH, team_grid, set())
        assert result.status == "matched"
        assert result.word == "TEAM"
        assert result.cells == tuple(TEAM_PATH)
        assert result.reversed is False
        assert result.matched

    def test_reversed_drag_matches(self, team_grid):
        result = evaluate(TEAM_PATH[::-1], team_grid, set())
        assert result.status == "matched"
        assert result.word == "TEAM"
        assert result.reversed is True

    def test_single_cell_never_matches(self, team_grid):
        result = evaluate([Cell(0, 0)], team_grid, set())
        assert result.status == "no_match"
        assert result.word is None

    def test_empty_path(self, team_grid):
        assert evaluate([], team_grid, set()).status == "no_match"

    def test_already_found(self, team_grid):
        result = evaluate(TEAM_PATH, team_grid, {"TEAM"})
        assert result.status == "already_found"
        assert result.word == "TEAM"

    def test_partial_word(self, team_grid):
        assert evaluate(TEAM_PATH[:3], team_grid, set()).status == "no_match"

    def test_overlong_selection(self, team_grid):
        path = TEAM_PATH + [Cell(0, 4)]
        assert evaluate(path, team_grid, set()).status == "no_match"


class TestProperties:
    """Properties that hold for every grid and word set."""

    def test_pure(self, diagonal_grid):
        """Identical arguments give identical results."""
        found = {"TRUST"}
        for path in DIAGONAL_PATHS.values():
            assert evaluate(path, diagonal_grid, found) == evaluate(path, diagonal_grid, found)
        assert found == {"TRUST"}

    @pytest.mark.parametrize("word", sorted(DIAGONAL_PATHS))
    def test_forward_reverse_symmetry(self, diagonal_grid, word):
        path = DIAGONAL_PATHS[word]
        forward = evaluate(path, diagonal_grid, set())
        backward = evaluate(path[::-1], diagonal_grid, set())
        assert (forward.status, forward.word) == ("matched", word)
        assert (backward.status, backward.word) == ("matched", word)

    @pytest.mark.parametrize("word", sorted(DIAGONAL_PATHS))
    def test_no_duplicate_credit(self, diagonal_grid, word):
        path = DIAGONAL_PATHS[word]
        assert evaluate(path, diagonal_grid, {word}).status == "already_found"
        assert evaluate(path[::-1], diagonal_grid, {word}).status == "already_found"

    def test_matches_on_content_not_shape(self):
        """Any drag order spelling the word counts; geometry is not checked."""
        grid = GridModel(rows=["TXEX", "XXXX", "AXMX", "XXXX"], words=["TEAM"])
        path = [Cell(0, 0), Cell(0, 2), Cell(2, 0), Cell(2, 2)]
        assert evaluate(path, grid, set()).word == "TEAM"

    def test_out_of_bounds_path(self, team_grid):
        with pytest.raises(OutOfBoundsError):
            evaluate([Cell(0, 0), Cell(0, 10)], team_grid, set())


class TestTieBreak:
    """Forward and reversed readings that spell different target words."""

    @pytest.fixture
    def grid(self):
        return GridModel(rows=["ABXX", "XXXX", "XXXX", "XXXX"], words=["AB", "BA"])

    def test_forward_wins(self, grid):
        result = evaluate([Cell(0, 0), Cell(0, 1)], grid, set())
        assert (result.status, result.word, result.reversed) == ("matched", "AB", False)

    def test_new_word_beats_found_word(self, grid):
        result = evaluate([Cell(0, 0), Cell(0, 1)], grid, {"AB"})
        assert (result.status, result.word, result.reversed) == ("matched", "BA", True)

    def test_both_found_reports_forward(self, grid):
        result = evaluate([Cell(0, 0), Cell(0, 1)], grid, {"AB", "BA"})
        assert (result.status, result.word) == ("already_found", "AB")
