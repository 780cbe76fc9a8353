"""Tests for the riddle, grouping, bingo and word-search stages."""

from unittest.mock import Mock

import pytest
from pydantic import ValidationError as PydanticValidationError

from icebreaker.stages import (
    FREE_SQUARE,
    BingoConfig,
    BingoStage,
    GroupingConfig,
    GroupingStage,
    RiddleConfig,
    RiddleStage,
    WordSearchStage,
)
from icebreaker.stages.presets import GROUP_BUILDER, HUMAN_BINGO, RIDDLE, WORD_HUNT_DIAGONAL
from icebreaker.wordsearch import WordSearchConfig

from conftest import DIAGONAL_PATHS


class TestRiddleStage:
    """Free-text riddle answers."""

    @pytest.fixture
    def stage(self):
        return RiddleStage(config=RiddleConfig(**RIDDLE))

    def test_wrong_answer(self, stage):
        assert stage.submit("wind") is False
        assert stage.is_complete is False
        assert stage.attempts == 1

    @pytest.mark.parametrize("answer", ["echo", "ECHO", "  Echo \n"])
    def test_answer_normalised(self, stage, answer):
        assert stage.submit(answer) is True
        assert stage.is_complete is True

    def test_completes_once(self, stage):
        on_complete = Mock()
        stage.connect(on_complete)
        stage.submit("echo")
        stage.submit("echo")
        on_complete.assert_called_once_with()

    def test_hint(self, stage):
        assert stage.hint.startswith("Think about sounds")


class TestGroupingStage:
    """Category grouping."""

    @pytest.fixture
    def stage(self):
        return GroupingStage(config=GroupingConfig(**GROUP_BUILDER))

    def _pick(self, stage, items):
        for item in items:
            stage.toggle(item)

    def test_items(self, stage):
        assert len(stage.items) == 16
        assert stage.config.group_size == 4

    def test_correct_group(self, stage):
        self._pick(stage, ["hall", "LIBRARY", "Lounge", "STUDY"])
        assert stage.submit() == "ROOMS IN THE GAME CLUE"
        assert stage.selected == []
        assert stage.group_of("HALL") == "ROOMS IN THE GAME CLUE"

    def test_order_does_not_matter(self, stage):
        self._pick(stage, ["UNIT", "SPY", "ANIMAL", "BIRTHMARK"])
        assert stage.submit() == "WHAT A MOLE CAN BE"

    def test_wrong_group_counts_attempt(self, stage):
        self._pick(stage, ["HALL", "LIBRARY", "LOUNGE", "EGG"])
        assert stage.submit() is None
        assert stage.attempts == 1
        assert stage.selected == []

    def test_incomplete_selection_not_submitted(self, stage):
        self._pick(stage, ["HALL", "LIBRARY"])
        assert stage.submit() is None
        assert stage.attempts == 0
        assert stage.selected == ["HALL", "LIBRARY"]

    def test_toggle_deselects(self, stage):
        assert stage.toggle("EGG") is True
        assert stage.toggle("EGG") is True
        assert stage.selected == []

    def test_selection_capped(self, stage):
        self._pick(stage, ["HALL", "LIBRARY", "LOUNGE", "STUDY"])
        assert stage.toggle("EGG") is False
        assert len(stage.selected) == 4

    def test_solved_items_locked(self, stage):
        self._pick(stage, ["HALL", "LIBRARY", "LOUNGE", "STUDY"])
        stage.submit()
        assert stage.toggle("HALL") is False

    def test_unknown_item(self, stage):
        with pytest.raises(ValueError):
            stage.toggle("CANDLESTICK")

    def test_completes_after_all_groups(self, stage):
        on_complete = Mock()
        stage.connect(on_complete)
        for name, items in stage.config.groups.items():
            on_complete.assert_not_called()
            self._pick(stage, items)
            assert stage.submit() == name
        assert stage.is_complete is True
        on_complete.assert_called_once_with()

    def test_unequal_groups_rejected(self):
        with pytest.raises(PydanticValidationError):
            GroupingConfig(groups={"A": ["X", "Y"], "B": ["Z", "W", "V"]})

    def test_shared_item_rejected(self):
        with pytest.raises(PydanticValidationError):
            GroupingConfig(groups={"A": ["X", "Y"], "B": ["X", "W"]})


class TestBingoStage:
    """Human bingo card."""

    @pytest.fixture
    def stage(self):
        return BingoStage.create(BingoConfig(**HUMAN_BINGO, seed=3))

    def test_card_layout(self, stage):
        assert stage.num_squares == 25
        assert stage.prompt_at(12) == FREE_SQUARE
        prompts = [stage.prompt_at(i) for i in range(25) if i != 12]
        assert len(set(prompts)) == 24
        assert set(prompts) <= set(HUMAN_BINGO["prompts"])

    def test_seeded_card_is_reproducible(self, stage):
        again = BingoStage.create(BingoConfig(**HUMAN_BINGO, seed=3))
        assert again.card == stage.card

    def test_free_square_counts(self, stage):
        assert stage.filled_count == 1

    def test_completes_at_threshold(self, stage):
        on_complete = Mock()
        stage.connect(on_complete)
        squares = [i for i in range(25) if i != 12]
        for i in squares[:11]:
            stage.fill(i, f"Person {i}")
        assert stage.filled_count == 12
        on_complete.assert_not_called()

        stage.fill(squares[11], "Alex")
        assert stage.is_complete is True
        stage.fill(squares[12], "Sam")
        on_complete.assert_called_once_with()

    def test_blank_name_clears(self, stage):
        stage.fill(0, "Alex")
        stage.fill(0, "   ")
        assert 0 not in stage.names
        assert stage.filled_count == 1

    def test_centre_is_not_fillable(self, stage):
        with pytest.raises(ValueError):
            stage.fill(12, "Alex")

    def test_off_card(self, stage):
        with pytest.raises(IndexError):
            stage.fill(25, "Alex")

    def test_needs_enough_prompts(self):
        with pytest.raises(PydanticValidationError):
            BingoConfig(prompts=["one", "two"])

    def test_even_card_rejected(self):
        with pytest.raises(PydanticValidationError):
            BingoConfig(prompts=HUMAN_BINGO["prompts"], card_size=4)


class TestWordSearchStage:
    """Puzzle completion reaches the stage signal."""

    def test_forwards_completion(self):
        stage = WordSearchStage.create(WordSearchConfig(**WORD_HUNT_DIAGONAL))
        on_complete = Mock()
        stage.connect(on_complete)

        for path in DIAGONAL_PATHS.values():
            stage.puzzle.select(path)

        assert stage.is_complete is True
        on_complete.assert_called_once_with()
        assert stage.title == "Word Hunt"
