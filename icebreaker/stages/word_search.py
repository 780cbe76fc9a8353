"""Word-search stage: mounts a WordSearchPuzzle in the sequence."""

from ..wordsearch import WordSearchConfig, WordSearchPuzzle
from .base import Stage


class WordSearchStage(Stage):
    """
    Adapter between a puzzle and the sequencer.

    The puzzle's only outward signal, ``puzzle_complete``, is forwarded as
    this stage's completion.
    """

    config: WordSearchConfig
    puzzle: WordSearchPuzzle

    def model_post_init(self, __context) -> None:
        """Forward puzzle completion to the stage signal."""
        self.puzzle.subscribe("puzzle_complete", self._signal_complete)

    @classmethod
    def create(cls, config: WordSearchConfig) -> "WordSearchStage":
        return cls(config=config, puzzle=WordSearchPuzzle.from_config(config))
