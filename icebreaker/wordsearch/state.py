"""Found-word bookkeeping and completion status for one puzzle."""

import logging
from typing import Dict, FrozenSet, Optional, Sequence, Set

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator

from .errors import AlreadyRecordedError
from .models import Cell, FoundWord, Progress


logger = logging.getLogger(__name__)


class PuzzleState(BaseModel):
    """
    Words found so far and whether the puzzle is complete.

    The state starts InProgress and moves to Complete, permanently, on the
    ``record_match`` call that brings the found count up to ``threshold``.

    Attributes:
        target_words: Every word hidden in the grid
        required: How many finds complete the puzzle (default: all words)
    """

    target_words: FrozenSet[str]
    required: Optional[int] = Field(default=None, ge=1)
    _found: Dict[str, FoundWord] = PrivateAttr(default_factory=dict)
    _complete: bool = PrivateAttr(default=False)

    @field_validator('target_words')
    @classmethod
    def _normalise_words(cls, words: FrozenSet[str]) -> FrozenSet[str]:
        words = frozenset(w.strip().upper() for w in words)
        if not words:
            raise ValueError("A puzzle needs at least one target word")
        return words

    @model_validator(mode='after')
    def _check_required(self) -> "PuzzleState":
        if self.required is not None and self.required > len(self.target_words):
            raise ValueError(
                f"required={self.required} exceeds the {len(self.target_words)} target words"
            )
        return self

    @property
    def total(self) -> int:
        return len(self.target_words)

    @property
    def threshold(self) -> int:
        """Finds needed for completion."""
        return self.required if self.required is not None else self.total

    @property
    def found_words(self) -> Dict[str, FoundWord]:
        """Copy of the word -> FoundWord mapping."""
        return dict(self._found)

    @property
    def is_complete(self) -> bool:
        return self._complete

    def record_match(self, word: str, path: Sequence[Cell]) -> bool:
        """
        Credit ``word`` as found along ``path``.

        Returns:
            True if this call completed the puzzle, False otherwise

        Raises:
            AlreadyRecordedError: If ``word`` was already credited
            ValueError: If ``word`` is not a target word
        """
        word = word.strip().upper()
        if word in self._found:
            raise AlreadyRecordedError(word)
        if word not in self.target_words:
            raise ValueError(f"'{word}' is not a target word")

        self._found[word] = FoundWord(word=word, cells=tuple(Cell(*c) for c in path))
        found, total = self.progress()
        logger.info("Found '%s' (%d/%d)", word, found, total)

        if not self._complete and found >= self.threshold:
            self._complete = True
            return True
        return False

    def is_cell_credited(self, cell: Cell) -> bool:
        """True if ``cell`` lies on any found word's path."""
        cell = Cell(*cell)
        return any(cell in fw.cells for fw in self._found.values())

    def credited_cells(self) -> Set[Cell]:
        """Every cell on a found word's path."""
        return {cell for fw in self._found.values() for cell in fw.cells}

    def progress(self) -> Progress:
        return Progress(found=len(self._found), total=self.total)

    def get_state(self):
        """
        Get the puzzle state as a dictionary.

        Useful for serialization and logging.
        """
        found, total = self.progress()
        return {
            "found": found,
            "total": total,
            "required": self.threshold,
            "is_complete": self._complete,
            "found_words": sorted(self._found),
            "remaining_words": sorted(self.target_words - set(self._found)),
        }
