"""Data models for the word-search engine."""

from typing import List, Optional, Literal, NamedTuple, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator


Direction = Literal['E', 'W', 'S', 'N', 'SE', 'NW', 'SW', 'NE']
MatchStatus = Literal['matched', 'already_found', 'no_match']

# (row step, col step) for each compass direction
DIRECTION_STEPS = {
    'E': (0, 1),
    'W': (0, -1),
    'S': (1, 0),
    'N': (-1, 0),
    'SE': (1, 1),
    'NW': (-1, -1),
    'SW': (1, -1),
    'NE': (-1, 1),
}


class Cell(NamedTuple):
    """A (row, col) coordinate on the grid."""
    row: int
    col: int


SelectionPath = Tuple[Cell, ...]


class Progress(NamedTuple):
    """Found/total snapshot of a puzzle."""
    found: int
    total: int


class Placement(BaseModel):
    """An authored word position: start cell plus reading direction."""
    word: str = Field(..., min_length=2)
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    direction: Direction = 'E'

    @field_validator('word')
    @classmethod
    def _upper_word(cls, value: str) -> str:
        value = value.strip().upper()
        if not value.isalpha():
            raise ValueError(f"Placement word must be letters only, got '{value}'")
        return value

    def cells(self) -> List[Cell]:
        """Cells covered by this placement, in reading order."""
        dr, dc = DIRECTION_STEPS[self.direction]
        return [Cell(self.row + i * dr, self.col + i * dc) for i in range(len(self.word))]


class FoundWord(BaseModel):
    """A credited word and the path that found it."""
    word: str
    cells: SelectionPath


class MatchResult(BaseModel):
    """Outcome of evaluating one finished selection."""
    status: MatchStatus
    word: Optional[str] = None
    cells: SelectionPath = ()
    reversed: bool = False  # True when the path spelled the word backwards

    @property
    def matched(self) -> bool:
        return self.status == 'matched'


class ValidationError(BaseModel):
    """A single authoring problem found in a puzzle."""
    code: str
    message: str
    word: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of checking an authored puzzle."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    warnings: List[ValidationError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    grid: Optional[str] = None


class WordSearchConfig(BaseModel):
    """
    Configuration for one word-search puzzle.

    A puzzle is laid out either from literal ``rows`` or from ``size`` plus
    ``placements`` (remaining cells filled from ``seed``). ``words`` defaults
    to the placed words; ``required`` defaults to all of them.
    """
    kind: Literal['word_search'] = 'word_search'
    title: str = "Word Hunt"
    words: List[str] = Field(default_factory=list)
    rows: Optional[List[str]] = None
    size: Optional[int] = Field(None, ge=2)
    placements: List[Placement] = Field(default_factory=list)
    seed: Optional[int] = None
    required: Optional[int] = Field(None, ge=1)
    strict_selection: bool = False

    @model_validator(mode='after')
    def _check_layout(self) -> "WordSearchConfig":
        if self.rows is None and self.size is None:
            raise ValueError("Word search needs either 'rows' or 'size' with 'placements'")
        if self.rows is not None and self.placements:
            raise ValueError("'rows' and 'placements' are mutually exclusive")
        if not self.target_words:
            raise ValueError("Word search needs at least one target word")
        if self.required is not None and self.required > len(set(self.target_words)):
            raise ValueError(
                f"required={self.required} exceeds the {len(set(self.target_words))} target words"
            )
        return self

    @property
    def target_words(self) -> List[str]:
        """Declared words, or the placed words when none are declared."""
        words = self.words or [p.word for p in self.placements]
        return [w.strip().upper() for w in words]
