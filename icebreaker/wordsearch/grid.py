"""Grid model, grid building and rendering utilities."""

import logging
import random
import string
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .errors import OutOfBoundsError
from .models import Cell, DIRECTION_STEPS, Placement, ValidationError, WordSearchConfig


logger = logging.getLogger(__name__)


class GridModel(BaseModel):
    """
    Immutable square letter matrix plus the set of hidden target words.

    Rows and words are normalised to uppercase at construction.

    Attributes:
        rows: One string per grid row, each exactly ``size`` letters long
        words: The target words hidden in the grid
    """

    model_config = ConfigDict(frozen=True)

    rows: Tuple[str, ...]
    words: FrozenSet[str]

    @field_validator('rows')
    @classmethod
    def _normalise_rows(cls, rows: Tuple[str, ...]) -> Tuple[str, ...]:
        if not rows:
            raise ValueError("Grid must have at least one row")
        rows = tuple(r.strip().upper() for r in rows)
        size = len(rows)
        for i, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Row {i} has {len(row)} letters, expected {size}")
            if not all(ch in string.ascii_uppercase for ch in row):
                raise ValueError(f"Row {i} contains non A-Z characters: '{row}'")
        return rows

    @field_validator('words')
    @classmethod
    def _normalise_words(cls, words: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(w.strip().upper() for w in words)

    @property
    def size(self) -> int:
        return len(self.rows)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def character_at(self, row, col: Optional[int] = None) -> str:
        """
        Letter at (row, col), or at a Cell passed as the only argument.

        Raises:
            OutOfBoundsError: If the coordinate lies outside the grid
        """
        if col is None:
            row, col = row
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.size)
        return self.rows[row][col]

    def contains(self, word: str) -> bool:
        """True if ``word`` is a target word (case-insensitive)."""
        return word.strip().upper() in self.words

    def spell(self, cells: Iterable[Cell]) -> str:
        """Concatenate the letters under ``cells`` in order."""
        return ''.join(self.character_at(row, col) for row, col in cells)


def build_grid(
    size: int,
    placements: List[Placement],
    seed: Optional[int] = None,
    fill: Optional[str] = None,
) -> Tuple[List[str], List[ValidationError]]:
    """
    Lay out placed words on a ``size`` x ``size`` grid and fill the gaps.

    Empty cells get ``fill`` when given, otherwise random letters drawn from
    a generator seeded with ``seed``. Conflicting overlaps and placements
    running off the grid are reported, not raised.
    """
    cells: Dict[Tuple[int, int], str] = {}
    errors: List[ValidationError] = []

    for placement in placements:
        path = placement.cells()
        if not all(0 <= r < size and 0 <= c < size for r, c in path):
            errors.append(ValidationError(
                code="PLACEMENT_OOB",
                message=(
                    f"'{placement.word}' at ({placement.row}, {placement.col}) "
                    f"heading {placement.direction} runs off the {size}x{size} grid"
                ),
                word=placement.word
            ))
            continue

        for cell, letter in zip(path, placement.word):
            if cell in cells and cells[cell] != letter:
                errors.append(ValidationError(
                    code="GRID_CONFLICT",
                    message=f"Cell conflict at {tuple(cell)}: existing '{cells[cell]}' vs new '{letter}' from '{placement.word}'",
                    word=placement.word
                ))
            cells[cell] = letter

    rng = random.Random(seed)
    rows = [
        ''.join(
            cells.get((r, c)) or fill or rng.choice(string.ascii_uppercase)
            for c in range(size)
        )
        for r in range(size)
    ]

    return rows, errors


def render_grid(grid: GridModel, highlight: Optional[Set[Cell]] = None) -> str:
    """Render the grid with row/column indices; highlighted cells in lowercase."""
    highlight = highlight or set()
    width = len(str(grid.size - 1))

    header = ' ' * (width + 1) + ' '.join(str(c % 10) for c in range(grid.size))
    lines = [header]
    for r, row in enumerate(grid.rows):
        letters = [
            ch.lower() if (r, c) in highlight else ch
            for c, ch in enumerate(row)
        ]
        lines.append(f"{r:>{width}} " + ' '.join(letters))

    return '\n'.join(lines)


def find_word_paths(grid: GridModel, word: str) -> List[List[Cell]]:
    """All straight-line paths spelling ``word``, in reading order of their start cell."""
    word = word.strip().upper()
    if not word:
        return []

    paths: List[List[Cell]] = []
    seen: Set[FrozenSet[Cell]] = set()

    for r in range(grid.size):
        for c in range(grid.size):
            if grid.rows[r][c] != word[0]:
                continue
            for dr, dc in DIRECTION_STEPS.values():
                path = [Cell(r + i * dr, c + i * dc) for i in range(len(word))]
                if not all(grid.in_bounds(*cell) for cell in path):
                    continue
                if grid.spell(path) != word:
                    continue
                # A palindrome reads the same both ways along one line
                key = frozenset(path)
                if key not in seen:
                    seen.add(key)
                    paths.append(path)

    return paths


def locate_word(grid: GridModel, word: str) -> Optional[List[Cell]]:
    """First straight-line path spelling ``word``, or None."""
    paths = find_word_paths(grid, word)
    return paths[0] if paths else None


def grid_from_config(config: WordSearchConfig) -> GridModel:
    """
    Build the GridModel described by a puzzle configuration.

    Raises:
        ValueError: If the placements conflict or run off the grid
    """
    if config.rows is not None:
        rows = config.rows
    else:
        rows, errors = build_grid(config.size, config.placements, seed=config.seed)
        if errors:
            raise ValueError(f"Grid errors: {[e.message for e in errors]}")
        logger.debug("Built %dx%d grid for '%s'", config.size, config.size, config.title)

    return GridModel(rows=rows, words=config.target_words)
