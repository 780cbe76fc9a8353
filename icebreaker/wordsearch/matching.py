"""Match a finished selection against the hidden words."""

from typing import Collection, Sequence

from .grid import GridModel
from .models import Cell, MatchResult


def evaluate(path: Sequence[Cell], grid: GridModel, already_found: Collection[str]) -> MatchResult:
    """
    Decide whether ``path`` spells a target word, read forwards or backwards.

    A new word wins over an already-found one; within each, the forward
    reading is checked before the reversed one. Paths shorter than two cells
    never match. No state is read or written besides the arguments.

    Returns:
        MatchResult with status 'matched', 'already_found' or 'no_match'
    """
    cells = tuple(Cell(*c) for c in path)

    if len(cells) < 2:
        return MatchResult(status='no_match', cells=cells)

    readings = [
        (grid.spell(cells), False),
        (grid.spell(cells[::-1]), True),
    ]
    hits = [(word, backwards) for word, backwards in readings if grid.contains(word)]

    for word, backwards in hits:
        if word not in already_found:
            return MatchResult(status='matched', word=word, cells=cells, reversed=backwards)

    if hits:
        word, backwards = hits[0]
        return MatchResult(status='already_found', word=word, cells=cells, reversed=backwards)

    return MatchResult(status='no_match', cells=cells)
