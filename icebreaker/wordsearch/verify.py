"""
Authoring checks for word-search puzzles.

Validates:
1. Every target word is at least two letters long
2. Every target word can be found along a straight line in the grid
3. Target words hidden more than once (warning only: any copy is accepted)
"""

from typing import List

from .grid import GridModel, find_word_paths, render_grid
from .models import ValidationError, ValidationResult


def verify_puzzle(grid: GridModel) -> ValidationResult:
    """
    Check that every target word in ``grid`` is genuinely findable.

    Returns a ValidationResult with:
    - valid: True if every word is placeable
    - errors: SHORT_WORD / UNPLACEABLE_WORD problems
    - warnings: DUPLICATE_WORD for words hidden more than once
    - words: The target words, sorted
    - grid: Rendered grid with every located word in lowercase
    """
    errors: List[ValidationError] = []
    warnings: List[ValidationError] = []
    located = set()

    for word in sorted(grid.words):
        if len(word) < 2:
            errors.append(ValidationError(
                code="SHORT_WORD",
                message=f"'{word}' is shorter than two letters and can never be selected",
                word=word
            ))
            continue

        paths = find_word_paths(grid, word)
        if not paths:
            errors.append(ValidationError(
                code="UNPLACEABLE_WORD",
                message=f"'{word}' does not appear along any straight line in the grid",
                word=word
            ))
            continue

        if len(paths) > 1:
            warnings.append(ValidationError(
                code="DUPLICATE_WORD",
                message=f"'{word}' appears {len(paths)} times in the grid",
                word=word
            ))
        located.update(paths[0])

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        words=sorted(grid.words),
        grid=render_grid(grid, located),
    )
