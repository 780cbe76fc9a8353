"""Word-search grid engine for the ice-breaker game."""

from .errors import WordSearchError, OutOfBoundsError, AlreadyRecordedError
from .models import (
    Cell,
    SelectionPath,
    Progress,
    Placement,
    FoundWord,
    MatchResult,
    ValidationError,
    ValidationResult,
    WordSearchConfig,
)
from .grid import GridModel, build_grid, render_grid, find_word_paths, locate_word, grid_from_config
from .selection import SelectionTracker
from .matching import evaluate
from .state import PuzzleState
from .puzzle import WordSearchPuzzle, EVENTS
from .verify import verify_puzzle

__all__ = [
    # Errors
    "WordSearchError",
    "OutOfBoundsError",
    "AlreadyRecordedError",
    # Models
    "Cell",
    "SelectionPath",
    "Progress",
    "Placement",
    "FoundWord",
    "MatchResult",
    "ValidationError",
    "ValidationResult",
    "WordSearchConfig",
    # Grid
    "GridModel",
    "build_grid",
    "render_grid",
    "find_word_paths",
    "locate_word",
    "grid_from_config",
    # Engine
    "SelectionTracker",
    "evaluate",
    "PuzzleState",
    "WordSearchPuzzle",
    "EVENTS",
    # Authoring checks
    "verify_puzzle",
]
