"""
Word-search puzzle facade.

Wires a GridModel, a SelectionTracker and a PuzzleState together, turns
pointer events into matches and notifies subscribers through explicit
callbacks.

Events and their callback arguments:
    word_found(word, progress)
    already_found(word)
    no_match(path)
    puzzle_complete()
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr

from .grid import GridModel, grid_from_config, render_grid
from .matching import evaluate
from .models import Cell, MatchResult, Progress, WordSearchConfig
from .selection import SelectionTracker
from .state import PuzzleState


logger = logging.getLogger(__name__)

EVENTS = ("word_found", "already_found", "no_match", "puzzle_complete")


class WordSearchPuzzle(BaseModel):
    """
    One playable word-search puzzle.

    Attributes:
        title: Display name of the puzzle
        grid: The letter grid and its target words
        tracker: Drag-path tracker for the current gesture
        state: Found words and completion status
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: str = "Word Hunt"
    grid: GridModel
    tracker: SelectionTracker
    state: PuzzleState
    _listeners: Dict[str, List[Callable[..., Any]]] = PrivateAttr(
        default_factory=lambda: {event: [] for event in EVENTS}
    )
    _completion_fired: bool = PrivateAttr(default=False)

    @classmethod
    def create(
        cls,
        grid: GridModel,
        required: Optional[int] = None,
        strict: bool = False,
        title: str = "Word Hunt",
    ) -> "WordSearchPuzzle":
        """
        Factory method to create a fresh puzzle over ``grid``.

        Args:
            grid: The letter grid and its target words
            required: Finds needed to complete (default: every word)
            strict: Only accept straight-line drags
            title: Display name

        Returns:
            A new WordSearchPuzzle with nothing found yet
        """
        return cls(
            title=title,
            grid=grid,
            tracker=SelectionTracker(strict=strict),
            state=PuzzleState(target_words=grid.words, required=required),
        )

    @classmethod
    def from_config(cls, config: WordSearchConfig) -> "WordSearchPuzzle":
        """Build a puzzle from its configuration."""
        return cls.create(
            grid_from_config(config),
            required=config.required,
            strict=config.strict_selection,
            title=config.title,
        )

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """
        Register ``callback`` for ``event``.

        Raises:
            ValueError: If ``event`` is not one of EVENTS
        """
        if event not in self._listeners:
            raise ValueError(f"Unknown event '{event}', expected one of {EVENTS}")
        self._listeners[event].append(callback)

    def _emit(self, event: str, *args: Any) -> None:
        for callback in self._listeners[event]:
            callback(*args)

    @property
    def is_complete(self) -> bool:
        return self.state.is_complete

    def progress(self) -> Progress:
        return self.state.progress()

    def pointer_down(self, cell: Cell) -> None:
        """Start a drag at ``cell``."""
        self._check_cell(cell)
        self.tracker.begin(cell)

    def pointer_enter(self, cell: Cell) -> None:
        """Drag over ``cell``."""
        self._check_cell(cell)
        self.tracker.extend(cell)

    def pointer_leave(self) -> None:
        """The pointer left the grid: drop the drag."""
        self.tracker.cancel()

    def pointer_up(self) -> MatchResult:
        """
        Release the drag and score the selected path.

        Returns:
            The MatchResult for the released path
        """
        path = self.tracker.end()
        result = evaluate(path, self.grid, self.state.found_words)

        if result.status == 'matched':
            completed = self.state.record_match(result.word, result.cells)
            try:
                self._emit("word_found", result.word, self.state.progress())
            finally:
                # Completion fires even when a word_found listener raises
                if completed:
                    self._fire_completion()
        elif result.status == 'already_found':
            logger.debug("'%s' already found", result.word)
            self._emit("already_found", result.word)
        elif path:
            logger.debug("No match for %s", self.grid.spell(path))
            self._emit("no_match", path)

        return result

    def select(self, cells: List[Cell]) -> MatchResult:
        """Run a whole gesture over ``cells``: down, enter each, up."""
        if not cells:
            return MatchResult(status='no_match')
        self.pointer_down(cells[0])
        for cell in cells[1:]:
            self.pointer_enter(cell)
        return self.pointer_up()

    def render(self) -> str:
        """Text rendering of the grid with found words in lowercase."""
        return render_grid(self.grid, self.state.credited_cells())

    def _fire_completion(self) -> None:
        if self._completion_fired:
            return
        self._completion_fired = True
        logger.info("Puzzle '%s' complete", self.title)
        self._emit("puzzle_complete")

    def _check_cell(self, cell: Cell) -> None:
        # Raises OutOfBoundsError for cells off the grid
        self.grid.character_at(*cell)
