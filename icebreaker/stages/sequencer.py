"""
Stage sequencer: which mini-game is active, what is complete, and the
celebration pause between stages.
"""

import logging
from functools import partial
from typing import Any, Callable, Dict, List

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .base import Stage
from .models import GameHeader


logger = logging.getLogger(__name__)


class StageSequencer(BaseModel):
    """
    Linear controller over an ordered list of stages.

    A stage's completion signal marks it complete and starts a celebration;
    ``advance`` ends the celebration and mounts the next stage, or finishes
    the game after the last one.

    Events:
        stage_complete(index, title)
        game_complete()

    Attributes:
        stages: The mini-games, in play order
        title: Game title for the header
        current_stage: Index of the mounted stage
        completed_stages: Per-stage completion flags
        celebrating: Whether the post-stage celebration is showing
        is_game_complete: Whether the final stage has been passed
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    stages: List[Stage] = Field(..., min_length=1)
    title: str = "Ice Breaker Challenge"
    current_stage: int = 0
    completed_stages: List[bool] = Field(default_factory=list)
    celebrating: bool = False
    is_game_complete: bool = False
    _listeners: Dict[str, List[Callable[..., Any]]] = PrivateAttr(
        default_factory=lambda: {"stage_complete": [], "game_complete": []}
    )

    def model_post_init(self, __context) -> None:
        """Reset completion flags and listen to every stage."""
        self.completed_stages = [False] * len(self.stages)
        for index, stage in enumerate(self.stages):
            stage.connect(partial(self._on_stage_signal, index))

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """Register ``callback`` for 'stage_complete' or 'game_complete'."""
        if event not in self._listeners:
            raise ValueError(f"Unknown event '{event}'")
        self._listeners[event].append(callback)

    def _emit(self, event: str, *args: Any) -> None:
        for callback in self._listeners[event]:
            callback(*args)

    @property
    def stage(self) -> Stage:
        """The mounted stage."""
        return self.stages[self.current_stage]

    @property
    def num_stages(self) -> int:
        return len(self.stages)

    def _on_stage_signal(self, index: int) -> None:
        if index != self.current_stage:
            logger.warning("Ignoring completion of stage %d while stage %d is active", index, self.current_stage)
            return
        self.complete_current()

    def complete_current(self) -> bool:
        """
        Mark the mounted stage complete and start the celebration.

        Returns:
            True if the stage was newly completed
        """
        if self.is_game_complete or self.completed_stages[self.current_stage]:
            return False

        self.completed_stages[self.current_stage] = True
        self.celebrating = True
        logger.info("Stage %d/%d '%s' complete", self.current_stage + 1, self.num_stages, self.stage.title)
        self._emit("stage_complete", self.current_stage, self.stage.title)
        return True

    def advance(self) -> None:
        """
        End the celebration and move on.

        Raises:
            ValueError: If the mounted stage has not been completed
        """
        if not self.celebrating:
            raise ValueError(f"Stage '{self.stage.title}' is not complete yet")

        self.celebrating = False
        if self.current_stage < self.num_stages - 1:
            self.current_stage += 1
            logger.info("Starting stage %d/%d '%s'", self.current_stage + 1, self.num_stages, self.stage.title)
        else:
            self.is_game_complete = True
            logger.info("All %d stages complete", self.num_stages)
            self._emit("game_complete")

    def header(self) -> GameHeader:
        """Snapshot for the progress header."""
        return GameHeader(
            stage_number=self.current_stage + 1,
            total_stages=self.num_stages,
            stage_name=self.stage.title,
            completed_stages=list(self.completed_stages),
        )

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "title": self.title,
            "current_stage": self.current_stage,
            "stage_name": self.stage.title,
            "completed_stages": list(self.completed_stages),
            "celebrating": self.celebrating,
            "is_game_complete": self.is_game_complete,
        }
