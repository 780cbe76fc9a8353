"""Riddle stage: a single free-text answer."""

import logging

from .base import Stage
from .models import RiddleConfig


logger = logging.getLogger(__name__)


class RiddleStage(Stage):
    """
    Solved by typing the answer; case and surrounding whitespace are ignored.

    Attributes:
        config: The riddle text, answer and optional hint
        attempts: Number of answers submitted
    """

    config: RiddleConfig
    attempts: int = 0

    @property
    def question(self) -> str:
        return self.config.question

    @property
    def hint(self):
        return self.config.hint

    def submit(self, answer: str) -> bool:
        """Check ``answer``; completes the stage when correct."""
        self.attempts += 1
        correct = answer.strip().lower() == self.config.answer.strip().lower()
        if correct:
            self._signal_complete()
        else:
            logger.debug("Wrong riddle answer %r (attempt %d)", answer, self.attempts)
        return correct
