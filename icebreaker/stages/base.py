"""Common behaviour for every mini-game stage."""

import logging
from typing import Callable, List

from pydantic import BaseModel, ConfigDict, PrivateAttr


logger = logging.getLogger(__name__)


class Stage(BaseModel):
    """
    A mini-game the sequencer can mount.

    Subclasses carry a ``config`` with a ``title`` and call
    ``_signal_complete`` when their win condition is met. The completion
    signal is raised at most once per stage instance.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _on_complete: List[Callable[[], None]] = PrivateAttr(default_factory=list)
    _completed: bool = PrivateAttr(default=False)

    @property
    def title(self) -> str:
        return self.config.title

    @property
    def is_complete(self) -> bool:
        return self._completed

    def connect(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` when this stage completes."""
        self._on_complete.append(callback)

    def _signal_complete(self) -> bool:
        if self._completed:
            return False
        self._completed = True
        logger.info("Stage '%s' complete", self.title)
        for callback in self._on_complete:
            callback()
        return True
