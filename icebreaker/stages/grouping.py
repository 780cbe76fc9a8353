"""Grouping stage: sort items into their hidden categories."""

import logging
from typing import List, Optional

from pydantic import Field

from .base import Stage
from .models import GroupingConfig


logger = logging.getLogger(__name__)


class GroupingStage(Stage):
    """
    Select a full group's worth of items and submit; matching selections
    solve that group. The stage completes once every group is solved.

    Attributes:
        config: Named groups of items
        selected: Items currently selected, in selection order
        solved_groups: Names of solved groups, in solving order
        attempts: Failed submissions
    """

    config: GroupingConfig
    selected: List[str] = Field(default_factory=list)
    solved_groups: List[str] = Field(default_factory=list)
    attempts: int = 0

    @property
    def items(self) -> List[str]:
        return self.config.items

    def group_of(self, item: str) -> Optional[str]:
        """Name of the solved group containing ``item``, if any."""
        item = item.strip().upper()
        for name in self.solved_groups:
            if item in self.config.groups[name]:
                return name
        return None

    def toggle(self, item: str) -> bool:
        """
        Select or deselect ``item``.

        Items in solved groups are ignored, as are new selections once a
        full group's worth is selected.

        Returns:
            True if the selection changed

        Raises:
            ValueError: If ``item`` is not part of the puzzle
        """
        item = item.strip().upper()
        if item not in self.config.items:
            raise ValueError(f"'{item}' is not one of the items")
        if self.group_of(item) is not None:
            return False
        if item in self.selected:
            self.selected.remove(item)
            return True
        if len(self.selected) < self.config.group_size:
            self.selected.append(item)
            return True
        return False

    def submit(self) -> Optional[str]:
        """
        Check the current selection.

        An incomplete selection is left untouched and not counted as an
        attempt. Otherwise the selection is cleared.

        Returns:
            The solved group name, or None
        """
        if len(self.selected) != self.config.group_size:
            return None

        chosen = set(self.selected)
        self.selected = []
        for name, items in self.config.groups.items():
            if name not in self.solved_groups and chosen == set(items):
                self.solved_groups.append(name)
                logger.info("Solved group '%s'", name)
                if len(self.solved_groups) == len(self.config.groups):
                    self._signal_complete()
                return name

        self.attempts += 1
        return None
