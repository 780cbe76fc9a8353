"""
Pydantic models for the stage layer.

This module contains the configuration models for every mini-game and for
the game as a whole. The stage logic classes (RiddleStage, GroupingStage,
BingoStage, WordSearchStage, StageSequencer) live in their own files.
"""

from typing import Annotated, Dict, List, Literal, NamedTuple, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator

from ..wordsearch.models import WordSearchConfig


class RiddleConfig(BaseModel):
    """A riddle answered by free text."""
    kind: Literal['riddle'] = 'riddle'
    title: str = "Riddle Challenge"
    question: str
    answer: str = Field(..., min_length=1)
    hint: Optional[str] = None


class GroupingConfig(BaseModel):
    """Items to sort into named, equally sized groups."""
    kind: Literal['grouping'] = 'grouping'
    title: str = "Group Builder"
    groups: Dict[str, List[str]] = Field(..., min_length=1)

    @field_validator('groups')
    @classmethod
    def _normalise_groups(cls, groups: Dict[str, List[str]]) -> Dict[str, List[str]]:
        normalised = {
            name.strip().upper(): [item.strip().upper() for item in items]
            for name, items in groups.items()
        }
        sizes = {len(items) for items in normalised.values()}
        if len(sizes) != 1:
            raise ValueError(f"All groups must be the same size, got sizes {sorted(sizes)}")
        if sizes.pop() < 2:
            raise ValueError("Groups need at least two items")

        seen = set()
        for name, items in normalised.items():
            for item in items:
                if item in seen:
                    raise ValueError(f"Item '{item}' appears in more than one group")
                seen.add(item)
        return normalised

    @property
    def group_size(self) -> int:
        return len(next(iter(self.groups.values())))

    @property
    def items(self) -> List[str]:
        """Every item, group by group, in authored order."""
        return [item for items in self.groups.values() for item in items]


class BingoConfig(BaseModel):
    """A square bingo card with a FREE centre, filled with people's names."""
    kind: Literal['bingo'] = 'bingo'
    title: str = "Human Bingo"
    prompts: List[str] = Field(..., min_length=1)
    card_size: int = Field(5, ge=3)
    threshold: int = Field(13, ge=1)  # filled squares, FREE centre included
    seed: Optional[int] = None

    @model_validator(mode='after')
    def _check_card(self) -> "BingoConfig":
        if self.card_size % 2 == 0:
            raise ValueError("card_size must be odd so the card has a centre square")
        squares = self.card_size ** 2
        if len(self.prompts) < squares - 1:
            raise ValueError(f"A {self.card_size}x{self.card_size} card needs {squares - 1} prompts, got {len(self.prompts)}")
        if self.threshold > squares:
            raise ValueError(f"threshold {self.threshold} exceeds the {squares} squares on the card")
        return self


StageConfig = Annotated[
    Union[RiddleConfig, WordSearchConfig, GroupingConfig, BingoConfig],
    Field(discriminator='kind'),
]


class GameConfig(BaseModel):
    """Configuration for a full ice-breaker run."""
    title: str = "Ice Breaker Challenge"
    celebration_seconds: float = Field(3.0, ge=0)
    verify_grids: bool = True
    stages: List[StageConfig] = Field(..., min_length=1)

    @property
    def num_stages(self) -> int:
        """Number of stages (derived from the stages list)."""
        return len(self.stages)


class GameHeader(NamedTuple):
    """Progress header snapshot shown above the active stage."""
    stage_number: int
    total_stages: int
    stage_name: str
    completed_stages: List[bool]
