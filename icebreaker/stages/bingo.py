"""Human bingo stage: find someone matching each prompt."""

import random
from typing import Dict, List

from pydantic import Field

from .base import Stage
from .models import BingoConfig


FREE_SQUARE = "FREE"


class BingoStage(Stage):
    """
    A card of prompts with a FREE centre. Writing a name in a square fills
    it; the stage completes once the filled count (centre included) reaches
    the configured threshold.

    Attributes:
        config: Prompt pool, card size, threshold and shuffle seed
        card: The prompts laid out on the card, centre excluded
        names: Square index -> name written there
    """

    config: BingoConfig
    card: List[str] = Field(default_factory=list)
    names: Dict[int, str] = Field(default_factory=dict)

    @classmethod
    def create(cls, config: BingoConfig) -> "BingoStage":
        """Factory method dealing a card from a seeded shuffle of the prompt pool."""
        prompts = list(config.prompts)
        random.Random(config.seed).shuffle(prompts)
        return cls(config=config, card=prompts[:config.card_size ** 2 - 1])

    @property
    def num_squares(self) -> int:
        return self.config.card_size ** 2

    @property
    def centre(self) -> int:
        return self.num_squares // 2

    def prompt_at(self, index: int) -> str:
        """Prompt shown on square ``index`` (row-major)."""
        self._check_index(index)
        if index == self.centre:
            return FREE_SQUARE
        return self.card[index - 1 if index > self.centre else index]

    def fill(self, index: int, name: str) -> None:
        """
        Write ``name`` on square ``index``; a blank name clears the square.

        Raises:
            ValueError: If ``index`` is the FREE centre
            IndexError: If ``index`` is off the card
        """
        self._check_index(index)
        if index == self.centre:
            raise ValueError("The centre square is FREE")

        name = name.strip()
        if name:
            self.names[index] = name
        else:
            self.names.pop(index, None)

        if self.filled_count >= self.config.threshold:
            self._signal_complete()

    @property
    def filled_count(self) -> int:
        return len(self.names) + 1

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.num_squares:
            raise IndexError(f"Square {index} is off the {self.num_squares}-square card")
