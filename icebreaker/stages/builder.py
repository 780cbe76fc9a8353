"""Build playable stages and sequencers from configuration."""

import logging

from ..wordsearch import WordSearchConfig, grid_from_config, verify_puzzle
from .base import Stage
from .bingo import BingoStage
from .grouping import GroupingStage
from .models import BingoConfig, GameConfig, GroupingConfig, RiddleConfig
from .riddle import RiddleStage
from .sequencer import StageSequencer
from .word_search import WordSearchStage


logger = logging.getLogger(__name__)


def build_stage(config, verify: bool = True) -> Stage:
    """
    Instantiate the stage described by ``config``.

    Word-search grids are checked with ``verify_puzzle`` first when
    ``verify`` is set.

    Raises:
        ValueError: If a word-search grid hides a word that cannot be found
        TypeError: If ``config`` is not a known stage configuration
    """
    if isinstance(config, RiddleConfig):
        return RiddleStage(config=config)
    if isinstance(config, GroupingConfig):
        return GroupingStage(config=config)
    if isinstance(config, BingoConfig):
        return BingoStage.create(config)
    if isinstance(config, WordSearchConfig):
        if verify:
            result = verify_puzzle(grid_from_config(config))
            for warning in result.warnings:
                logger.warning("%s: %s", config.title, warning.message)
            if not result.valid:
                raise ValueError(f"Invalid word search '{config.title}': {[e.message for e in result.errors]}")
        return WordSearchStage.create(config)
    raise TypeError(f"Unknown stage configuration: {type(config).__name__}")


def build_game(config: GameConfig) -> StageSequencer:
    """Build a sequencer over every configured stage."""
    stages = [build_stage(stage, verify=config.verify_grids) for stage in config.stages]
    logger.debug("Built %d stages for '%s'", len(stages), config.title)
    return StageSequencer(stages=stages, title=config.title)
