"""Stage layer for the ice-breaker game."""

from .models import (
    RiddleConfig,
    GroupingConfig,
    BingoConfig,
    StageConfig,
    GameConfig,
    GameHeader,
)
from .base import Stage
from .riddle import RiddleStage
from .grouping import GroupingStage
from .bingo import BingoStage, FREE_SQUARE
from .word_search import WordSearchStage
from .sequencer import StageSequencer
from .builder import build_stage, build_game
from .presets import default_game_config

__all__ = [
    "RiddleConfig",
    "GroupingConfig",
    "BingoConfig",
    "StageConfig",
    "GameConfig",
    "GameHeader",
    "Stage",
    "RiddleStage",
    "GroupingStage",
    "BingoStage",
    "FREE_SQUARE",
    "WordSearchStage",
    "StageSequencer",
    "build_stage",
    "build_game",
    "default_game_config",
]
