"""Built-in game content."""

from typing import Any, Dict

from .models import GameConfig


RIDDLE: Dict[str, Any] = {
    "kind": "riddle",
    "title": "Riddle Challenge",
    "question": (
        "I speak without a mouth and hear without ears. I have no body, "
        "but come alive with wind. What am I?"
    ),
    "answer": "echo",
    "hint": "Think about sounds that bounce back to you...",
}

# Words laid out by placement; blanks filled from the seed
WORD_HUNT: Dict[str, Any] = {
    "kind": "word_search",
    "title": "Word Hunt",
    "size": 10,
    "seed": 1107,
    "placements": [
        {"word": "TEAM", "row": 1, "col": 1, "direction": "E"},
        {"word": "WORK", "row": 2, "col": 1, "direction": "S"},
        {"word": "FUN", "row": 3, "col": 6, "direction": "S"},
        {"word": "PLAY", "row": 7, "col": 2, "direction": "E"},
        {"word": "GOAL", "row": 9, "col": 6, "direction": "E"},
    ],
}

# Fully authored grid with reversed and diagonal words:
# TRUST row 0 E, SHARE col 9 S, LAUGH (2,1) SE, IDEAS (8,8) W, SMILE (9,1) NE
WORD_HUNT_DIAGONAL: Dict[str, Any] = {
    "kind": "word_search",
    "title": "Word Hunt",
    "words": ["TRUST", "SHARE", "LAUGH", "IDEAS", "SMILE"],
    "rows": [
        "TRUSTKPBOQ",
        "ZNCXVWJYFS",
        "OLQZBNKVWH",
        "JXACPZQFYA",
        "WKVUXJZBCR",
        "FYQNGEVXKE",
        "BZJWLHCQVN",
        "KCXIZQYJBW",
        "VQMZSAEDIX",
        "CSJKWFVZQY",
    ],
}

GROUP_BUILDER: Dict[str, Any] = {
    "kind": "grouping",
    "title": "Group Builder",
    "groups": {
        "COLLEAGUE": ["ASSOCIATE", "FELLOW", "PARTNER", "PEER"],
        "ROOMS IN THE GAME CLUE": ["HALL", "LIBRARY", "LOUNGE", "STUDY"],
        "SEEN DURING EASTER": ["BUNNY", "EGG", "JELLY BEAN", "PEEP"],
        "WHAT A MOLE CAN BE": ["ANIMAL", "BIRTHMARK", "SPY", "UNIT"],
    },
}

HUMAN_BINGO: Dict[str, Any] = {
    "kind": "bingo",
    "title": "Human Bingo",
    "threshold": 13,
    "prompts": [
        "Has traveled to 3+ countries",
        "Speaks 2+ languages",
        "Has a pet",
        "Plays a musical instrument",
        "Is left-handed",
        "Has run a marathon",
        "Can cook a signature dish",
        "Has been skydiving",
        "Was born in another state",
        "Has met a celebrity",
        "Knows how to juggle",
        "Has more than 2 siblings",
        "Drinks coffee daily",
        "Has a tattoo",
        "Can solve a Rubik's cube",
        "Has worked in customer service",
        "Loves horror movies",
        "Has been to a concert this year",
        "Prefers tea over coffee",
        "Has broken a bone",
        "Can whistle loudly",
        "Has been camping",
        "Knows sign language",
        "Has read 10+ books this year",
        "Plays video games regularly",
    ],
}


def default_game_config(word_hunt: Dict[str, Any] = WORD_HUNT) -> GameConfig:
    """The stock four-stage game, optionally with another word-search variant."""
    return GameConfig(stages=[RIDDLE, word_hunt, GROUP_BUILDER, HUMAN_BINGO])
