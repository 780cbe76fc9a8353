"""
Main entry point for playing the Ice Breaker Challenge in a terminal.

Usage:
    python -m icebreaker.main
    python -m icebreaker.main configs/default.yaml --verbose
    python -m icebreaker.main configs/default.yaml --stage 2
    python -m icebreaker.main configs/default.yaml --verify
"""

import argparse
import logging
import re
import sys
import time
from pathlib import Path
from typing import Callable, List

import yaml

from .logging_config import setup_logging
from .stages import (
    BingoStage,
    GameConfig,
    GameHeader,
    GroupingStage,
    RiddleStage,
    StageSequencer,
    WordSearchStage,
    build_game,
    default_game_config,
)
from .wordsearch import Cell, OutOfBoundsError, WordSearchConfig, grid_from_config, verify_puzzle


Ask = Callable[[str], str]


class QuitGame(Exception):
    """The player asked to stop."""


def load_config(config_path: str) -> GameConfig:
    """Load a game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return GameConfig(**data)


def parse_cells(text: str) -> List[Cell]:
    """
    Parse a typed drag such as ``0,0 0,1 0,2`` into cells.

    Raises:
        ValueError: If no ``row,col`` pair is present
    """
    pairs = re.findall(r'(\d+)\s*,\s*(\d+)', text)
    if not pairs:
        raise ValueError(f"No cells in '{text.strip()}', expected e.g. '0,0 0,1 0,2'")
    return [Cell(int(r), int(c)) for r, c in pairs]


def format_header(header: GameHeader) -> str:
    """One-line progress header: '#' done, '>' current, '.' ahead."""
    bar = ''.join(
        '#' if done else '>' if i == header.stage_number - 1 else '.'
        for i, done in enumerate(header.completed_stages)
    )
    return f"Stage {header.stage_number} of {header.total_stages}: {header.stage_name}  [{bar}]"


def _prompt(ask: Ask, text: str) -> str:
    answer = ask(text)
    if answer.strip().lower() in ("quit", "exit"):
        raise QuitGame()
    return answer


def play_riddle(stage: RiddleStage, ask: Ask) -> None:
    print(stage.question)
    while not stage.is_complete:
        answer = _prompt(ask, "Answer ('hint' for a hint): ")
        if answer.strip().lower() == "hint" and stage.hint:
            print(stage.hint)
            continue
        print("Correct!" if stage.submit(answer) else "Not quite, try again.")


def play_word_search(stage: WordSearchStage, ask: Ask) -> None:
    puzzle = stage.puzzle
    puzzle.subscribe("word_found", lambda word, progress: print(f"Found {word}! ({progress.found}/{progress.total})"))
    puzzle.subscribe("already_found", lambda word: print(f"{word} was already found."))
    puzzle.subscribe("no_match", lambda path: print("No word there, try again."))

    while not stage.is_complete:
        print(puzzle.render())
        remaining = sorted(puzzle.grid.words - set(puzzle.state.found_words))
        print("Find: " + ", ".join(remaining))
        text = _prompt(ask, "Drag over cells (row,col ...): ")
        try:
            puzzle.select(parse_cells(text))
        except (ValueError, OutOfBoundsError) as e:
            puzzle.pointer_leave()
            print(e)


def play_grouping(stage: GroupingStage, ask: Ask) -> None:
    size = stage.config.group_size
    while not stage.is_complete:
        for name in stage.solved_groups:
            print(f"  {name}: {', '.join(stage.config.groups[name])}")
        unsolved = [item for item in stage.items if stage.group_of(item) is None]
        print("Items: " + ", ".join(unsolved))
        text = _prompt(ask, f"Pick {size} items, comma separated: ")

        picks = [part.strip() for part in text.split(",") if part.strip()]
        if len(picks) != size:
            print(f"Pick exactly {size} items.")
            continue
        if len({pick.upper() for pick in picks}) != size:
            print("Pick each item only once.")
            continue

        stage.selected = []
        try:
            for item in picks:
                stage.toggle(item)
        except ValueError as e:
            stage.selected = []
            print(e)
            continue

        solved = stage.submit()
        print(f"Solved: {solved}!" if solved else f"Not a group (mistakes: {stage.attempts}).")


def play_bingo(stage: BingoStage, ask: Ask) -> None:
    while not stage.is_complete:
        for index in range(stage.num_squares):
            name = stage.names.get(index, "")
            print(f"{index:>2}. {stage.prompt_at(index)}" + (f" -> {name}" if name else ""))
        print(f"Filled {stage.filled_count}/{stage.config.threshold} needed")
        text = _prompt(ask, "Square number and a name (e.g. '3 Alex'): ")

        match = re.match(r'^\s*(\d+)\s*(.*)$', text)
        if not match:
            print("Start with the square number.")
            continue
        try:
            stage.fill(int(match.group(1)), match.group(2))
        except (ValueError, IndexError) as e:
            print(e)


PLAYERS = {
    "riddle": play_riddle,
    "word_search": play_word_search,
    "grouping": play_grouping,
    "bingo": play_bingo,
}


def run_game(sequencer: StageSequencer, ask: Ask = input, celebration_seconds: float = 0.0) -> None:
    """Play every stage in order, reading player input through ``ask``."""
    while not sequencer.is_game_complete:
        print()
        print(format_header(sequencer.header()))
        stage = sequencer.stage
        PLAYERS[stage.config.kind](stage, ask)

        print(f"Stage Complete! Amazing work on {stage.title}!")
        if celebration_seconds:
            time.sleep(celebration_seconds)
        sequencer.advance()

    print("Game Complete! Congratulations on completing all stages!")


def verify_config(config: GameConfig) -> bool:
    """Print an authoring report for every word-search stage; True if all pass."""
    ok = True
    for stage in config.stages:
        if not isinstance(stage, WordSearchConfig):
            continue
        result = verify_puzzle(grid_from_config(stage))
        print(f"== {stage.title}: {'OK' if result.valid else 'INVALID'}")
        print(result.grid)
        for issue in result.errors + result.warnings:
            print(f"  {issue.code}: {issue.message}")
        ok = ok and result.valid
    return ok


def main():
    parser = argparse.ArgumentParser(
        description="Play the Ice Breaker Challenge in a terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  title: Ice Breaker Challenge
  celebration_seconds: 3
  stages:
    - kind: riddle
      question: What has keys but can't open locks?
      answer: piano
    - kind: word_search
      size: 10
      seed: 42
      placements:
        - {word: TEAM, row: 0, col: 0, direction: E}
        - {word: GOAL, row: 9, col: 9, direction: NW}

Type 'quit' at any prompt to stop.
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML game configuration (default: built-in game)"
    )
    parser.add_argument(
        "--stage",
        type=int,
        help="Play only this stage (1-based)"
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check that every word-search word is findable, then exit"
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the resolved configuration as YAML, then exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log engine events to stderr"
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file"
    )

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        config = load_config(args.config) if args.config else default_game_config()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    if args.stage is not None:
        if not 1 <= args.stage <= config.num_stages:
            print(f"Error: --stage must be between 1 and {config.num_stages}", file=sys.stderr)
            sys.exit(1)
        config = config.model_copy(update={"stages": [config.stages[args.stage - 1]]})

    if args.show_config:
        print(yaml.safe_dump(config.model_dump(exclude_none=True), sort_keys=False))
        return 0

    if args.verify:
        return 0 if verify_config(config) else 1

    try:
        sequencer = build_game(config)
    except Exception as e:
        print(f"Error building game: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        run_game(sequencer, celebration_seconds=config.celebration_seconds)
    except (QuitGame, EOFError, KeyboardInterrupt):
        print("\nGame stopped")

    # Print summary
    state = sequencer.get_state()
    print()
    print(f"=== {config.title} ===")
    print(f"Stages completed: {sum(state['completed_stages'])}/{sequencer.num_stages}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
