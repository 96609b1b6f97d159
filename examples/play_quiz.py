#!/usr/bin/env python3
"""Terminal transit classification quiz.

Usage:
    python play_quiz.py
    python play_quiz.py --rounds 5 --options 4 --seed 7
"""

import argparse
import logging
import sys

import numpy as np

from transit_quiz import QuizConfig
from transit_quiz.errors import OutOfRangeSelectionError
from transit_quiz.types import Series

logger = logging.getLogger(__name__)

SPARK_CHARS = " .:-=+*#%@"


def sparkline(series: Series, width: int = 60, low: float = 0.97, high: float = 1.01) -> str:
    """Render a series as one line of characters, darker meaning brighter."""
    chunks = np.array_split(series.values, min(width, len(series)))
    levels = []
    for chunk in chunks:
        scaled = (chunk.mean() - low) / (high - low)
        idx = int(np.clip(scaled, 0.0, 1.0) * (len(SPARK_CHARS) - 1))
        levels.append(SPARK_CHARS[idx])
    return "".join(levels)


def ask_choice(option_count: int) -> int:
    while True:
        raw = input(f"Which panel shows a transit dip? [1-{option_count}, q to quit]: ").strip()
        if raw.lower() == "q":
            raise KeyboardInterrupt
        try:
            return int(raw) - 1
        except ValueError:
            print("Please enter a panel number.")


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Spot the planet-like transit among synthetic light curves",
    )
    parser.add_argument("--rounds", "-n", type=int, default=10, help="Number of rounds (default: 10)")
    parser.add_argument("--options", type=int, default=3, help="Panels per round (default: 3)")
    parser.add_argument("--length", type=int, default=300, help="Samples per light curve (default: 300)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible rounds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = QuizConfig(option_count=args.options, series_length=args.length, seed=args.seed)
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        sys.exit(1)

    game = config.build_game()
    try:
        for round_number in range(1, args.rounds + 1):
            quiz_round = game.round if round_number == 1 else game.next_task()
            print("\n" + "=" * 72)
            print(f"Round {round_number}/{args.rounds}")
            print("=" * 72)
            for idx, series in enumerate(quiz_round.task.options, 1):
                print(f"  Panel {idx}: |{sparkline(series)}|")

            while not quiz_round.revealed:
                try:
                    game.pick(ask_choice(args.options))
                except OutOfRangeSelectionError:
                    print(f"Panel must be between 1 and {args.options}.")

            stats = game.stats
            print(f"\n{quiz_round.feedback_message()}")
            print(f"Total: {stats.total_answered}  Accuracy: {game.accuracy_percent()}%")
    except (KeyboardInterrupt, EOFError):
        print()

    stats = game.stats
    print(f"\nFinal score: {stats.total_correct}/{stats.total_answered} ({game.accuracy_percent()}%)")


if __name__ == "__main__":
    main()
