#!/usr/bin/env python3
"""Plot the panels of one generated task.

Usage:
    python visualize_task.py
    python visualize_task.py --seed 3 --output outputs/task.png --no-display
"""

import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from transit_quiz.errors import InvalidParameterError
from transit_quiz.synthesizer import transit_window
from transit_quiz.task_factory import TaskFactory

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Plot a transit quiz task")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--options", type=int, default=3, help="Panels per task (default: 3)")
    parser.add_argument(
        "--output", "-o", type=str, default="output/task.png", help="Output image path"
    )
    parser.add_argument("--reveal", action="store_true", help="Mark the transit panel and window")
    parser.add_argument("--no-display", action="store_true", help="Save only, don't show the plot")
    args = parser.parse_args()

    factory = TaskFactory()
    try:
        task = factory.create_task(np.random.default_rng(args.seed), option_count=args.options)
    except InvalidParameterError as e:
        logger.error(f"Invalid settings: {e}")
        sys.exit(1)

    fig, axes = plt.subplots(1, task.option_count, figsize=(5 * task.option_count, 3), sharey=True)
    t0, t1 = transit_window(factory.series_length)
    for idx, (ax, series) in enumerate(zip(axes, task.options)):
        ax.plot(series.indices, series.values, linewidth=1.5)
        ax.set_ylim(0.94, 1.06)
        ax.grid(True, alpha=0.25, linestyle="--")
        title = f"Panel {idx + 1}"
        if args.reveal and idx == task.correct_option_index:
            ax.axvspan(t0, t1, color="green", alpha=0.15)
            title += " (transit)"
        ax.set_title(title, fontweight="bold")
    axes[0].set_ylabel("Normalized flux", fontweight="bold")
    fig.suptitle(f"Task {task.id}", fontsize=14, fontweight="bold")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(output_path, dpi=150, bbox_inches="tight")
    logger.info(f"Saved task plot to {output_path}")

    if args.no_display:
        plt.close(fig)
    else:
        plt.show()


if __name__ == "__main__":
    main()
