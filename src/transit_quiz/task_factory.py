"""Builds multi-panel classification tasks from synthesized light curves."""

import itertools
import logging
import uuid
from typing import Callable, Optional

import numpy as np

from transit_quiz.constants import (
    DEFAULT_OPTION_COUNT,
    DEFAULT_SERIES_LENGTH,
    MIN_OPTION_COUNT,
    NOISE_AMPLITUDE_MAX,
    NOISE_AMPLITUDE_MIN,
)
from transit_quiz.errors import InvalidParameterError
from transit_quiz.synthesizer import SignalSynthesizer
from transit_quiz.types import SynthesisParams, Task

logger = logging.getLogger(__name__)

__all__ = ['TaskFactory', 'SequentialIdProvider', 'uuid4_id']


class SequentialIdProvider:
    """Issues monotonically increasing task ids: task-1, task-2, ..."""

    def __init__(self, prefix: str = "task", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


def uuid4_id() -> str:
    return str(uuid.uuid4())


class TaskFactory:
    """
    Creates tasks where exactly one panel holds a transit.

    Every panel draws its own noise amplitude, so the noise level carries no
    information about which panel is correct.
    """

    def __init__(
        self,
        synthesizer: Optional[SignalSynthesizer] = None,
        id_provider: Optional[Callable[[], str]] = None,
        series_length: int = DEFAULT_SERIES_LENGTH,
        noise_min: float = NOISE_AMPLITUDE_MIN,
        noise_max: float = NOISE_AMPLITUDE_MAX,
    ):
        """
        Initialize the task factory.

        Args:
            synthesizer: Light-curve generator (default: SignalSynthesizer())
            id_provider: Zero-argument callable returning a fresh task id
                (default: a new SequentialIdProvider)
            series_length: Samples per panel (default: 300)
            noise_min: Lower bound of the per-panel noise draw (inclusive)
            noise_max: Upper bound of the per-panel noise draw (exclusive)
        """
        if series_length <= 0:
            raise InvalidParameterError(f"series_length must be positive, got {series_length}")
        if not np.isfinite(noise_min) or noise_min < 0:
            raise InvalidParameterError(
                f"noise_min must be non-negative and finite, got {noise_min}"
            )
        if not np.isfinite(noise_max) or not noise_max > noise_min:
            raise InvalidParameterError(
                f"noise_max ({noise_max}) must be finite and exceed noise_min ({noise_min})"
            )

        self.synthesizer = synthesizer if synthesizer is not None else SignalSynthesizer()
        self.id_provider = id_provider if id_provider is not None else SequentialIdProvider()
        self.series_length = series_length
        self.noise_min = noise_min
        self.noise_max = noise_max

    def create_task(
        self, rng: np.random.Generator, option_count: int = DEFAULT_OPTION_COUNT
    ) -> Task:
        """
        Create a new task.

        Args:
            rng: Random source for the correct position and every panel
            option_count: Number of panels (default: 3, minimum 2)

        Returns:
            Task with a uniformly random correct_option_index
        """
        if option_count < MIN_OPTION_COUNT:
            raise InvalidParameterError(
                f"option_count must be at least {MIN_OPTION_COUNT}, got {option_count}"
            )

        correct_index = int(rng.integers(0, option_count))

        params = tuple(
            SynthesisParams(
                length=self.series_length,
                noise_amplitude=float(rng.uniform(self.noise_min, self.noise_max)),
                has_transit=(k == correct_index),
            )
            for k in range(option_count)
        )
        options = tuple(self.synthesizer.synthesize(p, rng) for p in params)

        task = Task(
            id=self.id_provider(),
            options=options,
            correct_option_index=correct_index,
            option_params=params,
        )
        logger.info(f"Created task {task.id} with {option_count} options")
        return task
