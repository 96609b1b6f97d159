"""Validated configuration for a quiz session."""

import logging
from typing import Optional

import numpy as np
from pydantic import Field, model_validator
from pydantic.dataclasses import dataclass

from transit_quiz.constants import (
    DEFAULT_OPTION_COUNT,
    DEFAULT_SERIES_LENGTH,
    MIN_OPTION_COUNT,
    NOISE_AMPLITUDE_MAX,
    NOISE_AMPLITUDE_MIN,
)
from transit_quiz.quiz import QuizGame
from transit_quiz.scoring import ScoringSession
from transit_quiz.synthesizer import SignalSynthesizer
from transit_quiz.task_factory import TaskFactory

logger = logging.getLogger(__name__)

__all__ = ['QuizConfig']


@dataclass
class QuizConfig:
    """Settings for building a QuizGame."""

    option_count: int = Field(default=DEFAULT_OPTION_COUNT, ge=MIN_OPTION_COUNT)
    series_length: int = Field(default=DEFAULT_SERIES_LENGTH, gt=0)
    noise_min: float = Field(default=NOISE_AMPLITUDE_MIN, ge=0.0, allow_inf_nan=False)
    noise_max: float = Field(default=NOISE_AMPLITUDE_MAX, gt=0.0, allow_inf_nan=False)
    seed: Optional[int] = None

    @model_validator(mode="after")
    def validate_noise_range(self):
        """Ensure the noise range is not empty."""
        if self.noise_max <= self.noise_min:
            raise ValueError(
                f"noise_max ({self.noise_max}) must exceed noise_min ({self.noise_min})"
            )
        return self

    def build_game(self, synthesizer: Optional[SignalSynthesizer] = None) -> QuizGame:
        """
        Wire a factory, a fresh session and a seeded random source into a game.

        Args:
            synthesizer: Optional custom light-curve generator

        Returns:
            QuizGame with its first round ready
        """
        factory = TaskFactory(
            synthesizer=synthesizer,
            series_length=self.series_length,
            noise_min=self.noise_min,
            noise_max=self.noise_max,
        )
        logger.info(
            f"Starting quiz: options={self.option_count}, length={self.series_length}, "
            f"seed={self.seed}"
        )
        return QuizGame(
            factory=factory,
            session=ScoringSession(),
            rng=np.random.default_rng(self.seed),
            option_count=self.option_count,
        )
