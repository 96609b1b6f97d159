"""Shared types for light-curve synthesis, tasks and scoring."""

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np

from transit_quiz.constants import DEFAULT_SERIES_LENGTH

__all__ = [
    'Sample',
    'Series',
    'SynthesisParams',
    'Task',
    'SessionStats',
    'RecordResult',
]


class Sample(NamedTuple):
    """One normalized flux measurement at a discrete time step."""

    index: int  # Time step, 0-based
    value: float  # Normalized flux, centered near 1.0


@dataclass(frozen=True, eq=False)
class Series:
    """A light curve: flux values at contiguous indices 0..N-1."""

    values: np.ndarray

    def __post_init__(self):
        values = np.array(self.values, dtype=np.float64)
        if values.ndim != 1:
            raise ValueError(f"Expected 1D array, got {values.ndim}D array with shape {values.shape}")
        values.setflags(write=False)
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return int(self.values.shape[0])

    @property
    def indices(self) -> np.ndarray:
        return np.arange(len(self))

    def samples(self) -> list[Sample]:
        return [Sample(index=i, value=float(v)) for i, v in enumerate(self.values)]

    def to_records(self) -> list[dict]:
        """
        Convert to chart-ready records.

        Returns:
            List of {"x": index, "flux": value} dicts ordered by index
        """
        return [{"x": i, "flux": float(v)} for i, v in enumerate(self.values)]


@dataclass(frozen=True)
class SynthesisParams:
    """Inputs for synthesizing one light curve."""

    length: int = DEFAULT_SERIES_LENGTH
    noise_amplitude: float = 0.006
    has_transit: bool = False


@dataclass(frozen=True, eq=False)
class Task:
    """
    One multi-panel classification puzzle.

    Exactly one option was synthesized with a transit, and
    correct_option_index points to it. option_params records how each
    option was generated and must not be shown to the player.
    """

    id: str
    options: tuple[Series, ...]
    correct_option_index: int
    option_params: tuple[SynthesisParams, ...] = field(default=(), repr=False)

    def __post_init__(self):
        if not 0 <= self.correct_option_index < len(self.options):
            raise ValueError(
                f"correct_option_index {self.correct_option_index} outside "
                f"[0, {len(self.options)})"
            )
        if self.option_params:
            if len(self.option_params) != len(self.options):
                raise ValueError(
                    f"option_params has {len(self.option_params)} entries for "
                    f"{len(self.options)} options"
                )
            transit_indices = [i for i, p in enumerate(self.option_params) if p.has_transit]
            if transit_indices != [self.correct_option_index]:
                raise ValueError(
                    f"Expected a single transit at option {self.correct_option_index}, "
                    f"got transits at {transit_indices}"
                )

    @property
    def option_count(self) -> int:
        return len(self.options)


@dataclass(frozen=True)
class SessionStats:
    """Running totals for one user session."""

    total_answered: int = 0
    total_correct: int = 0

    def __post_init__(self):
        if not 0 <= self.total_correct <= self.total_answered:
            raise ValueError(
                f"Expected 0 <= total_correct <= total_answered, got "
                f"total_correct={self.total_correct}, total_answered={self.total_answered}"
            )

    @property
    def accuracy_percent(self) -> int:
        """Percentage of correct answers, rounded half up; 0 when nothing was answered."""
        if self.total_answered == 0:
            return 0
        return int(100 * self.total_correct / self.total_answered + 0.5)


class RecordResult(NamedTuple):
    """Outcome of recording one selection."""

    correct: bool
    stats: SessionStats
