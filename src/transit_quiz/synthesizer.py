"""Synthetic light-curve generator.

Builds normalized stellar flux series from a slow sinusoidal drift plus
uniform noise, optionally carving a transit dip with eased ingress and
egress into the middle of the series.
"""

import logging
import math
from typing import Tuple

import numpy as np
from pydantic import Field, model_validator
from pydantic.dataclasses import dataclass

from transit_quiz.constants import (
    DEFAULT_SERIES_LENGTH,
    EDGE_DEPTH_FRACTION,
    NOISE_AMPLITUDE_MIN,
    ROUND_DECIMALS,
    TRANSIT_DEPTH,
    TRANSIT_END_FRACTION,
    TRANSIT_START_FRACTION,
    TREND_AMPLITUDE,
)
from transit_quiz.errors import InvalidParameterError
from transit_quiz.types import Series, SynthesisParams

logger = logging.getLogger(__name__)

__all__ = ['SignalSynthesizer', 'transit_window']


def transit_window(
    length: int,
    start_fraction: float = TRANSIT_START_FRACTION,
    end_fraction: float = TRANSIT_END_FRACTION,
) -> Tuple[int, int]:
    """Get the inclusive (t0, t1) transit window for a series length.

    Args:
        length: Number of samples in the series
        start_fraction: Window start as a fraction of length
        end_fraction: Window end as a fraction of length

    Returns:
        (t0, t1) tuple of sample indices
    """
    return math.floor(length * start_fraction), math.floor(length * end_fraction)


@dataclass
class SignalSynthesizer:
    """
    Generates light curves with or without a planet-like transit.

    The shape constants are configurable so alternative dip profiles can be
    produced, but the defaults reproduce the quiz's reference curves.
    """

    trend_amplitude: float = Field(default=TREND_AMPLITUDE, ge=0.0)
    transit_depth: float = Field(default=TRANSIT_DEPTH, gt=0.0, lt=1.0)
    start_fraction: float = Field(default=TRANSIT_START_FRACTION, ge=0.0, le=1.0)
    end_fraction: float = Field(default=TRANSIT_END_FRACTION, ge=0.0, le=1.0)
    edge_depth_fraction: float = Field(default=EDGE_DEPTH_FRACTION, ge=0.0, le=1.0)
    decimals: int = Field(default=ROUND_DECIMALS, ge=0)

    @model_validator(mode="after")
    def validate_window(self):
        """Ensure the transit window is not inverted."""
        if self.end_fraction < self.start_fraction:
            raise ValueError(
                f"end_fraction ({self.end_fraction}) must not be below "
                f"start_fraction ({self.start_fraction})"
            )
        return self

    def trend(self, length: int) -> np.ndarray:
        """Baseline drift for every index of a series of the given length."""
        indices = np.arange(length)
        return self.trend_amplitude * np.sin(2 * np.pi * indices / length)

    def transit_profile(self, length: int) -> np.ndarray:
        """
        Compute the flux to subtract at every index for a transit.

        Inside the window the dip is depth * (edge_fraction + (1 - edge_fraction) * shape),
        where shape eases from 0 at the window edges to 1 at the center.
        Outside the window the profile is zero.

        Args:
            length: Number of samples in the series

        Returns:
            Array of non-negative depths, same length as the series
        """
        t0, t1 = transit_window(length, self.start_fraction, self.end_fraction)
        t1 = min(t1, length - 1)
        profile = np.zeros(length, dtype=np.float64)
        if t0 > t1:
            return profile

        window = np.arange(t0, t1 + 1)
        span = t1 - t0
        if span > 0:
            edge = np.minimum(window - t0, t1 - window) / span
        else:
            # Single-sample window has no ingress to ease
            edge = np.zeros(window.shape, dtype=np.float64)
        shape = 1 - (1 - np.minimum(1.0, edge * 2)) ** 2

        edge_fraction = self.edge_depth_fraction
        profile[t0:t1 + 1] = self.transit_depth * (edge_fraction + (1 - edge_fraction) * shape)
        return profile

    def synthesize(self, params: SynthesisParams, rng: np.random.Generator) -> Series:
        """
        Synthesize one light curve.

        Args:
            params: Length, noise amplitude and whether to inject a transit
            rng: Random source for the noise; consumed exactly once per call

        Returns:
            Series of flux values rounded to the configured precision
        """
        if params.length <= 0:
            raise InvalidParameterError(f"length must be positive, got {params.length}")
        if not np.isfinite(params.noise_amplitude) or params.noise_amplitude < 0:
            raise InvalidParameterError(
                f"noise_amplitude must be non-negative and finite, got {params.noise_amplitude}"
            )

        length = params.length
        amplitude = params.noise_amplitude
        flux = 1 + self.trend(length) + rng.uniform(-amplitude, amplitude, size=length)
        if params.has_transit:
            flux = flux - self.transit_profile(length)

        logger.debug(
            f"Synthesized series: length={length}, noise={amplitude:.5f}, "
            f"transit={params.has_transit}"
        )
        return Series(np.round(flux, self.decimals))

    def sample_curve(
        self, rng: np.random.Generator, length: int = DEFAULT_SERIES_LENGTH
    ) -> Series:
        """Synthesize a transit-bearing preview curve at the lowest noise level."""
        params = SynthesisParams(
            length=length, noise_amplitude=NOISE_AMPLITUDE_MIN, has_transit=True
        )
        return self.synthesize(params, rng)
