"""Shared constants for light-curve synthesis and the classification quiz."""

# Series Constants
DEFAULT_SERIES_LENGTH = 300  # Samples per light curve
ROUND_DECIMALS = 5  # Precision of emitted flux values

# Baseline Constants
TREND_AMPLITUDE = 0.002  # Amplitude of the slow sinusoidal drift around 1.0

# Transit Constants
TRANSIT_DEPTH = 0.02  # 2% dip at full depth
TRANSIT_START_FRACTION = 0.45  # Window start as a fraction of series length
TRANSIT_END_FRACTION = 0.55  # Window end as a fraction of series length
EDGE_DEPTH_FRACTION = 0.75  # Share of the depth already present at the window edges

# Task Constants
DEFAULT_OPTION_COUNT = 3  # Panels per task
MIN_OPTION_COUNT = 2
NOISE_AMPLITUDE_MIN = 0.004  # Lower bound of per-option noise draw (inclusive)
NOISE_AMPLITUDE_MAX = 0.008  # Upper bound of per-option noise draw (exclusive)
