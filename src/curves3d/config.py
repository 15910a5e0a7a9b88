"""
Configuration & Constants
=========================
This module serves as the central registry for global constants of the
curve demo.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (sample size, parameter range,
   evaluation point) scattered throughout the code.
2. Reproducibility: Setting RANDOM_SEED makes the generated curves and the
   printed report identical between runs.

Exports:
    SAMPLE_SIZE (int): Number of random curves generated by the demo.
    PARAMETER_RANGE (tuple[float, float]): Half-open range [low, high) of
        random radii and pitches.
    EVALUATION_PARAMETER (float): Parameter t at which every curve is evaluated.
    EVALUATION_LABEL (str): Human-readable form of EVALUATION_PARAMETER.
    DEFAULT_RADIUS (float): Substitute for a non-positive radius.
    RANDOM_SEED (int | None): Seed of the random source, None for entropy.
    LOG_LEVEL (int | None): Logging level, None leaves logging unconfigured.
    LOG_FILE (str | None): Optional path of a log file.
"""
import math
from typing import Optional

# Curve construction
DEFAULT_RADIUS: float = 1.0

# Demo data
SAMPLE_SIZE: int = 10
PARAMETER_RANGE: tuple[float, float] = (1.0, 10.0)
RANDOM_SEED: Optional[int] = None

# Evaluation
EVALUATION_PARAMETER: float = math.pi / 4.0
EVALUATION_LABEL: str = "PI/4"

# Logging (e.g. logging.DEBUG to see radius normalization)
LOG_LEVEL: Optional[int] = None
LOG_FILE: Optional[str] = None
