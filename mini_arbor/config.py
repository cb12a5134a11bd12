# mini_arbor/config.py
"""
Simulation configuration and defaults.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class ArborConfig:
    """Global configuration: parameter ranges and defaults."""

    # App metadata
    app_name: str = "PruneCraft"
    app_subtitle: str = "L-system Tree Pruning Simulator"
    version: str = "0.1.0"

    # Parameter ranges (inclusive)
    iterations_range: Tuple[int, int] = (1, 7)
    angle_range: Tuple[float, float] = (10.0, 45.0)
    step_range: Tuple[float, float] = (0.5, 2.0)
    thickness_range: Tuple[float, float] = (0.5, 2.5)

    # Slider increments
    angle_increment: float = 0.5
    step_increment: float = 0.1
    thickness_increment: float = 0.1

    # Default values
    default_iterations: int = 4
    default_angle: float = 22.5
    default_step: float = 1.0
    default_thickness: float = 1.0

    # Refuse to expand grammars beyond this many symbols
    max_symbols: int = 2_000_000


# Global config instance
CONFIG = ArborConfig()


def check_range(name: str, value, bounds: Tuple[float, float]):
    """
    Return `value` if it lies within the inclusive `bounds`.

    Raises:
        ValueError: naming the parameter and the allowed range
    """
    lo, hi = bounds
    if not (lo <= value <= hi):
        raise ValueError(f"{name} must be in [{lo}, {hi}], got {value}")
    return value
