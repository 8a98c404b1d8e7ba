"""StepContext - explicit per-step state for pipeline steps.

A fresh StepContext is created at the start of every step and passed
through all pipeline steps, so the RNG and per-step counters travel
explicitly instead of living on the simulation.
"""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass
class StepContext:
    """Explicit per-step state passed through pipeline steps.

    Attributes:
        rng: The run's random source for this step
        foods_eaten: Food items consumed during the collisions step
    """

    rng: random.Random
    foods_eaten: int = 0
