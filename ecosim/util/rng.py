"""RNG utilities for deterministic simulation.

Every consumer of randomness in ecosim receives a ``random.Random`` instance
explicitly; nothing reads from the module-level generator. This module
provides:

- ``require_rng_param`` to fail loudly when no RNG was passed in, rather
  than silently creating an unseeded fallback.
- A small set of draw primitives built only on ``getrandbits``. Each one
  consumes a fixed number of 32- or 64-bit words (64-bit Bernoulli
  thresholds, 24-bit floats, 23-bit weighted draws), so seeding a
  :class:`~ecosim.util.chacha.ChaCha8Random` with the zero key reproduces
  the reference test vectors bit for bit, while any other ``random.Random``
  still works.
"""

import random
from typing import Optional, Sequence

import numpy as np

from ecosim.exceptions import DegenerateWeightsError, EmptyPopulationError

_BERNOULLI_SCALE = 2.0**64
_F32_SCALE = 2.0**-24
_F32_MANTISSA_SCALE = 2.0**-23

# Largest value a 23-bit mantissa draw can produce
_MAX_RAND_F32 = np.float32(1.0 - 2.0**-23)


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but was not provided.

    This error indicates a bug in the caller - every operation that consumes
    randomness must be handed the run's RNG explicitly.
    """
    pass


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def evolve(self, rng, population):
            rng = require_rng_param(rng, "GeneticAlgorithm.evolve")
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. Pass the simulation RNG explicitly."
        )
    return rng


def next_u32(rng: random.Random) -> int:
    """Draw one 32-bit word."""
    return rng.getrandbits(32)


def next_u64(rng: random.Random) -> int:
    """Draw one 64-bit word (two consecutive 32-bit words, low word first)."""
    return rng.getrandbits(64)


def gen_bool(rng: random.Random, p: float) -> bool:
    """Return True with probability ``p``.

    Compares one u64 draw against ``p * 2**64``. ``p == 1.0`` short-circuits
    without consuming the stream; ``p == 0.0`` still consumes one draw.

    Raises:
        ValueError: If p is outside [0, 1]
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Probability must be in [0, 1], got {p!r}")
    if p == 1.0:
        return True
    return next_u64(rng) < int(p * _BERNOULLI_SCALE)


def gen_f32(rng: random.Random) -> np.float32:
    """Uniform float32 in [0, 1) built from the top 24 bits of a u32."""
    return np.float32((next_u32(rng) >> 8) * _F32_SCALE)


def gen_range_f32(rng: random.Random, low: float, high: float) -> np.float32:
    """Uniform float32 in [low, high)."""
    low32 = np.float32(low)
    return low32 + (np.float32(high) - low32) * gen_f32(rng)


def _uniform_scale(low: np.float32, high: np.float32) -> np.float32:
    # Shrink the scale until the largest draw stays strictly below ``high``.
    scale = np.float32(high - low)
    while scale * _MAX_RAND_F32 + low >= high:
        scale = np.nextafter(scale, np.float32(-np.inf))
    return scale


def _inclusive_scale(low: np.float32, high: np.float32) -> np.float32:
    # Shrink the scale until the largest draw lands on or below ``high``.
    scale = np.float32((high - low) / _MAX_RAND_F32)
    while scale * _MAX_RAND_F32 + low > high:
        scale = np.nextafter(scale, np.float32(-np.inf))
    return scale


def _mantissa_f32(rng: random.Random) -> np.float32:
    """Uniform float32 in [0, 1) from the top 23 bits of one u32."""
    return np.float32((next_u32(rng) >> 9) * _F32_MANTISSA_SCALE)


def gen_range_inclusive_f32(rng: random.Random, low: float, high: float) -> np.float32:
    """Uniform float32 in [low, high], both ends reachable.

    Consumes one u32. The largest draw never exceeds ``high``.

    Raises:
        ValueError: If low > high
    """
    if not low <= high:
        raise ValueError(f"Empty range [{low!r}, {high!r}]")
    low32 = np.float32(low)
    scale = _inclusive_scale(low32, np.float32(high))
    return _mantissa_f32(rng) * scale + low32


def choose_weighted_index(rng: random.Random, weights: Sequence[float]) -> int:
    """Pick an index with probability proportional to its weight.

    Weights are accumulated as float32 prefix sums. A single float32 uniform
    value in [0, total) is drawn from one u32, and the chosen index is the
    number of prefix sums (excluding the grand total) that do not exceed it.
    Zero-weight entries are never chosen.

    Raises:
        EmptyPopulationError: If there are no weights
        DegenerateWeightsError: If any weight is negative or NaN, or all are zero
    """
    if len(weights) == 0:
        raise EmptyPopulationError("Cannot choose from an empty set of weights")

    zero = np.float32(0.0)
    cumulative = []
    total = None
    for index, raw in enumerate(weights):
        weight = np.float32(raw)
        if not weight >= zero:
            raise DegenerateWeightsError(
                f"Invalid weight {raw!r} at index {index}: weights must be non-negative"
            )
        if total is None:
            total = weight
        else:
            cumulative.append(total)
            total = np.float32(total + weight)

    if total == zero:
        raise DegenerateWeightsError(
            f"All {len(weights)} weights are zero; no weighted choice exists"
        )

    scale = _uniform_scale(zero, total)
    chosen = _mantissa_f32(rng) * scale + zero
    return sum(1 for partial in cumulative if partial <= chosen)
