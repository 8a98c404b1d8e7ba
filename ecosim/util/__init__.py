"""Utilities for deterministic simulation."""

from ecosim.util.chacha import ChaCha8Random
from ecosim.util.rng import (
    MissingRNGError,
    choose_weighted_index,
    gen_bool,
    gen_f32,
    gen_range_f32,
    gen_range_inclusive_f32,
    require_rng_param,
)

__all__ = [
    "ChaCha8Random",
    "MissingRNGError",
    "choose_weighted_index",
    "gen_bool",
    "gen_f32",
    "gen_range_f32",
    "gen_range_inclusive_f32",
    "require_rng_param",
]
