"""TW223: seedable combined Tausworthe pseudorandom number generator."""

from .extract import map_to_range, reseed
from .mathlib import ArgumentError, MathLibrary
from .prng import Tausworthe223
from .sample import SamplingParams, sample_json
from .types import GeneratorState

__all__ = [
    "ArgumentError",
    "GeneratorState",
    "MathLibrary",
    "SamplingParams",
    "Tausworthe223",
    "map_to_range",
    "reseed",
    "sample_json",
]
