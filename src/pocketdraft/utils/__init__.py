"""Utility functions for pocketdraft."""

from pocketdraft.utils.rng import generate_seed, make_rng, shuffled

__all__ = [
    "generate_seed",
    "make_rng",
    "shuffled",
]
