"""Refinement type constructs."""

from .variables import T, U, V, W, X, Y, Refinement
from .result import Hit, Miss, Result, hit, miss

__all__ = [
    # Type variables
    "T", "U", "V", "W", "X", "Y",
    # Refinement alias
    "Refinement",
    # Classifier outcomes
    "Hit",
    "Miss",
    "Result",
    "hit",
    "miss",
]
