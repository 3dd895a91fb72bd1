"""Refinements: type-checked narrowing predicates and their combinators."""

from refinements.types import (
    # Type variables
    T, U, V, W, X, Y,
    # Refinement alias
    Refinement,
    # Classifier outcomes
    Hit, Miss, Result, hit, miss,
)
from refinements.core import (
    Runtime,
    ClassifierContractError,
    RefinementContractWarning,
    create,
)
from refinements.combinators import compose, either, not_, negate
from refinements.decorators import refinement
from refinements.shortcuts import instance_of, one_of, is_none

__version__ = "0.1.0"

__all__ = [
    # Construction
    "create",
    "hit",
    "miss",
    "refinement",
    # Combinators
    "compose",
    "either",
    "not_",
    "negate",
    # Shortcuts
    "instance_of",
    "one_of",
    "is_none",
    # Runtime checks
    "Runtime",
    "ClassifierContractError",
    "RefinementContractWarning",
    # Types
    "Refinement",
    "Hit",
    "Miss",
    "Result",
    # Type variables
    "T", "U", "V", "W", "X", "Y",
]
