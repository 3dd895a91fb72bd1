"""Refinement combinators."""

from .compose import compose
from .either import either
from .negate import not_, negate

__all__ = ["compose", "either", "not_", "negate"]
