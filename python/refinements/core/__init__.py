"""Core construction and runtime contract checks."""

from .runtime import Runtime, _runtime
from .validator import (
    ClassifierContractError,
    RefinementContractWarning,
    matches_type,
    validate_result,
)
from .construct import create

__all__ = [
    "Runtime",
    "_runtime",
    "ClassifierContractError",
    "RefinementContractWarning",
    "matches_type",
    "validate_result",
    "create",
]
