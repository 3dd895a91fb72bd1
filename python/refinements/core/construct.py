"""Construction protocol: turn a hit/miss classifier into a refinement."""

import functools
import warnings
from typing import Any, Callable, Optional, TypeGuard, cast

from ..types.result import Hit, Result
from ..types.variables import T, U, Refinement
from .runtime import Runtime, _runtime
from .validator import (
    ClassifierContractError,
    RefinementContractWarning,
    validate_result,
)


def create(
    classify: Callable[[T], Result[U]],
    *,
    narrows_to: Any = None,
    runtime: Optional[Runtime] = None,
) -> Refinement[T, U]:
    """
    Create a type-safe refinement.

    The classifier must answer ``hit(candidate)`` or ``miss``, so a type
    checker infers the narrowed type from what the hit branch carries. A
    classifier whose hit branch carries the wrong type, or which returns a
    plain bool, is rejected statically.

    Args:
        classify: Function answering ``hit(candidate)`` or ``miss``
        narrows_to: Declared narrowed type, checked against hits in debug mode
        runtime: Contract-checking settings (defaults to the environment)

    Example:
        is_string: Refinement[object, str] = create(
            lambda candidate: hit(candidate) if isinstance(candidate, str) else miss
        )
    """
    settings = runtime if runtime is not None else _runtime

    if not settings.checks_enabled:
        @functools.wraps(classify)
        def refine(candidate: T) -> TypeGuard[U]:
            return isinstance(classify(candidate), Hit)

        return cast(Refinement[T, U], refine)

    name = getattr(classify, "__qualname__", repr(classify))

    @functools.wraps(classify)
    def checked(candidate: T) -> TypeGuard[U]:
        result = classify(candidate)
        try:
            validate_result(result, candidate, narrows_to)
        except ClassifierContractError as e:
            if settings.strict:
                raise
            warnings.warn(f"Contract violation in {name}: {e}",
                          RefinementContractWarning, stacklevel=2)
        return isinstance(result, Hit)

    return cast(Refinement[T, U], checked)
