"""Sequential composition of refinements."""

from typing import Any, TypeGuard, overload

from ..types.variables import T, U, V, W, X, Y, Refinement


@overload
def compose(r1: Refinement[T, U], /) -> Refinement[T, U]: ...
@overload
def compose(r1: Refinement[T, U], r2: Refinement[U, V], /) -> Refinement[T, V]: ...
@overload
def compose(
    r1: Refinement[T, U], r2: Refinement[U, V], r3: Refinement[V, W], /
) -> Refinement[T, W]: ...
@overload
def compose(
    r1: Refinement[T, U], r2: Refinement[U, V], r3: Refinement[V, W],
    r4: Refinement[W, X], /,
) -> Refinement[T, X]: ...
@overload
def compose(
    r1: Refinement[T, U], r2: Refinement[U, V], r3: Refinement[V, W],
    r4: Refinement[W, X], r5: Refinement[X, Y], /,
) -> Refinement[T, Y]: ...
@overload
def compose(*refinements: Refinement[Any, Any]) -> Refinement[Any, Any]: ...


def compose(*refinements: Refinement[Any, Any]) -> Refinement[Any, Any]:
    """
    Run refinements in sequence, each narrowing the previous stage's output.

    Stops at the first stage that rejects: later stages assume the narrower
    type and are never handed a value an earlier stage turned down.
    A single stage is returned as is.

    Example:
        is_programmer_error = compose(is_error, is_reference_error)
    """
    if not refinements:
        raise TypeError("compose() requires at least one refinement")

    if len(refinements) == 1:
        return refinements[0]

    def composed(candidate: Any) -> TypeGuard[Any]:
        return all(refinement(candidate) for refinement in refinements)

    return composed
