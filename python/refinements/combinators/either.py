"""Alternation of sibling refinements."""

from typing import Any, TypeGuard, Union, overload

from ..types.variables import T, U, V, W, X, Y, Refinement


@overload
def either(
    r1: Refinement[T, U], r2: Refinement[T, V], /
) -> Refinement[T, Union[U, V]]: ...
@overload
def either(
    r1: Refinement[T, U], r2: Refinement[T, V], r3: Refinement[T, W], /
) -> Refinement[T, Union[U, V, W]]: ...
@overload
def either(
    r1: Refinement[T, U], r2: Refinement[T, V], r3: Refinement[T, W],
    r4: Refinement[T, X], /,
) -> Refinement[T, Union[U, V, W, X]]: ...
@overload
def either(
    r1: Refinement[T, U], r2: Refinement[T, V], r3: Refinement[T, W],
    r4: Refinement[T, X], r5: Refinement[T, Y], /,
) -> Refinement[T, Union[U, V, W, X, Y]]: ...
@overload
def either(*refinements: Refinement[Any, Any]) -> Refinement[Any, Any]: ...


def either(*refinements: Refinement[Any, Any]) -> Refinement[Any, Any]:
    """
    Accept a candidate when any sibling refinement accepts it.

    Siblings are tried left to right and the first acceptance wins. They may
    overlap; overlapping siblings are not detected.

    Example:
        is_primitive = either(is_string, is_number)
    """
    if len(refinements) < 2:
        raise TypeError(
            f"either() requires at least two refinements, got {len(refinements)}"
        )

    def alternated(candidate: Any) -> TypeGuard[Any]:
        return any(refinement(candidate) for refinement in refinements)

    return alternated
