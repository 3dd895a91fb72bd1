"""Negation of a refinement within a closed union."""

from typing import TypeGuard

from ..types.variables import T, U, Refinement


def not_(refinement: Refinement[T, U]) -> Refinement[T, T]:
    """
    Negate a refinement.

    ``T`` must be a closed union such as ``Union[Cat, Dog]`` or a
    ``Literal[...]`` type, and the refinement must pick out one of its
    branches. ``TypeGuard`` cannot spell ``T`` minus ``U``, so the result
    only claims ``T``; the verdict itself is the exact complement.

    Example:
        is_dog = not_(is_cat)
    """
    def negated(candidate: T) -> TypeGuard[T]:
        return not refinement(candidate)

    return negated


negate = not_
