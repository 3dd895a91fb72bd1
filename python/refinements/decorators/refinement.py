"""Decorator form of the construction protocol."""

from typing import Any, Callable, Optional, overload

from ..core.construct import create
from ..core.runtime import Runtime
from ..types.result import Result
from ..types.variables import T, U, Refinement


@overload
def refinement(classify: Callable[[T], Result[U]]) -> Refinement[T, U]: ...
@overload
def refinement(
    *, narrows_to: Any = None, runtime: Optional[Runtime] = None
) -> Callable[[Callable[[T], Result[U]]], Refinement[T, U]]: ...


def refinement(classify=None, *, narrows_to=None, runtime=None):
    """
    Decorator turning a named classifier into a refinement.

    Args:
        classify: The classifier, when used without arguments
        narrows_to: Declared narrowed type, checked against hits in debug mode
        runtime: Contract-checking settings

    Example:
        @refinement
        def is_cat(pet: Pet) -> Result[Cat]:
            return hit(pet) if isinstance(pet, Cat) else miss

        @refinement(narrows_to=Dog, runtime=Runtime(strict=True))
        def is_dog(pet: Pet) -> Result[Dog]:
            return hit(pet) if isinstance(pet, Dog) else miss
    """
    def decorator(func):
        return create(func, narrows_to=narrows_to, runtime=runtime)

    if classify is None:
        return decorator
    return decorator(classify)
