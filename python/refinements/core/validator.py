"""Contract checks for classifier outcomes."""

import types
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from ..types.result import Hit, Miss


class ClassifierContractError(TypeError):
    """Raised when a classifier breaks the hit/miss contract."""
    pass


class RefinementContractWarning(UserWarning):
    """Issued instead of ClassifierContractError outside strict mode."""
    pass


def matches_type(value: Any, narrows_to: Any) -> bool:
    """
    Check a value against a narrowing target.

    Args:
        value: Payload of a hit
        narrows_to: A class, a tuple of classes, ``Any``, or a
            ``Literal[...]`` / ``Union[...]`` / ``X | Y`` / ``Annotated[...]`` form

    Raises:
        ClassifierContractError: narrows_to cannot be checked at runtime
            (a TypeVar, a non-runtime Protocol, ...)

    Example:
        matches_type("unset", Literal["inherit", "unset"])  # True
        matches_type(3, int | str)                          # True
    """
    if narrows_to is Any:
        return True
    if isinstance(narrows_to, tuple):
        return any(matches_type(value, member) for member in narrows_to)

    origin = get_origin(narrows_to)
    if origin is Annotated:
        return matches_type(value, get_args(narrows_to)[0])
    if origin is Literal:
        return any(value == option and type(value) is type(option)
                   for option in get_args(narrows_to))
    if origin is Union or origin is types.UnionType:
        return any(matches_type(value, member) for member in get_args(narrows_to))

    # Parameterized generics (list[int]) are checked by their origin only
    target = origin if origin is not None else narrows_to
    try:
        return isinstance(value, target)
    except TypeError:
        raise ClassifierContractError(
            f"Cannot check {value!r} against {narrows_to!r} at runtime"
        ) from None


def validate_result(result: Any, candidate: Any, narrows_to: Any = None) -> None:
    """
    Validate one classifier outcome.

    Args:
        result: What the classifier returned
        candidate: The value the classifier was given
        narrows_to: Declared narrowed type, if the caller stated one

    Raises:
        ClassifierContractError: The outcome is not a Hit or a Miss, the hit
            does not carry the candidate, or the payload is not a narrows_to
    """
    if isinstance(result, Miss):
        return

    if not isinstance(result, Hit):
        raise ClassifierContractError(
            f"Classifier must return hit(...) or miss, got {result!r}"
        )

    if result.value is not candidate:
        raise ClassifierContractError(
            f"Hit must carry the candidate itself, got {result.value!r} for {candidate!r}"
        )

    if narrows_to is not None and not matches_type(result.value, narrows_to):
        raise ClassifierContractError(
            f"Hit payload {result.value!r} is not a {_describe(narrows_to)}"
        )


def _describe(narrows_to: Any) -> str:
    if isinstance(narrows_to, type):
        return narrows_to.__qualname__
    if isinstance(narrows_to, tuple):
        return " | ".join(_describe(member) for member in narrows_to)
    return repr(narrows_to)
