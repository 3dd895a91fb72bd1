"""Classifier outcomes: a hit carrying the recognized value, or a miss."""

from dataclasses import dataclass
from typing import Any, Generic, Union

from .variables import U


@dataclass(frozen=True)
class Hit(Generic[U]):
    """The classifier recognized the candidate as a ``U``; here it is."""

    value: U


class Miss:
    """The classifier does not recognize the candidate.

    Carries nothing. Every instance equals every other one, so ``Miss()`` and
    the module constant ``miss`` are interchangeable.
    """

    __slots__ = ()

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Miss)

    def __hash__(self) -> int:
        return hash(Miss)

    def __repr__(self) -> str:
        return "miss"


Result = Union[Hit[U], Miss]


def hit(value: U) -> Hit[U]:
    """
    Wrap a recognized candidate.

    Example:
        >>> create(lambda pet: hit(pet) if isinstance(pet, Cat) else miss)
    """
    return Hit(value)


miss = Miss()
