"""Common refinements built through the construction protocol."""

from typing import Any, Tuple, Type, Union, overload

from .core.construct import create
from .types.result import Result, hit, miss
from .types.variables import U, Refinement


@overload
def instance_of(cls: Type[U], /) -> Refinement[Any, U]: ...
@overload
def instance_of(*classes: type) -> Refinement[Any, Any]: ...


def instance_of(*classes: type) -> Refinement[Any, Any]:
    """
    Refinement accepting instances of the given class(es).

    Example:
        >>> is_cat = instance_of(Cat)
        >>> is_pet = instance_of(Cat, Dog)
    """
    if not classes:
        raise TypeError("instance_of() requires at least one class")
    target: Union[type, Tuple[type, ...]] = classes[0] if len(classes) == 1 else classes

    def classify(candidate: Any) -> Result[Any]:
        return hit(candidate) if isinstance(candidate, target) else miss

    classify.__name__ = "instance_of_" + "_or_".join(cls.__name__ for cls in classes)
    classify.__qualname__ = classify.__name__
    return create(classify, narrows_to=target)


def one_of(*values: Any) -> Refinement[Any, Any]:
    """
    Refinement accepting members of a closed set of literal values.

    Example:
        >>> is_prefixed = one_of("-moz-initial")
        >>> is_standard = one_of("inherit", "initial", "revert", "unset")
    """
    if not values:
        raise TypeError("one_of() requires at least one value")

    def classify(candidate: Any) -> Result[Any]:
        for value in values:
            if candidate == value:
                return hit(candidate)
        return miss

    classify.__name__ = "one_of"
    classify.__qualname__ = "one_of"
    return create(classify)


def _classify_none(candidate: Any) -> Result[None]:
    return hit(candidate) if candidate is None else miss


is_none: Refinement[Any, None] = create(_classify_none, narrows_to=type(None))
