"""Type variables and the refinement alias."""

from typing import Callable, TypeGuard, TypeVar

# Type variables for refinement chains: each letter is one narrowing step
T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')
W = TypeVar('W')
X = TypeVar('X')
Y = TypeVar('Y')

# Refinement[T, U]: a predicate over T that, when true, certifies a U
Refinement = Callable[[T], TypeGuard[U]]
