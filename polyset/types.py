"""Common type aliases and fold control values.

``Reducer`` is the central extension point shared by every representation:
a step function receives one element plus the running accumulator and answers
with either :class:`Cont` (keep folding) or :class:`Halt` (stop now). Halting
is an ordinary return value, never an exception.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

Element = Any
"""Any value comparable with ``==``. No ordering is assumed."""

Acc = TypeVar("Acc")


@dataclass(frozen=True)
class Cont(Generic[Acc]):
    """Continue folding with ``acc`` as the new accumulator."""

    acc: Acc


@dataclass(frozen=True)
class Halt(Generic[Acc]):
    """Stop folding; ``acc`` is the final accumulator."""

    acc: Acc


Step = Union[Cont[Acc], Halt[Acc]]

Reducer = Callable[[Element, Any], "Step[Any]"]
