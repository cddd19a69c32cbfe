"""Short-circuiting fold primitive.

Every representation implements its ``reduce`` capability by handing its own
element iterator to :func:`reduce_iterable`, so the continue/halt contract is
enforced in exactly one place.
"""

from typing import Iterable

from polyset.types import Acc, Cont, Element, Halt, Reducer


def reduce_iterable(items: Iterable[Element], acc: Acc, fn: Reducer) -> Acc:
    """Fold ``fn`` over ``items`` until exhausted or halted.

    Args:
        items (Iterable[Element]): Elements to visit, each exactly once.
        acc (Acc): Initial accumulator.
        fn (Reducer): ``(element, acc) -> Cont | Halt`` step function.

    Returns:
        Acc: Accumulator carried by the last step (or ``acc`` if ``items``
            is empty).

    Raises:
        TypeError: If ``fn`` returns something other than ``Cont`` / ``Halt``.
    """
    for item in items:
        step = fn(item, acc)
        if isinstance(step, Halt):
            return step.acc
        if not isinstance(step, Cont):
            raise TypeError(f"Reducer must return Cont or Halt, got {step!r}")
        acc = step.acc
    return acc
