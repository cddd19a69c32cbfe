"""Generic set algorithms built only from the capability surface.

These are the fallbacks the dispatcher uses when two operands have different
representations. Each function receives both resolved representations and
never looks inside either container, so any pair of registered
representations works without knowing about each other. They are also
correct (just slower) when both operands share a representation.

Result identity: operations that return a set return one of the *left*
operand's representation. Fold direction per operation:

* ``union``: fold the right set into the left one (seed = left set).
* ``intersection``: fold the left set into an empty left-type accumulator,
  keeping members of the right set.
* ``difference``: fold the right set, deleting each element from the left.
* ``subset`` / ``equal``: fold the left set, halting on the first element
  missing from the right set.
* ``disjoint``: fold the right set, halting on the first element found in
  the left set.
"""

from polyset.config import current_config
from polyset.representation import Representation, SetValue
from polyset.types import Cont, Element, Halt, Step


def generic_union(
    rep1: Representation, rep2: Representation, set1: SetValue, set2: SetValue
) -> SetValue:
    """Return ``set1`` plus every element of ``set2`` (representation of ``set1``)."""

    def step(value: Element, acc: SetValue) -> Step[SetValue]:
        return Cont(rep1.put(acc, value))

    return rep2.reduce(set2, set1, step)


def generic_intersection(
    rep1: Representation, rep2: Representation, set1: SetValue, set2: SetValue
) -> SetValue:
    """Return elements of ``set1`` also in ``set2`` (representation of ``set1``)."""

    def step(value: Element, acc: SetValue) -> Step[SetValue]:
        if rep2.member(set2, value):
            return Cont(rep1.put(acc, value))
        return Cont(acc)

    return rep1.reduce(set1, rep1.new_empty(set1), step)


def generic_difference(
    rep1: Representation, rep2: Representation, set1: SetValue, set2: SetValue
) -> SetValue:
    """Return ``set1`` without the elements of ``set2`` (representation of ``set1``)."""

    def step(value: Element, acc: SetValue) -> Step[SetValue]:
        return Cont(rep1.delete(acc, value))

    return rep2.reduce(set2, set1, step)


def generic_subset(
    rep1: Representation, rep2: Representation, set1: SetValue, set2: SetValue
) -> bool:
    """Return True if every element of ``set1`` is a member of ``set2``."""

    def step(value: Element, acc: bool) -> Step[bool]:
        if rep2.member(set2, value):
            return Cont(acc)
        return Halt(False)

    return rep1.reduce(set1, True, step)


def generic_equal(
    rep1: Representation, rep2: Representation, set1: SetValue, set2: SetValue
) -> bool:
    """Return True if both sets hold the same elements.

    With equal sizes, ``set1`` being a subset of ``set2`` implies the
    reverse inclusion too. When the size shortcut is disabled in the active
    config the inclusion is checked in both directions instead.
    """
    if current_config().equal_size_shortcut:
        if rep1.size(set1) != rep2.size(set2):
            return False
        return generic_subset(rep1, rep2, set1, set2)
    return generic_subset(rep1, rep2, set1, set2) and generic_subset(
        rep2, rep1, set2, set1
    )


def generic_disjoint(
    rep1: Representation, rep2: Representation, set1: SetValue, set2: SetValue
) -> bool:
    """Return True if no element of ``set2`` is a member of ``set1``."""

    def step(value: Element, acc: bool) -> Step[bool]:
        if rep1.member(set1, value):
            return Halt(False)
        return Cont(acc)

    return rep2.reduce(set2, True, step)
