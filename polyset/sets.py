"""Polymorphic set API.

Every function here works on a set value of *any* registered representation
(see :mod:`polyset.representation`). Unary operations delegate straight to
the operand's own representation. Binary operations resolve both operands
and either:

1. call the shared representation's native operation when both identities
   match (and the fast path is enabled in :mod:`polyset.config`), or
2. fall back to the generic algorithm in :mod:`polyset.algorithms`, which
   only uses membership / insertion / deletion / size / fold.

Binary operations returning a set return one of the left operand's
representation. All operations are pure: operands are never modified.

Examples
--------
>>> from polyset import sets
>>> from polyset.representations import hash_set, list_set
>>> s = sets.union(hash_set.new([1, 2]), list_set.new([2, 3, 4]))
>>> sorted(sets.to_list(s))
[1, 2, 3, 4]
"""

import logging
from typing import Any, Callable, List, Tuple

from polyset import algorithms
from polyset.config import current_config
from polyset.representation import Representation, SetValue, representation_of
from polyset.types import Acc, Element, Reducer

logger = logging.getLogger(__name__)

GenericFn = Callable[[Representation, Representation, SetValue, SetValue], Any]


def _resolve_pair(
    set1: SetValue, set2: SetValue
) -> Tuple[Representation, Representation, bool]:
    """Resolve both operands; the flag is True when the native path applies."""
    rep1 = representation_of(set1)
    rep2 = representation_of(set2)
    return rep1, rep2, rep1 is rep2 and current_config().native_fast_path


def _dispatch_binary(
    op: str, generic: GenericFn, set1: SetValue, set2: SetValue
) -> Any:
    rep1, rep2, native = _resolve_pair(set1, set2)
    if native:
        logger.debug("%s: native %s", op, rep1.name)
        return getattr(rep1, op)(set1, set2)
    logger.debug("%s: generic %s x %s", op, rep1.name, rep2.name)
    return generic(rep1, rep2, set1, set2)


# Unary operations


def delete(set1: SetValue, value: Element) -> SetValue:
    """Return ``set1`` with ``value`` removed (no-op if absent)."""
    return representation_of(set1).delete(set1, value)


def empty(set1: SetValue) -> SetValue:
    """Return an empty set of the same representation as ``set1``."""
    return representation_of(set1).new_empty(set1)


def is_member(set1: SetValue, value: Element) -> bool:
    """Return True if ``set1`` contains ``value``."""
    return representation_of(set1).member(set1, value)


def put(set1: SetValue, value: Element) -> SetValue:
    """Return ``set1`` with ``value`` inserted (idempotent)."""
    return representation_of(set1).put(set1, value)


def size(set1: SetValue) -> int:
    """Return the number of elements in ``set1``."""
    return representation_of(set1).size(set1)


def to_list(set1: SetValue) -> List[Element]:
    """Return the elements of ``set1`` as a list in unspecified order."""
    return representation_of(set1).to_list(set1)


def reduce(set1: SetValue, acc: Acc, fn: Reducer) -> Acc:
    """Fold ``fn`` over ``set1`` with continue/halt control.

    Args:
        set1 (SetValue): Set of any registered representation.
        acc (Acc): Initial accumulator.
        fn (Reducer): ``(element, acc) -> Cont(acc) | Halt(acc)``.

    Returns:
        Acc: The final accumulator; folding stops at the first ``Halt``.
    """
    return representation_of(set1).reduce(set1, acc, fn)


# Binary operations


def union(set1: SetValue, set2: SetValue) -> SetValue:
    """Return all members of ``set1`` and ``set2``.

    Examples
    --------
    >>> from polyset.representations import hash_set
    >>> sorted(union(hash_set.new([1, 2]), hash_set.new([2, 3, 4])))
    [1, 2, 3, 4]
    """
    return _dispatch_binary("union", algorithms.generic_union, set1, set2)


def intersection(set1: SetValue, set2: SetValue) -> SetValue:
    """Return the members ``set1`` and ``set2`` have in common.

    Examples
    --------
    >>> from polyset.representations import hash_set
    >>> sorted(intersection(hash_set.new([1, 2]), hash_set.new([2, 3, 4])))
    [2]
    """
    return _dispatch_binary(
        "intersection", algorithms.generic_intersection, set1, set2
    )


def difference(set1: SetValue, set2: SetValue) -> SetValue:
    """Return ``set1`` without the members of ``set2``.

    Examples
    --------
    >>> from polyset.representations import hash_set
    >>> sorted(difference(hash_set.new([1, 2]), hash_set.new([2, 3, 4])))
    [1]
    """
    return _dispatch_binary("difference", algorithms.generic_difference, set1, set2)


def is_equal(set1: SetValue, set2: SetValue) -> bool:
    """Return True if both sets hold the same elements, whatever their types."""
    return _dispatch_binary("equal", algorithms.generic_equal, set1, set2)


def is_subset(set1: SetValue, set2: SetValue) -> bool:
    """Return True if every member of ``set1`` is in ``set2``."""
    return _dispatch_binary("subset", algorithms.generic_subset, set1, set2)


def is_disjoint(set1: SetValue, set2: SetValue) -> bool:
    """Return True if ``set1`` and ``set2`` have no member in common."""
    return _dispatch_binary("disjoint", algorithms.generic_disjoint, set1, set2)
