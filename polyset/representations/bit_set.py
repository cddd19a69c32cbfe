"""Bitmask set of small non-negative integers.

Element ``n`` is present iff bit ``n`` of :attr:`BitSet.bits` is set.
Membership follows Python ``==``: any value equal to a non-negative integer
(``True``, ``1.0``, ``Fraction(2, 1)``, ``Decimal(2)``) maps to that
integer's bit, so a ``BitSet`` agrees with hash and list sets on which
elements are shared.
Probing or deleting any other value is simply a miss.

Inserted values are stored as plain ``int``. Indices must stay below
:data:`INDEX_LIMIT` (2**24, i.e. a mask of at most 2 MiB); inserting a larger
index, a negative number or a non-integral value raises ``ValueError``.
"""

from dataclasses import dataclass
from decimal import Decimal
from numbers import Rational
from typing import Callable, Iterable, Iterator, List, Optional

from polyset.fold import reduce_iterable
from polyset.representation import Representation, register_representation
from polyset.types import Acc, Element, Reducer

INDEX_LIMIT = 1 << 24


def _as_index(value: Element) -> Optional[int]:
    """Return the bit index ``value`` compares equal to, or None."""
    if isinstance(value, int):
        index = int(value)
    elif isinstance(value, float) and value.is_integer():
        index = int(value)
    elif isinstance(value, Rational) and value.denominator == 1:
        index = int(value)
    elif isinstance(value, Decimal) and value.is_finite() and value == int(value):
        index = int(value)
    elif isinstance(value, complex) and value.imag == 0 and value.real.is_integer():
        index = int(value.real)
    else:
        return None
    return index if index >= 0 else None


def _iter_bits(bits: int) -> Iterator[int]:
    """Yield set bit positions in ascending order."""
    while bits:
        lowest = bits & -bits
        yield lowest.bit_length() - 1
        bits ^= lowest


@dataclass(frozen=True)
class BitSet:
    """Immutable bitmask set.

    Attributes:
        bits: Mask with one bit per stored integer.
    """

    bits: int = 0

    def __iter__(self) -> Iterator[int]:
        return _iter_bits(self.bits)

    def __len__(self) -> int:
        return self.bits.bit_count()


def new(
    values: Iterable[Element] = (),
    transform: Optional[Callable[[Element], Element]] = None,
) -> BitSet:
    """Build a bit set from ``values``.

    Raises:
        ValueError: If any (transformed) value is not a non-negative integer
            below ``INDEX_LIMIT``.
    """
    bset = BitSet()
    for value in values:
        bset = put(bset, transform(value) if transform is not None else value)
    return bset


def new_empty(bset: BitSet) -> BitSet:
    return BitSet()


def member(bset: BitSet, value: Element) -> bool:
    index = _as_index(value)
    return index is not None and (bset.bits >> index) & 1 == 1


def put(bset: BitSet, value: Element) -> BitSet:
    index = _as_index(value)
    if index is None:
        raise ValueError(f"BitSet members must be non-negative integers, got {value!r}")
    if index >= INDEX_LIMIT:
        raise ValueError(f"BitSet index {index} exceeds limit {INDEX_LIMIT - 1}")
    return BitSet(bits=bset.bits | (1 << index))


def delete(bset: BitSet, value: Element) -> BitSet:
    index = _as_index(value)
    if index is None or (bset.bits >> index) & 1 == 0:
        return bset
    return BitSet(bits=bset.bits & ~(1 << index))


def size(bset: BitSet) -> int:
    return bset.bits.bit_count()


def to_list(bset: BitSet) -> List[int]:
    return list(_iter_bits(bset.bits))


def reduce(bset: BitSet, acc: Acc, fn: Reducer) -> Acc:
    return reduce_iterable(_iter_bits(bset.bits), acc, fn)


def union(bset1: BitSet, bset2: BitSet) -> BitSet:
    return BitSet(bits=bset1.bits | bset2.bits)


def intersection(bset1: BitSet, bset2: BitSet) -> BitSet:
    return BitSet(bits=bset1.bits & bset2.bits)


def difference(bset1: BitSet, bset2: BitSet) -> BitSet:
    return BitSet(bits=bset1.bits & ~bset2.bits)


def equal(bset1: BitSet, bset2: BitSet) -> bool:
    return bset1.bits == bset2.bits


def subset(bset1: BitSet, bset2: BitSet) -> bool:
    return bset1.bits & ~bset2.bits == 0


def disjoint(bset1: BitSet, bset2: BitSet) -> bool:
    return bset1.bits & bset2.bits == 0


REPRESENTATION = register_representation(
    Representation(
        name="bit_set",
        set_type=BitSet,
        new_empty=new_empty,
        member=member,
        put=put,
        delete=delete,
        size=size,
        to_list=to_list,
        reduce=reduce,
        union=union,
        intersection=intersection,
        difference=difference,
        equal=equal,
        subset=subset,
        disjoint=disjoint,
    )
)
