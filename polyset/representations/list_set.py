"""Insertion-ordered set backed by ``pyrsistent.PVector``.

Membership relies on ``==`` alone, so elements do not need to be hashable
(lists, dicts and other mutable values are accepted). The price is linear
membership, insertion and deletion. Elements keep the order in which they
were first inserted; deleting and re-inserting moves an element to the end.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from polyset.fold import reduce_iterable
from polyset.representation import Representation, register_representation
from polyset.types import Acc, Element, Reducer


@dataclass(frozen=True, eq=False)
class ListSet:
    """Persistent equality-based set.

    Equality between two ``ListSet`` values is set equality through
    :func:`equal`; the dataclass itself compares by identity because element
    order is not meaningful.

    Attributes:
        items: Distinct elements in first-insertion order.
    """

    items: PVector[Element] = pvector()

    def __iter__(self) -> Iterator[Element]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def new(
    values: Iterable[Element] = (),
    transform: Optional[Callable[[Element], Element]] = None,
) -> ListSet:
    """Build a list set from ``values``, dropping repeats after the first."""
    lset = ListSet()
    for value in values:
        lset = put(lset, transform(value) if transform is not None else value)
    return lset


def new_empty(lset: ListSet) -> ListSet:
    return ListSet()


def member(lset: ListSet, value: Element) -> bool:
    return value in lset.items


def put(lset: ListSet, value: Element) -> ListSet:
    if value in lset.items:
        return lset
    return ListSet(items=lset.items.append(value))


def delete(lset: ListSet, value: Element) -> ListSet:
    if value not in lset.items:
        return lset
    return ListSet(items=lset.items.remove(value))


def size(lset: ListSet) -> int:
    return len(lset.items)


def to_list(lset: ListSet) -> List[Element]:
    return list(lset.items)


def reduce(lset: ListSet, acc: Acc, fn: Reducer) -> Acc:
    return reduce_iterable(lset.items, acc, fn)


def union(lset1: ListSet, lset2: ListSet) -> ListSet:
    extra = [item for item in lset2.items if item not in lset1.items]
    return ListSet(items=lset1.items.extend(extra)) if extra else lset1


def intersection(lset1: ListSet, lset2: ListSet) -> ListSet:
    return ListSet(items=pvector(item for item in lset1.items if item in lset2.items))


def difference(lset1: ListSet, lset2: ListSet) -> ListSet:
    return ListSet(
        items=pvector(item for item in lset1.items if item not in lset2.items)
    )


def equal(lset1: ListSet, lset2: ListSet) -> bool:
    return len(lset1.items) == len(lset2.items) and subset(lset1, lset2)


def subset(lset1: ListSet, lset2: ListSet) -> bool:
    return all(item in lset2.items for item in lset1.items)


def disjoint(lset1: ListSet, lset2: ListSet) -> bool:
    return not any(item in lset1.items for item in lset2.items)


REPRESENTATION = register_representation(
    Representation(
        name="list_set",
        set_type=ListSet,
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
