"""Hash set representation backed by ``pyrsistent.PSet``.

Elements must be hashable; inserting or probing an unhashable value raises
``TypeError`` straight from the underlying persistent set. Every operation
returns a new :class:`HashSet` sharing structure with its input.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional

from pyrsistent import pset
from pyrsistent.typing import PSet

from polyset.fold import reduce_iterable
from polyset.representation import Representation, register_representation
from polyset.types import Acc, Element, Reducer


@dataclass(frozen=True)
class HashSet:
    """Persistent hash set.

    Attributes:
        members: Persistent set of the stored elements.
    """

    members: PSet[Element] = pset()

    def __iter__(self) -> Iterator[Element]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)


def new(
    values: Iterable[Element] = (),
    transform: Optional[Callable[[Element], Element]] = None,
) -> HashSet:
    """Build a hash set from ``values``, optionally mapping each through ``transform``."""
    if transform is not None:
        values = (transform(value) for value in values)
    return HashSet(members=pset(values))


def new_empty(hset: HashSet) -> HashSet:
    return HashSet()


def member(hset: HashSet, value: Element) -> bool:
    return value in hset.members


def put(hset: HashSet, value: Element) -> HashSet:
    if value in hset.members:
        return hset
    return HashSet(members=hset.members.add(value))


def delete(hset: HashSet, value: Element) -> HashSet:
    if value not in hset.members:
        return hset
    return HashSet(members=hset.members.remove(value))


def size(hset: HashSet) -> int:
    return len(hset.members)


def to_list(hset: HashSet) -> List[Element]:
    return list(hset.members)


def reduce(hset: HashSet, acc: Acc, fn: Reducer) -> Acc:
    return reduce_iterable(hset.members, acc, fn)


def union(hset1: HashSet, hset2: HashSet) -> HashSet:
    return HashSet(members=hset1.members | hset2.members)


def intersection(hset1: HashSet, hset2: HashSet) -> HashSet:
    return HashSet(members=hset1.members & hset2.members)


def difference(hset1: HashSet, hset2: HashSet) -> HashSet:
    return HashSet(members=hset1.members - hset2.members)


def equal(hset1: HashSet, hset2: HashSet) -> bool:
    return hset1.members == hset2.members


def subset(hset1: HashSet, hset2: HashSet) -> bool:
    return hset1.members <= hset2.members


def disjoint(hset1: HashSet, hset2: HashSet) -> bool:
    return hset1.members.isdisjoint(hset2.members)


REPRESENTATION = register_representation(
    Representation(
        name="hash_set",
        set_type=HashSet,
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
