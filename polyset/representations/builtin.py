"""Adapter registering Python's ``frozenset`` as a set representation.

Plain frozensets can then be mixed freely with the persistent
representations. Mutable ``set`` objects are deliberately not registered:
dispatch never mutates its operands, and a shared mutable set could change
under a running fold.
"""

from typing import Callable, FrozenSet, Iterable, List, Optional

from polyset.fold import reduce_iterable
from polyset.representation import Representation, register_representation
from polyset.types import Acc, Element, Reducer


def new(
    values: Iterable[Element] = (),
    transform: Optional[Callable[[Element], Element]] = None,
) -> FrozenSet[Element]:
    if transform is not None:
        values = (transform(value) for value in values)
    return frozenset(values)


def new_empty(fset: FrozenSet[Element]) -> FrozenSet[Element]:
    return frozenset()


def member(fset: FrozenSet[Element], value: Element) -> bool:
    return value in fset


def put(fset: FrozenSet[Element], value: Element) -> FrozenSet[Element]:
    if value in fset:
        return fset
    return fset | {value}


def delete(fset: FrozenSet[Element], value: Element) -> FrozenSet[Element]:
    if value not in fset:
        return fset
    return fset - {value}


def to_list(fset: FrozenSet[Element]) -> List[Element]:
    return list(fset)


def reduce(fset: FrozenSet[Element], acc: Acc, fn: Reducer) -> Acc:
    return reduce_iterable(fset, acc, fn)


REPRESENTATION = register_representation(
    Representation(
        name="frozenset",
        set_type=frozenset,
        new_empty=new_empty,
        member=member,
        put=put,
        delete=delete,
        size=len,
        to_list=to_list,
        reduce=reduce,
        union=frozenset.union,
        intersection=frozenset.intersection,
        difference=frozenset.difference,
        equal=frozenset.__eq__,
        subset=frozenset.issubset,
        disjoint=frozenset.isdisjoint,
    )
)
