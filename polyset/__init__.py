"""Polymorphic set operations across interchangeable representations.

Set values of different concrete representations (hash set, list set, bit
set, plain ``frozenset`` or any third-party registration) can be combined
with one API. Same-representation operands use the representation's native
operation; mixed operands fall back to generic algorithms written only in
terms of the shared capability surface.

>>> from polyset import sets
>>> from polyset.representations import bit_set, hash_set
>>> sorted(sets.intersection(hash_set.new([1, 2, 3]), bit_set.new([2, 3, 4])))
[2, 3]
"""

from polyset import representations
from polyset.config import PolysetConfig, configure, configured, current_config
from polyset.errors import UnsupportedRepresentation
from polyset.representation import (
    Representation,
    all_representations,
    find_representation_by_name,
    register_representation,
    representation_of,
)
from polyset.sets import (
    delete,
    difference,
    empty,
    intersection,
    is_disjoint,
    is_equal,
    is_member,
    is_subset,
    put,
    reduce,
    size,
    to_list,
    union,
)
from polyset.types import Cont, Halt

__all__ = [
    "Cont",
    "Halt",
    "PolysetConfig",
    "Representation",
    "UnsupportedRepresentation",
    "all_representations",
    "configure",
    "configured",
    "current_config",
    "delete",
    "difference",
    "empty",
    "find_representation_by_name",
    "intersection",
    "is_disjoint",
    "is_equal",
    "is_member",
    "is_subset",
    "put",
    "reduce",
    "register_representation",
    "representation_of",
    "representations",
    "size",
    "to_list",
    "union",
]
