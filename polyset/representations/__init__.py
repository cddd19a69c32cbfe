"""Concrete set representations shipped with polyset.

Importing this package registers every representation below with
:mod:`polyset.representation`, making their set values usable with the
polymorphic API in :mod:`polyset.sets`. Third-party representations register
the same way: build a :class:`polyset.representation.Representation` and pass
it to :func:`polyset.representation.register_representation`.
"""

from . import bit_set, builtin, hash_set, list_set
from .bit_set import BitSet
from .hash_set import HashSet
from .list_set import ListSet

__all__ = [
    "BitSet",
    "HashSet",
    "ListSet",
    "bit_set",
    "builtin",
    "hash_set",
    "list_set",
]
