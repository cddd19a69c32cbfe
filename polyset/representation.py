"""Capability surface and representation registry.

A :class:`Representation` is the table of operations one concrete set
implementation exposes. The container class (``set_type``) is the
*representation identity*: two set values share a representation iff their
exact Python types are the same registered class.

Representations register themselves when their module is imported (see
:mod:`polyset.representations`). Lookup is by exact type; subclasses of a
registered container are not recognized unless registered on their own.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from polyset.errors import UnsupportedRepresentation
from polyset.types import Acc, Element, Reducer

logger = logging.getLogger(__name__)

SetValue = Any
UnaryFn = Callable[[SetValue], Any]
ElementFn = Callable[[SetValue, Element], Any]
BinaryFn = Callable[[SetValue, SetValue], Any]
ReduceFn = Callable[[SetValue, Acc, Reducer], Acc]


@dataclass(frozen=True)
class Representation:
    """Operations a set implementation must provide to take part in dispatch.

    Native binary operations are only ever called with two operands of this
    same representation.

    Attributes:
        name: Registry key, e.g. ``"hash_set"``.
        set_type: Container class whose instances carry this identity.
        new_empty: ``set -> set``; empty set of the same representation.
        member: ``set x element -> bool``.
        put: ``set x element -> set``; idempotent insertion.
        delete: ``set x element -> set``; no-op when absent.
        size: ``set -> int``.
        to_list: ``set -> list`` in unspecified order.
        reduce: ``set x acc x reducer -> acc``; short-circuiting fold.
        union: Native same-representation union.
        intersection: Native same-representation intersection.
        difference: Native same-representation difference.
        equal: Native same-representation equality.
        subset: Native same-representation subset check.
        disjoint: Native same-representation disjointness check.
    """

    name: str
    set_type: Type[Any]
    new_empty: UnaryFn
    member: ElementFn
    put: ElementFn
    delete: ElementFn
    size: UnaryFn
    to_list: UnaryFn
    reduce: ReduceFn
    union: BinaryFn
    intersection: BinaryFn
    difference: BinaryFn
    equal: BinaryFn
    subset: BinaryFn
    disjoint: BinaryFn


_REPRESENTATION_REGISTRY: List[Representation] = []
_NAME_INDEX: Dict[str, Representation] = {}
_TYPE_INDEX: Dict[Type[Any], Representation] = {}


def register_representation(rep: Representation) -> Representation:
    """Add ``rep`` to the registry, replacing any entry with the same name.

    Raises:
        ValueError: If ``rep.set_type`` already belongs to a representation
            registered under a different name.
    """
    owner = _TYPE_INDEX.get(rep.set_type)
    if owner is not None and owner.name != rep.name:
        raise ValueError(
            f"{rep.set_type.__name__} is already registered as {owner.name!r}"
        )
    existing = _NAME_INDEX.get(rep.name)
    if existing is not None:
        idx = _REPRESENTATION_REGISTRY.index(existing)
        _REPRESENTATION_REGISTRY[idx] = rep
        _TYPE_INDEX.pop(existing.set_type, None)
        logger.debug("Replaced set representation %r", rep.name)
    else:
        _REPRESENTATION_REGISTRY.append(rep)
        logger.debug("Registered set representation %r", rep.name)
    _NAME_INDEX[rep.name] = rep
    _TYPE_INDEX[rep.set_type] = rep
    return rep


def all_representations() -> List[Representation]:
    """Return registered representations sorted by name."""
    return sorted(_REPRESENTATION_REGISTRY, key=lambda r: r.name)


def find_representation_by_name(name: str) -> Optional[Representation]:
    return _NAME_INDEX.get(name)


def representation_of(value: Any) -> Representation:
    """Resolve the representation identity of ``value``.

    Raises:
        UnsupportedRepresentation: If ``type(value)`` is not registered.
    """
    rep = _TYPE_INDEX.get(type(value))
    if rep is None:
        raise UnsupportedRepresentation(value)
    return rep
