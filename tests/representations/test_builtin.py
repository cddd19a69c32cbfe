# tests/representations/test_builtin.py

from polyset import sets
from polyset.representations import builtin, hash_set


def test_frozenset_capabilities() -> None:
    fset = builtin.new([1, 2])
    assert fset == frozenset({1, 2})
    assert builtin.put(fset, 1) is fset
    assert builtin.put(fset, 3) == frozenset({1, 2, 3})
    assert builtin.delete(fset, 9) is fset
    assert builtin.delete(fset, 1) == frozenset({2})
    assert builtin.new_empty(fset) == frozenset()
    assert builtin.new(["x", "yy"], transform=len) == frozenset({1, 2})


def test_frozenset_through_dispatch() -> None:
    fset = frozenset({1, 2, 3})
    assert sets.size(fset) == 3
    assert sets.is_member(fset, 2)
    assert sets.union(fset, frozenset({4})) == frozenset({1, 2, 3, 4})
    assert sets.is_subset(frozenset({1}), fset)
    mixed = sets.intersection(fset, hash_set.new([2, 3, 4]))
    assert mixed == frozenset({2, 3})
    assert sets.is_equal(hash_set.new([1, 2, 3]), fset)
    assert fset == frozenset({1, 2, 3})
