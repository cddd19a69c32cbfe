# tests/integration/test_set_properties.py
#
# Algebraic properties checked over every ordered pair of built-in
# representations, including same-representation pairs.

from typing import List

import pytest

from polyset import sets
from polyset.config import configured
from tests.test_utils import ALL_PAIRS, REPRESENTATION_NAMES, elements, make_set

SAMPLES: List[List[int]] = [[], [1], [1, 2, 3], [2, 3, 4], [5, 6], [0, 2, 4, 6, 8]]


def pair_cases():
    for name_a, name_b in ALL_PAIRS:
        for values_a in SAMPLES:
            for values_b in SAMPLES:
                yield name_a, name_b, values_a, values_b


PAIR_CASES = list(pair_cases())


@pytest.mark.parametrize("name", REPRESENTATION_NAMES)
@pytest.mark.parametrize("values", SAMPLES)
def test_put_then_member(name: str, values: List[int]) -> None:
    a = make_set(name, values)
    assert sets.is_member(sets.put(a, 7), 7)
    assert sets.is_member(sets.put(a, 1), 1)


@pytest.mark.parametrize("name", REPRESENTATION_NAMES)
@pytest.mark.parametrize("values", SAMPLES)
def test_delete_then_not_member(name: str, values: List[int]) -> None:
    a = make_set(name, values)
    for value in values + [99]:
        assert not sets.is_member(sets.delete(a, value), value)


@pytest.mark.parametrize("name_a, name_b, values_a, values_b", PAIR_CASES)
def test_union_size_bounds(
    name_a: str, name_b: str, values_a: List[int], values_b: List[int]
) -> None:
    a, b = make_set(name_a, values_a), make_set(name_b, values_b)
    union_size = sets.size(sets.union(a, b))
    assert union_size >= max(sets.size(a), sets.size(b))
    assert union_size <= sets.size(a) + sets.size(b)


@pytest.mark.parametrize("name_a, name_b, values_a, values_b", PAIR_CASES)
def test_union_and_intersection_commute(
    name_a: str, name_b: str, values_a: List[int], values_b: List[int]
) -> None:
    a, b = make_set(name_a, values_a), make_set(name_b, values_b)
    assert sets.is_equal(sets.union(a, b), sets.union(b, a))
    assert sets.is_equal(sets.intersection(a, b), sets.intersection(b, a))


@pytest.mark.parametrize("name_a, name_b, values_a, values_b", PAIR_CASES)
def test_intersection_is_subset_of_both(
    name_a: str, name_b: str, values_a: List[int], values_b: List[int]
) -> None:
    a, b = make_set(name_a, values_a), make_set(name_b, values_b)
    common = sets.intersection(a, b)
    assert sets.is_subset(common, a)
    assert sets.is_subset(common, b)


@pytest.mark.parametrize("name_a, name_b, values_a, values_b", PAIR_CASES)
def test_disjoint_iff_empty_intersection(
    name_a: str, name_b: str, values_a: List[int], values_b: List[int]
) -> None:
    a, b = make_set(name_a, values_a), make_set(name_b, values_b)
    assert sets.is_disjoint(a, b) == (sets.size(sets.intersection(a, b)) == 0)


@pytest.mark.parametrize("name_a, name_b, values_a, values_b", PAIR_CASES)
def test_difference_of_disjoint_is_left(
    name_a: str, name_b: str, values_a: List[int], values_b: List[int]
) -> None:
    a, b = make_set(name_a, values_a), make_set(name_b, values_b)
    if sets.is_disjoint(a, b):
        assert sets.is_equal(sets.difference(a, b), a)


@pytest.mark.parametrize("name_a, name_b, values_a, values_b", PAIR_CASES)
def test_results_match_python_sets(
    name_a: str, name_b: str, values_a: List[int], values_b: List[int]
) -> None:
    a, b = make_set(name_a, values_a), make_set(name_b, values_b)
    sa, sb = set(values_a), set(values_b)
    assert elements(sets.union(a, b)) == sorted(sa | sb)
    assert elements(sets.intersection(a, b)) == sorted(sa & sb)
    assert elements(sets.difference(a, b)) == sorted(sa - sb)
    assert sets.is_equal(a, b) == (sa == sb)
    assert sets.is_subset(a, b) == (sa <= sb)
    assert sets.is_disjoint(a, b) == sa.isdisjoint(sb)


@pytest.mark.parametrize("name", REPRESENTATION_NAMES)
@pytest.mark.parametrize("values", SAMPLES)
def test_idempotence(name: str, values: List[int]) -> None:
    a = make_set(name, values)
    assert sets.is_equal(sets.union(a, a), a)
    assert sets.is_equal(sets.intersection(a, a), a)
    assert sets.size(sets.difference(a, a)) == 0


@pytest.mark.parametrize("name_a, name_b", ALL_PAIRS)
def test_empty_set_boundary(name_a: str, name_b: str) -> None:
    empty = make_set(name_a)
    b = make_set(name_b, [2, 3, 4])
    assert elements(sets.union(empty, b)) == [2, 3, 4]
    assert sets.size(sets.intersection(empty, b)) == 0
    assert sets.is_subset(empty, b)
    assert sets.is_disjoint(empty, b)
    assert sets.is_subset(empty, make_set(name_b))
    assert sets.is_equal(empty, make_set(name_b))


@pytest.mark.parametrize("name_a, name_b", ALL_PAIRS)
def test_native_and_generic_paths_agree(name_a: str, name_b: str) -> None:
    a = make_set(name_a, [1, 2, 3, 8])
    b = make_set(name_b, [2, 3, 4])
    ops = [sets.union, sets.intersection, sets.difference]
    checks = [sets.is_equal, sets.is_subset, sets.is_disjoint]
    native = [elements(op(a, b)) for op in ops] + [check(a, b) for check in checks]
    with configured(native_fast_path=False):
        generic = [elements(op(a, b)) for op in ops] + [check(a, b) for check in checks]
    assert native == generic


# Values that compare equal across types: True == 1 == 1.0, False == 0 == 0.0.
EQUAL_VALUE_SAMPLES: List[List[object]] = [
    [True],
    [1.0],
    [1],
    [True, 2.0],
    [0.0, 3],
    [False, 2],
    [1, 2.0, 3],
]


def equal_value_cases():
    for name_a, name_b in ALL_PAIRS:
        for values_a in EQUAL_VALUE_SAMPLES:
            for values_b in EQUAL_VALUE_SAMPLES:
                yield name_a, name_b, values_a, values_b


EQUAL_VALUE_CASES = list(equal_value_cases())


@pytest.mark.parametrize("name_a, name_b, values_a, values_b", EQUAL_VALUE_CASES)
def test_equal_values_of_different_types_are_shared(
    name_a: str, name_b: str, values_a: List[object], values_b: List[object]
) -> None:
    a, b = make_set(name_a, values_a), make_set(name_b, values_b)
    sa, sb = set(values_a), set(values_b)
    assert sets.is_equal(sets.intersection(a, b), sets.intersection(b, a))
    assert sets.is_disjoint(a, b) == (sets.size(sets.intersection(a, b)) == 0)
    assert sets.size(sets.intersection(a, b)) == len(sa & sb)
    assert sets.size(sets.union(a, b)) == len(sa | sb)
    assert sets.size(sets.difference(a, b)) == len(sa - sb)
    assert sets.is_equal(a, b) == (sa == sb)
    assert sets.is_subset(a, b) == (sa <= sb)
