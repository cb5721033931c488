import random
import pytest
from underbar.core.errors import ArgumentError, ShapeError
from underbar.functional.collections import (
    contains,
    every,
    filter,
    first,
    identity,
    invoke,
    last,
    map,
    pluck,
    reduce,
    reject,
    some,
    uniq,
)


def is_even(number):
    return number % 2 == 0


@pytest.fixture
def numbers():
    rng = random.Random(7)
    return [rng.randint(-50, 50) for _ in range(40)]


def test_first_and_last():
    assert first([1, 2, 3]) == 1
    assert first([1, 2, 3], 2) == [1, 2]
    assert first([1, 2, 3], 0) == []
    assert first([]) is None

    assert last([1, 2, 3]) == 3
    assert last([1, 2, 3], 2) == [2, 3]
    assert last([1, 2, 3], 5) == [1, 2, 3]
    assert last([1, 2, 3], 0) == []
    assert last([]) is None


def test_map_identity_preserves_sequence(numbers):
    result = map(numbers, identity)

    assert result == numbers
    assert result is not numbers


def test_map_receives_key_and_collection():
    data = {"a": 1, "b": 2}
    assert map(data, lambda value, key: f"{key}={value}") == ["a=1", "b=2"]
    assert map([5, 6], lambda value, index, source: (index, len(source))) == [
        (0, 2),
        (1, 2),
    ]


def test_filter_and_reject_partition(numbers):
    kept = filter(numbers, is_even)
    dropped = reject(numbers, is_even)

    assert all(is_even(n) for n in kept)
    assert not any(is_even(n) for n in dropped)
    assert len(kept) + len(dropped) == len(numbers)
    for n in numbers:
        assert n in kept or n in dropped


def test_filter_keeps_encounter_order():
    assert filter([5, 2, 8, 3, 6], is_even) == [2, 8, 6]
    assert filter({"a": 1, "b": 2, "c": 4}, is_even) == [2, 4]
    assert filter([], is_even) == []


def test_filter_rejects_bad_shape():
    with pytest.raises(ShapeError):
        filter("abc", identity)


def test_uniq_first_occurrence():
    assert uniq([1, 2, 2, 3, 1]) == [1, 2, 3]
    assert uniq([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_uniq_is_strict():
    assert uniq([1, True, "1", 1.0]) == [1, True, "1"]


def test_uniq_does_not_mutate():
    data = [3, 1, 3]
    uniq(data)
    assert data == [3, 1, 3]


def test_pluck():
    people = [{"name": "moe", "age": 30}, {"name": "curly", "age": 50}, {}]
    assert pluck(people, "name") == ["moe", "curly", None]


def test_pluck_attributes_and_indices():
    class Point:
        def __init__(self, x):
            self.x = x

    assert pluck([Point(1), Point(2)], "x") == [1, 2]
    assert pluck([[1, 2], [3]], 1) == [2, None]


def test_invoke_by_name():
    assert invoke(["a", "b"], "upper") == ["A", "B"]
    assert invoke([[3, 1, 2]], "index", [1]) == [1]


def test_invoke_with_function():
    def join_with(receiver, separator):
        return separator.join(receiver)

    assert invoke([["a", "b"], ["c"]], join_with, ["-"]) == ["a-b", "c"]


def test_invoke_missing_method():
    with pytest.raises(ArgumentError, match="no method 'shout'"):
        invoke(["a"], "shout")


def test_reduce():
    assert reduce([1, 2, 3], lambda acc, x: acc + x, 0) == 6
    assert reduce([], lambda acc, x: acc + x, 10) == 10
    assert reduce([1, 2, 3], lambda acc, x: acc + x) == 6
    assert reduce([], lambda acc, x: acc + x) == 0


def test_reduce_falsy_seed_is_respected():
    # An explicit falsy seed must not be replaced by the numeric default
    assert reduce(["a", "b"], lambda acc, x: acc + x, "") == "ab"
    assert reduce([1, 2], lambda acc, x: acc + [x], []) == [1, 2]


def test_reduce_requires_seed_for_non_numeric():
    with pytest.raises(ArgumentError, match="explicit initial value") as excinfo:
        reduce(["a", "b"], lambda acc, x: acc + x)
    assert isinstance(excinfo.value.__cause__, TypeError)


def test_reduce_numeric_fold_over_records_without_seed():
    people = [{"age": 30}, {"age": 41}]
    assert reduce(people, lambda total, person: total + person["age"]) == 71
    assert reduce([[1], [2, 3]], lambda total, items: total + len(items)) == 3


def test_reduce_over_mapping_values():
    assert reduce({"a": 2, "b": 5}, lambda acc, x: acc * x, 1) == 10


def test_contains():
    assert contains([1, 2, 3], 3)
    assert not contains([1, 2, 3], "3")
    assert contains({"a": "x"}, "x")
    assert not contains([], None)


def test_every():
    assert every([2, 4, 6], is_even)
    assert not every([2, 3, 6], is_even)
    assert every([], is_even)
    assert every([1, "a", True])
    assert not every([1, 0])


def test_every_stops_calling_after_failure():
    calls = []

    def check(value):
        calls.append(value)
        return value < 2

    assert not every([1, 2, 3, 4], check)
    assert calls == [1, 2]


def test_some():
    assert some([1, 3, 4], is_even)
    assert not some([1, 3, 5], is_even)
    assert not some([], is_even)
    assert some([0, None, "x"])
    assert not some([0, None, ""])


def test_map_with_builtins_passes_value_only():
    assert map([" a ", "b "], str.strip) == ["a", "b"]
    assert map([1.4, 2.6], round) == [1, 3]
    assert filter(["x", "", "y"], str.isalpha) == ["x", "y"]
