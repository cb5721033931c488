import random
from underbar.functional.chain import Chain, chain


def test_chain_composes_operations():
    people = [
        {"name": "curly", "age": 25},
        {"name": "moe", "age": 21},
        {"name": "larry", "age": 23},
    ]
    youngest = chain(people).sort_by("age").pluck("name").first().value()

    assert youngest == "moe"


def test_chain_is_lazy():
    calls = []

    def track(value):
        calls.append(value)
        return value * 2

    pending = chain([1, 2, 3]).map(track)
    assert calls == []

    assert pending.value() == [2, 4, 6]
    assert calls == [1, 2, 3]


def test_chain_does_not_mutate_source():
    data = [[3, 1], [2]]
    result = chain(data).flatten().shuffle(random.Random(0)).sort_by(lambda n: n).value()

    assert result == [1, 2, 3]
    assert data == [[3, 1], [2]]


def test_chain_branches_independently():
    base = chain([1, 2, 3, 4])
    evens = base.filter(lambda n: n % 2 == 0)
    odds = base.reject(lambda n: n % 2 == 0)

    assert evens.value() == [2, 4]
    assert odds.value() == [1, 3]
    assert base.value() == [1, 2, 3, 4]


def test_chain_terminal_scalars():
    assert chain([1, 2, 3]).reduce(lambda acc, n: acc + n, 10).value() == 16
    assert chain([1, 2, 3]).reduce(lambda acc, n: acc + n).value() == 6
    assert chain([1, 2]).contains(2).value() is True
    assert chain([1, 0]).every().value() is False
    assert chain([0, 1]).some().value() is True


def test_chain_set_operations():
    result = (
        chain([1, 2, 2, 3, 4])
        .difference([4])
        .uniq()
        .intersection([2, 3, 9])
        .zip(["b", "c"])
        .value()
    )
    assert result == [(2, "b"), (3, "c")]


def test_chain_invoke_and_last():
    assert chain(["a", "b", "c"]).invoke("upper").last(2).value() == ["B", "C"]


def test_chain_repr_lists_steps():
    wrapped = chain([1]).map(str).uniq()
    assert isinstance(wrapped, Chain)
    assert repr(wrapped) == "Chain([1], steps=[map, uniq])"
