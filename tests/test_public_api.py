import underbar as _


def test_namespace_exposes_operations():
    for name in _.__all__:
        assert hasattr(_, name), name


def test_operations_compose_through_namespace():
    stock = {"apples": 3, "pears": 0, "plums": 7}
    assert _.filter(stock, lambda count, fruit: count and fruit != "plums") == [3]
    assert _.extend({}, stock)["plums"] == 7
    assert _.flatten(_.zip([1, 2], [3])) == [1, 3, 2, None]
    assert _.chain(_.uniq([2, 1, 2])).sort_by(_.identity).value() == [1, 2]
