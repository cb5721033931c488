"""Fluent, lazily evaluated wrapper around the collection operations.

Example:
    >>> people = [{"name": "moe", "age": 40}, {"name": "larry", "age": 50}]
    >>> chain(people).sort_by("age").pluck("name").first().value()
    'moe'
"""

from typing import Any, Callable, Tuple

from underbar.functional import advanced, collections

__all__ = ["Chain", "chain"]

Step = Tuple[Callable[..., Any], Tuple[Any, ...], dict]


class Chain:
    """A value plus the operations still to be applied to it.

    Every method records one more step and returns a new ``Chain``; nothing
    runs until :meth:`value` is called. The wrapped value is never modified, so
    a chain can be evaluated, extended or branched any number of times.
    """

    __slots__ = ("_source", "_steps")

    def __init__(self, source: Any, steps: Tuple[Step, ...] = ()):
        self._source = source
        self._steps = steps

    def _then(self, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> "Chain":
        return Chain(self._source, self._steps + ((operation, args, kwargs),))

    def value(self) -> Any:
        """Run the recorded steps and return the plain result."""
        current = self._source
        for operation, args, kwargs in self._steps:
            current = operation(current, *args, **kwargs)
        return current

    def __repr__(self) -> str:
        names = ", ".join(operation.__name__ for operation, _, _ in self._steps)
        return f"Chain({self._source!r}, steps=[{names}])"

    def map(self, transform):
        return self._then(collections.map, transform)

    def filter(self, predicate):
        return self._then(collections.filter, predicate)

    def reject(self, predicate):
        return self._then(collections.reject, predicate)

    def uniq(self):
        return self._then(collections.uniq)

    def pluck(self, property_name):
        return self._then(collections.pluck, property_name)

    def invoke(self, method, args=()):
        return self._then(collections.invoke, method, args)

    def reduce(self, combine, *initial):
        return self._then(collections.reduce, combine, *initial)

    def contains(self, target):
        return self._then(collections.contains, target)

    def every(self, predicate=collections.identity):
        return self._then(collections.every, predicate)

    def some(self, predicate=collections.identity):
        return self._then(collections.some, predicate)

    def first(self, n=None):
        return self._then(collections.first, n)

    def last(self, n=None):
        return self._then(collections.last, n)

    def shuffle(self, rng=None):
        return self._then(advanced.shuffle, rng)

    def sort_by(self, criterion):
        return self._then(advanced.sort_by, criterion)

    def zip(self, *others):
        return self._then(advanced.zip, *others)

    def flatten(self, shallow=False):
        return self._then(advanced.flatten, shallow)

    def intersection(self, *others):
        return self._then(advanced.intersection, *others)

    def difference(self, *others):
        return self._then(advanced.difference, *others)


def chain(value: Any) -> Chain:
    """Wrap ``value`` for fluent composition; call ``.value()`` to unwrap."""
    return Chain(value)
