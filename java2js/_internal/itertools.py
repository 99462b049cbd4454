import typing as t
from patina import Option, None_

Peekable_T = t.TypeVar("Peekable_T")


class Peekable(t.Generic[Peekable_T]):
    """An iterator with a single slot of lookahead."""

    def __init__(self, iterable: t.Iterable[Peekable_T]):
        self._it = iter(iterable)
        self._peeked: Option[Peekable_T] = None_()

    def next(self) -> Peekable_T:
        return self._peeked.take().unwrap_or_else(lambda: next(self._it))

    __next__ = next

    def __iter__(self):
        return self

    def peek(self) -> Option[Peekable_T]:
        if not self._peeked.is_some():
            try:
                self._peeked.replace(next(self._it))
            except StopIteration:
                pass
        return self._peeked.map(lambda v: v)
