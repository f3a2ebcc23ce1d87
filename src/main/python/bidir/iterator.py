from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar('T')
R = TypeVar('R')


class BidirIterator(ABC, Generic[T]):
    @abstractmethod
    def next(self) -> Optional[T]:
        """
        :return: The next element, or None if there are no more elements in this direction.
        """
        raise NotImplementedError()

    @abstractmethod
    def prev(self) -> Optional[T]:
        """
        :return: The previous element, or None if there are no more elements in this direction.
        """
        raise NotImplementedError()

    def forward(self) -> Forward[T]:
        """
        :return: A regular iterator that moves this one forward with each step.
        """
        return Forward(self)

    def backward(self) -> Backward[T]:
        """
        :return: A regular iterator that moves this one backward with each step.
        """
        return Backward(self)

    def filter(self, predicate: Callable[[T], bool]) -> Filter[T]:
        """
        :param predicate: Called with each element; elements for which it is falsy are skipped.
        :return: A bidirectional iterator over the elements accepted by the predicate.
        """
        return Filter(self, predicate)

    def map(self, func: Callable[[T], R]) -> Map[T, R]:
        """
        :param func: Applied to every element produced in either direction.
        :return: A bidirectional iterator over the mapped elements.
        """
        return Map(self, func)


class Forward(Generic[T]):
    def __init__(self, source: BidirIterator[T]):
        self.source = source

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        item = self.source.next()
        if item is None:
            raise StopIteration
        return item


class Backward(Generic[T]):
    def __init__(self, source: BidirIterator[T]):
        self.source = source

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        item = self.source.prev()
        if item is None:
            raise StopIteration
        return item


class Filter(BidirIterator[T]):
    def __init__(self, source: BidirIterator[T], predicate: Callable[[T], bool]):
        if not callable(predicate):
            raise TypeError("Filter predicate must be callable, got %s" % type(predicate).__name__)

        self.source = source
        self.predicate = predicate

    def next(self) -> Optional[T]:
        skipped = 0
        item = self.source.next()
        while item is not None:
            if self.predicate(item):
                return item
            skipped += 1
            item = self.source.next()

        # rewind over the trailing rejected elements so the source is pinned
        # on the last accepted one, as a cursor is pinned on its last element
        for _ in range(skipped):
            self.source.prev()

        return None

    def prev(self) -> Optional[T]:
        item = self.source.prev()
        while item is not None:
            if self.predicate(item):
                return item
            item = self.source.prev()

        return None


class Map(BidirIterator[R], Generic[T, R]):
    def __init__(self, source: BidirIterator[T], func: Callable[[T], R]):
        if not callable(func):
            raise TypeError("Map function must be callable, got %s" % type(func).__name__)

        self.source = source
        self.func = func

    def _apply(self, item: Optional[T]) -> Optional[R]:
        # None marks exhaustion and is never passed to func
        if item is None:
            return None
        return self.func(item)

    def next(self) -> Optional[R]:
        return self._apply(self.source.next())

    def prev(self) -> Optional[R]:
        return self._apply(self.source.prev())
