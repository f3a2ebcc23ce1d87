from collections.abc import Mapping
import logging
import typing

from .iterator import BidirIterator


T = typing.TypeVar('T')
T_co = typing.TypeVar('T_co', covariant=True)

logger = logging.getLogger(__name__)


class Indexable(typing.Protocol[T_co]):
    def __len__(self) -> int:
        pass

    def __getitem__(self, index: int) -> T_co:
        pass


def is_indexable(obj) -> bool:
    cls = type(obj)
    if isinstance(obj, Mapping):
        return False
    return hasattr(cls, '__len__') and hasattr(cls, '__getitem__')


class Cursor(BidirIterator[T]):
    """
    A bidirectional cursor over an indexable sequence.

    The cursor borrows the sequence: it never copies it or its elements, and the sequence must not be
    mutated while the cursor is in use. The position is -1 before the first element, otherwise the index
    of the element most recently yielded. ``next`` stops at the last element rather than moving past it,
    so reversing direction at either end resumes from exactly where traversal stopped.
    """

    _sequence: Indexable[T]
    _position: int

    def __init__(self, sequence: Indexable[T]):
        if not is_indexable(sequence):
            raise TypeError("Cursor requires an indexable sequence, got %s" % type(sequence).__name__)

        self._sequence = sequence
        self._position = -1

    def _length(self) -> int:
        length = len(self._sequence)
        if self._position >= length:
            logger.warning("Sequence shrank to %d elements under cursor at position %d - clamping",
                           length, self._position)
            self._position = length - 1
        return length

    def next(self) -> typing.Optional[T]:
        if self._position + 1 < self._length():
            self._position += 1
            return self._sequence[self._position]
        else:
            logger.debug("next() exhausted at position %d", self._position)
            return None

    def prev(self) -> typing.Optional[T]:
        self._length()
        if self._position > 0:
            self._position -= 1
            return self._sequence[self._position]
        else:
            logger.debug("prev() exhausted at position %d", self._position)
            self._position = -1
            return None

    def _effective_position(self) -> int:
        # where the next step would clamp to, without moving
        return min(self._position, len(self._sequence) - 1)

    def peek_next(self) -> typing.Optional[T]:
        if self.has_next:
            return self._sequence[self._effective_position() + 1]
        else:
            return None

    def peek_previous(self) -> typing.Optional[T]:
        if self.has_previous:
            return self._sequence[self._effective_position() - 1]
        else:
            return None

    def reset(self):
        self._position = -1

    @property
    def sequence(self) -> Indexable[T]:
        return self._sequence

    @property
    def position(self) -> int:
        return self._position

    @property
    def has_next(self) -> bool:
        return self._effective_position() + 1 < len(self._sequence)

    @property
    def has_previous(self) -> bool:
        return self._effective_position() > 0

    def __repr__(self):
        return f'{self.__class__.__name__}(position={self._position}, length={len(self._sequence)})'


class BidirIterable(typing.Generic[T]):
    """
    Mixin for sequence types that can produce cursors over themselves.
    """

    def bidir_iter(self) -> Cursor[T]:
        return Cursor(self)


def bidir_iter(sequence: Indexable[T]) -> Cursor[T]:
    return Cursor(sequence)
