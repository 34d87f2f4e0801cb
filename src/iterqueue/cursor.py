from typing import Any, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from .order import Order, sort_key, SortKey

_T = TypeVar('_T')

_exhausted = object()


class CursorConsumedError(RuntimeError):
	"""Raised when a cursor is used again after advance() has been called.
	"""
	pass


class SequenceCursor(Generic[_T]):
	"""SequenceCursor holds the pulled-ahead head element of a sequence.

	Holding the next element eagerly allows comparing several lazy sequences
	without consuming them. Cursors compare by their head (mapped through the
	sort key) only, the remainder never takes part in a comparison. `a < b`
	means that a's head is more extremal than b's head in the cursor's order,
	so the smallest cursor in a heapq heap is always the one to emit next.

	A cursor is advanced exactly once: advance() transfers the remainder to
	the successor cursor and invalidates this one.
	"""

	__slots__ = ('_head', '_rank', '_remainder', '_sort_key', '_consumed')

	def __init__(self, head: _T, remainder: Iterator[_T], sort_key: SortKey) -> None:
		self._head: _T = head
		self._rank: Any = sort_key(head)
		self._remainder: Iterator[_T] = remainder
		self._sort_key: SortKey = sort_key
		self._consumed: bool = False

	@classmethod
	def try_new(
		cls,
		sequence: Iterable[_T],
		key: Optional[SortKey] = None,
		order: Order = Order.Descending,
	) -> Optional['SequenceCursor[_T]']:
		"""Returns a cursor over sequence or None if sequence is empty.

		The first element is pulled immediately. An empty sequence is
		discarded.
		"""
		return cls._pull(iter(sequence), sort_key(order, key))

	@classmethod
	def _pull(cls, it: Iterator[_T], sort_key: SortKey) -> Optional['SequenceCursor[_T]']:
		head = next(it, _exhausted)
		if head is _exhausted:
			return None
		return cls(head, it, sort_key) # type: ignore[arg-type]

	@property
	def head(self) -> _T:
		self._ensure_valid()
		return self._head

	@property
	def remainder(self) -> Iterator[_T]:
		self._ensure_valid()
		return self._remainder

	@property
	def consumed(self) -> bool:
		return self._consumed

	def advance(self) -> Tuple[_T, Optional['SequenceCursor[_T]']]:
		"""Returns the head and the cursor holding the next element, if any.

		The cursor must not be used afterwards.
		"""
		self._ensure_valid()
		self._consumed = True

		head, it = self._head, self._remainder
		del self._remainder

		return head, type(self)._pull(it, self._sort_key)

	def _ensure_valid(self) -> None:
		if self._consumed:
			raise CursorConsumedError('cursor has already been advanced')

	def __lt__(self, other: 'SequenceCursor[Any]') -> bool:
		if not isinstance(other, SequenceCursor):
			return NotImplemented
		return bool(self._rank < other._rank)

	def __gt__(self, other: 'SequenceCursor[Any]') -> bool:
		if not isinstance(other, SequenceCursor):
			return NotImplemented
		return bool(other._rank < self._rank)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, SequenceCursor):
			return NotImplemented
		return bool(self._rank == other._rank)

	__hash__ = None # type: ignore[assignment]

	def __repr__(self) -> str:
		if self._consumed:
			return f'{type(self).__name__}(<consumed>)'
		return f'{type(self).__name__}(head={self._head!r})'
