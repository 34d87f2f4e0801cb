from dataclasses import dataclass, field
import heapq
import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from .cursor import SequenceCursor
from .order import Order, SortKey
from .params import EnumField, parse_user_args

_T = TypeVar('_T')
_D = TypeVar('_D')

LOGGER = logging.getLogger(__name__)


class MergeQueue(Generic[_T]):
	"""MergeQueue lazily merges sorted sequences into one sorted sequence.

	The queue keeps one SequenceCursor per live input in a heap keyed by the
	cursors' heads. Each step pops the cursor with the extremal head, emits
	that head and pushes the cursor's successor back, if the input has more
	elements. A step costs O(log k) with k being the number of live inputs.

	The orientation is fixed per queue. With Order.Descending (the default)
	the queue is a max-heap and every input must be sorted from largest to
	smallest; with Order.Ascending it is a min-heap and the inputs must be
	sorted from smallest to largest. Inputs are not checked: unsorted inputs
	silently produce unsorted output. Equal elements are all emitted. Among
	heads which compare equal any one may be emitted first, the order of
	ties is not related to the order of the inputs.

	The queue is an iterator. Once all inputs are exhausted next() raises
	StopIteration and keeps doing so on every subsequent call.
	"""
	@dataclass
	class Configuration(object):
		order: Order = field(init=True, default=Order.Descending)

		@classmethod
		def from_user_args(cls, user_args: str) -> 'MergeQueue.Configuration':
			inst = cls()
			parse_user_args(user_args, inst, [
				EnumField('order', Order),
			])
			return inst

	def __init__(
		self,
		sequences: Iterable[Iterable[_T]] = (),
		key: Optional[SortKey] = None,
		order: Order = Order.Descending,
	) -> None:
		self._key: Optional[SortKey] = key
		self._order: Order = order

		self._heap: List[SequenceCursor[_T]] = []
		inputs = 0

		for sequence in sequences:
			inputs += 1
			cursor = SequenceCursor.try_new(sequence, key=key, order=order)
			if cursor is not None:
				self._heap.append(cursor)

		heapq.heapify(self._heap)

		LOGGER.debug(
			'Built %s merge queue from %s sequences, %s non-empty',
			order.name.lower(), inputs, len(self._heap),
		)

	@classmethod
	def from_sequences(
		cls,
		sequences: Iterable[Iterable[_T]],
		key: Optional[SortKey] = None,
		order: Order = Order.Descending,
	) -> 'MergeQueue[_T]':
		return cls(sequences, key=key, order=order)

	@classmethod
	def from_configuration(
		cls,
		sequences: Iterable[Iterable[_T]],
		configuration: 'MergeQueue.Configuration',
		key: Optional[SortKey] = None,
	) -> 'MergeQueue[_T]':
		return cls(sequences, key=key, order=configuration.order)

	@property
	def order(self) -> Order:
		return self._order

	@property
	def key(self) -> Optional[SortKey]:
		return self._key

	@property
	def live_count(self) -> int:
		"""Number of inputs which still have elements, i.e. cursors in the heap.
		"""
		return len(self._heap)

	def __bool__(self) -> bool:
		return len(self._heap) > 0

	def __iter__(self) -> Iterator[_T]:
		return self

	def __next__(self) -> _T:
		heap = self._heap
		if not heap:
			raise StopIteration

		top = heap[0]
		try:
			value, successor = top.advance()
		except BaseException:
			# top is consumed and its input is unusable, also on interrupts
			heapq.heappop(heap)
			raise

		if successor is None:
			heapq.heappop(heap)
			if not heap:
				LOGGER.debug('Merge queue exhausted')
		else:
			heapq.heapreplace(heap, successor)

		return value

	def produce_next(self, default: Optional[_D] = None) -> Union[_T, Optional[_D]]:
		"""Returns the next value of the merge or default if exhausted.

		Use next() instead if None may be an element of the inputs.
		"""
		try:
			return next(self)
		except StopIteration:
			return default

	def peek(self, default: Optional[_D] = None) -> Union[_T, Optional[_D]]:
		"""Returns the value the next call to next() would produce.

		Returns default if the queue is exhausted. The queue is not modified.
		"""
		if not self._heap:
			return default
		return self._heap[0].head

	def __repr__(self) -> str:
		return f'{type(self).__name__}(order={self._order.name}, live_count={len(self._heap)})'


def merge(
	*sequences: Iterable[_T],
	key: Optional[SortKey] = None,
	order: Order = Order.Descending,
) -> MergeQueue[_T]:
	"""Merge sorted sequences, keeping only one element buffered per sequence.

	Shorthand for MergeQueue.from_sequences(sequences, key, order).
	"""
	return MergeQueue.from_sequences(sequences, key=key, order=order)
