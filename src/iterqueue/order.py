from enum import auto, Enum
from typing import Any, Callable, Optional
from typing_extensions import Protocol


class SupportsLessThan(Protocol):
	def __lt__(self, other: Any) -> bool:
		pass


SortKey = Callable[[Any], Any]


class Order(Enum):
	"""Orientation of a merge.

	Descending - The largest head is extremal, the queue behaves as a
	max-heap and yields values from largest to smallest.

	Ascending - The smallest head is extremal, the queue behaves as a
	min-heap and yields values from smallest to largest.
	"""
	Ascending = auto()
	Descending = auto()


class _Reversed(object):
	__slots__ = ('value',)

	def __init__(self, value: SupportsLessThan) -> None:
		self.value: SupportsLessThan = value

	def __lt__(self, other: '_Reversed') -> bool:
		return other.value < self.value

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, _Reversed):
			return NotImplemented
		return bool(self.value == other.value)

	def __repr__(self) -> str:
		return f'_Reversed({self.value!r})'


def sort_key(order: Order, key: Optional[SortKey] = None) -> SortKey:
	"""Returns the function mapping a head value onto what the heap compares.

	The heap is always a min-heap, so for Order.Descending the result of key
	is wrapped in an object inverting `<`. This works for any totally ordered
	type, not just for numbers which could simply be negated.
	"""
	if order is Order.Ascending:
		if key is None:
			return _identity
		return key
	elif order is Order.Descending:
		if key is None:
			return _Reversed
		k: SortKey = key
		return lambda value: _Reversed(k(value))
	else:
		raise ValueError(f'Unknown order {order!r}')

def _identity(value: Any) -> Any:
	return value
