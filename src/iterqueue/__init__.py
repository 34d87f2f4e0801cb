"""Lazy k-way merge of sorted sequences driven by a heap of cursors.

>>> list(merge([7, 5, 2], [6, 3, 1], [9, 4], [8]))
[9, 8, 7, 6, 5, 4, 3, 2, 1]
>>> list(merge([1, 4], [2, 3], order=Order.Ascending))
[1, 2, 3, 4]
"""

from .cursor import CursorConsumedError, SequenceCursor
from .order import Order, SupportsLessThan
from .queue import merge, MergeQueue

__all__ = [
	'CursorConsumedError',
	'merge',
	'MergeQueue',
	'Order',
	'SequenceCursor',
	'SupportsLessThan',
]
