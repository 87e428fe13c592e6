"""
Max-heap implementation.

Elements are stored in level order in a fixed-size list that grows when full (root at index 0, children of index `i`
at `2i + 1` and `2i + 2`). Elements are ordered by a comparator function (see `heaplib.ds.order`) or by their own
ordering ("<" and ">") if no comparator is given.
"""

import logging

import pandas as pd

import heaplib.constants

from heaplib.errors import EmptyHeapError, InvalidIndexError, CapacityExceededError
from heaplib.ds.order import natural_order

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def parent_index(i):
    """
    Get the index of a node's parent.

    :param i: Node index.

    :return: Parent index.

    :raises InvalidIndexError: If `i` is the root (0) or negative.
    """

    if i <= 0:
        raise InvalidIndexError(f'Node at index {i} has no parent')

    return (i - 1) // 2


def left_child_index(i):
    return 2 * i + 1


def right_child_index(i):
    return 2 * i + 2


def new_capacity(old_capacity):
    """
    Get the storage size to grow to when storage of size `old_capacity` is full. Small stores double, stores of
    `GROWTH_DOUBLE_LIMIT` or more grow by half (rounded down). An empty store grows to 1.

    :param old_capacity: Current storage size.

    :return: New storage size.

    :raises CapacityExceededError: If the new size would exceed `heaplib.constants.MAX_ARRAY_SIZE`.
    """

    if old_capacity == 0:
        return 1

    if old_capacity < heaplib.constants.GROWTH_DOUBLE_LIMIT:
        capacity = old_capacity + old_capacity
    else:
        capacity = old_capacity + old_capacity // 2

    if capacity > heaplib.constants.MAX_ARRAY_SIZE:
        raise CapacityExceededError(
            f'Cannot grow heap storage from {old_capacity} to {capacity}: '
            f'Exceeds maximum size {heaplib.constants.MAX_ARRAY_SIZE}'
        )

    return capacity


class Heap:
    """
    Array-backed binary max-heap.

    The element that ranks highest under the heap's comparator is always at the root. A min-heap is a max-heap with
    an inverted comparator (`heaplib.ds.order.reverse_order()`).

    Not thread-safe. Callers sharing a heap between threads must hold a lock around every call.
    """

    def __init__(self, capacity=heaplib.constants.DEFAULT_CAPACITY, comparator=None):
        """
        Create an empty heap.

        :param capacity: Initial number of storage slots. May be 0 (storage is allocated on the first `add()`).
        :param comparator: Comparator function `(a, b) -> int` or `None` to use the natural order of elements.
        """

        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f'Heap(): Argument capacity is not type int: {type(capacity)}')

        if capacity < 0:
            raise ValueError(f'Heap(): Argument capacity must not be negative: {capacity}')

        if capacity > heaplib.constants.MAX_ARRAY_SIZE:
            raise ValueError(
                f'Heap(): Argument capacity exceeds maximum size {heaplib.constants.MAX_ARRAY_SIZE}: {capacity}'
            )

        if comparator is not None and not callable(comparator):
            raise ValueError(f'Heap(): Argument comparator is not callable: {type(comparator)}')

        self._data = [None] * capacity
        self._size = 0
        self._cmp = comparator if comparator is not None else natural_order

    @classmethod
    def from_seq(cls, seq, comparator=None):
        """
        Build a heap from an unordered sequence in linear time (heapify). Elements are copied, `seq` is not modified.

        :param seq: Iterable of elements.
        :param comparator: Comparator function or `None` for natural order.

        :return: A new heap containing all elements of `seq`.
        """

        data = list(seq)

        heap = cls(len(data), comparator)
        heap._data = data
        heap._size = len(data)

        for i in range((heap._size - 2) // 2, -1, -1):
            heap._sift_down(i)

        logger.debug('Heapified %d elements', heap._size)

        return heap

    @property
    def capacity(self):
        return len(self._data)

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def __len__(self):
        return self._size

    def __iter__(self):
        return iter(self.to_list())

    def add(self, element):
        """
        Add an element to the heap.

        :param element: Element to add.

        :raises CapacityExceededError: If storage is full and cannot grow. The heap is not changed.
        :raises TypeMismatchError: If `element` cannot be compared with elements in the heap. The heap is not
            changed.
        """

        if self._size == len(self._data):
            self._grow()

        self._data[self._size] = element
        self._size += 1

        swaps = list()

        try:
            self._sift_up(self._size - 1, swaps)

        except Exception:
            self._undo(swaps)
            self._size -= 1
            self._data[self._size] = None
            raise

    def peek_max(self):
        """
        Get the highest-ranked element without removing it.

        :return: Element at the root.

        :raises EmptyHeapError: If the heap is empty.
        """

        if self._size == 0:
            raise EmptyHeapError('Cannot peek empty heap')

        return self._data[0]

    def extract_max(self):
        """
        Remove and return the highest-ranked element.

        :return: Element that was at the root.

        :raises EmptyHeapError: If the heap is empty.
        :raises TypeMismatchError: If elements cannot be compared while restoring the heap. The heap is not changed.
        """

        if self._size == 0:
            raise EmptyHeapError('Cannot extract from empty heap')

        result = self._data[0]
        last = self._size - 1

        self._size = last
        self._data[0] = self._data[last]
        self._data[last] = None

        swaps = list()

        try:
            self._sift_down(0, swaps)

        except Exception:
            self._undo(swaps)
            self._data[last] = self._data[0]
            self._data[0] = result
            self._size = last + 1
            raise

        return result

    def replace_top(self, value):
        """
        Replace the highest-ranked element with `value` and return the element that was replaced. Same result as
        `extract_max()` followed by `add(value)`, but with one sift instead of two.

        :param value: New element.

        :return: Element that was at the root.

        :raises EmptyHeapError: If the heap is empty.
        :raises TypeMismatchError: If `value` cannot be compared with elements in the heap. The heap is not changed.
        """

        if self._size == 0:
            raise EmptyHeapError('Cannot replace top of empty heap')

        result = self._data[0]
        self._data[0] = value

        swaps = list()

        try:
            self._sift_down(0, swaps)

        except Exception:
            self._undo(swaps)
            self._data[0] = result
            raise

        return result

    def drain(self):
        """
        Remove elements from the heap highest-ranked first until it is empty.

        :return: Generator of elements in non-increasing order.
        """

        while self._size > 0:
            yield self.extract_max()

    def to_list(self):
        return self._data[:self._size]

    def to_df(self):
        """
        Get a table of heap elements in storage order.

        Columns:
        * INDEX: Storage index.
        * LEVEL: Depth in the tree (root is 0).
        * PARENT: Index of the parent node (-1 for the root).
        * VALUE: Element.

        :return: A Pandas DataFrame with one row per element.
        """

        return pd.DataFrame(
            [
                (i, (i + 1).bit_length() - 1, parent_index(i) if i > 0 else -1, self._data[i])
                    for i in range(self._size)
            ],
            columns=['INDEX', 'LEVEL', 'PARENT', 'VALUE']
        )

    def check_heap(self):
        """
        Check heap structure. Throws an exception if any element ranks below one of its children.

        :raises RuntimeError: If any child element ranks above its parent.
        """

        for i in range(self._size):
            for child in (left_child_index(i), right_child_index(i)):
                if child < self._size and self._cmp(self._data[i], self._data[child]) < 0:
                    raise RuntimeError(
                        f'Value out of order at index parent {self._data[i]} (index={i}) '
                        f'and child {self._data[child]} (index={child})'
                    )

    def _grow(self):
        capacity = new_capacity(len(self._data))

        logger.debug('Growing heap storage from %d to %d', len(self._data), capacity)

        self._data = self._data[:self._size] + [None] * (capacity - self._size)

    def _swap(self, i, j):
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _undo(self, swaps):
        for i, j in reversed(swaps):
            self._swap(i, j)

    def _sift_up(self, i, swaps=None):
        while i > 0:
            parent = parent_index(i)

            if self._cmp(self._data[i], self._data[parent]) <= 0:
                break

            self._swap(i, parent)

            if swaps is not None:
                swaps.append((i, parent))

            i = parent

    def _sift_down(self, i, swaps=None):
        while left_child_index(i) < self._size:
            j = left_child_index(i)

            # Pick the larger child
            if j + 1 < self._size and self._cmp(self._data[j + 1], self._data[j]) > 0:
                j += 1

            if self._cmp(self._data[i], self._data[j]) >= 0:
                break

            self._swap(i, j)

            if swaps is not None:
                swaps.append((i, j))

            i = j

    def __str__(self):
        return ' '.join(str(element) for element in self._data[:self._size])

    def __repr__(self):
        return f'Heap(size={self._size}, capacity={len(self._data)})'


def heapify(seq, comparator=None):
    """
    Create a max-heap from an unsorted sequence.

    :param seq: Elements.
    :param comparator: Comparator function or `None` for natural order.

    :return: A new `Heap`.
    """
    return Heap.from_seq(seq, comparator)
