"""
Selection and sorting with heaps.
"""

import heaplib.ds.max_heap
import heaplib.ds.order


def nlargest(seq, k, key=None):
    """
    Get the `k` largest elements of a sequence. A heap of the `k` largest elements seen so far is kept with the
    smallest of them at the root, and each new element larger than the root replaces it.

    :param seq: Iterable of elements.
    :param k: Number of elements to return.
    :param key: Function to get the value elements are compared by or `None` to compare elements directly.

    :return: A list of at most `k` elements, largest first.
    """

    return _select(seq, k, key, False, 'nlargest')


def nsmallest(seq, k, key=None):
    """
    Get the `k` smallest elements of a sequence.

    :param seq: Iterable of elements.
    :param k: Number of elements to return.
    :param key: Function to get the value elements are compared by or `None` to compare elements directly.

    :return: A list of at most `k` elements, smallest first.
    """

    return _select(seq, k, key, True, 'nsmallest')


def heap_sort(seq, comparator=None, reverse=False):
    """
    Sort a sequence with a heap.

    :param seq: Iterable of elements.
    :param comparator: Comparator function or `None` for natural order.
    :param reverse: Sort from largest to smallest.

    :return: A new sorted list.
    """

    if not reverse:
        comparator = heaplib.ds.order.reverse_order(comparator)

    return list(heaplib.ds.max_heap.heapify(seq, comparator).drain())


def _select(seq, k, key, smallest, func_name):

    if isinstance(k, bool) or not isinstance(k, int):
        raise ValueError(f'{func_name}(): Argument k is not type int: {type(k)}')

    if k < 0:
        raise ValueError(f'{func_name}(): Argument k must not be negative: {k}')

    if k == 0:
        return []

    if key is None:
        key = lambda val: val

    # Root is the element that would be dropped first: the smallest kept for nlargest, the largest for nsmallest
    heap = heaplib.ds.max_heap.Heap(k, heaplib.ds.order.key_order(key, reverse=not smallest))
    drop_cmp = heaplib.ds.order.key_order(key, reverse=smallest)

    for element in seq:
        if heap.size() < k:
            heap.add(element)
        elif drop_cmp(element, heap.peek_max()) > 0:
            heap.replace_top(element)

    return list(heap.drain())[::-1]
