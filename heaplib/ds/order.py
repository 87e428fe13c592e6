"""
Comparison functions for heaps.

A comparator takes two elements, `a` and `b`, and returns a positive integer if `a` ranks above `b` (moves toward the
root of a max-heap), 0 if they rank equally, and a negative integer otherwise.
"""

from heaplib.errors import TypeMismatchError


def natural_order(a, b):
    """
    Compare two elements by their own ordering ("<" and ">").

    :param a: Element.
    :param b: Element.

    :return: 1 if `a > b`, -1 if `a < b`, and 0 otherwise.

    :raises TypeMismatchError: If `a` and `b` cannot be ordered against each other.
    """

    try:
        return (a > b) - (a < b)

    except TypeError as e:
        raise TypeMismatchError(
            f'Cannot compare elements of type {type(a).__name__} and {type(b).__name__} without a comparator: {e}'
        ) from e


def reverse_order(cmp=None):
    """
    Get a comparator that inverts another. A max-heap built with this comparator behaves as a min-heap.

    :param cmp: Comparator to invert. If `None`, invert natural order.

    :return: Comparator function.
    """

    if cmp is None:
        cmp = natural_order

    elif not callable(cmp):
        raise ValueError(f'reverse_order(): Argument cmp is not callable: {type(cmp)}')

    def reversed_cmp(a, b):
        return cmp(b, a)

    return reversed_cmp


def key_order(key, reverse=False):
    """
    Get a comparator that orders elements by a key function.

    :param key: Function called on each element; return values are compared by natural order.
    :param reverse: Invert the order (smallest key ranks highest).

    :return: Comparator function.
    """

    if not callable(key):
        raise ValueError(f'key_order(): Argument key is not callable: {type(key)}')

    if reverse:
        return lambda a, b: natural_order(key(b), key(a))

    return lambda a, b: natural_order(key(a), key(b))
