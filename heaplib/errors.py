"""
Heap errors.

Every error is a `RuntimeError` through `HeapError` and also subclasses the closest built-in exception, so callers
catching `IndexError`, `TypeError`, etc. continue to work.
"""


class HeapError(RuntimeError):
    """
    Base class for heap errors.
    """
    pass


class EmptyHeapError(HeapError, IndexError):
    """
    Peek, extract, or replace on a heap with no elements.
    """
    pass


class InvalidIndexError(HeapError, ValueError):
    """
    Index arithmetic requested on an index that has no such relative (e.g. the parent of the root).
    """
    pass


class CapacityExceededError(HeapError, OverflowError):
    """
    Storage cannot grow past `heaplib.constants.MAX_ARRAY_SIZE`.
    """
    pass


class TypeMismatchError(HeapError, TypeError):
    """
    Elements have no natural ordering with each other and no comparator was given.
    """
    pass
