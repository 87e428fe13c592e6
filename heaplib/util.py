"""
Miscellaneous utilities.
"""

import heaplib.constants
import heaplib.ds.order


HEAP_OPTION_KEYS = {'capacity', 'comparator', 'reverse'}


def is_int(val):
    """
    Determine if value is castable as an integer.

    :param val: Value.

    :return: `True` if `val` is an integer and `False` otherwise.
    """
    try:
        int(val)
    except (TypeError, ValueError, OverflowError):
        return False

    return True


def as_bool(val, none_val=None):
    """
    Translate value as a boolean. If `val` is boolean, return `val`. If val is a string, `True` if lower-case string
    is "true", "1", "yes", "t", or "y". `False` if lower-case string is "false", "0", "no", "f", or "n". All other
    values throw a ValueError. If `val` is not bool or string, it is converted to a string and the rules above are
    applied.

    :param val: Value to interpret as a boolean.
    :param none_val: Return this value if val is `None`. If this value is also `None`, throw an error.

    :return: `True` or `False` (see above).
    """

    # Handle None
    if val is None:
        if none_val is None:
            raise ValueError('None value cannot be interpreted as a boolean')

        if not issubclass(none_val.__class__, bool):
            raise ValueError('as_bool() got a None value and a non-bool None-replacement value: {}'.format(str(none_val.__class__)))

        return none_val

    # Return if val is already boolean
    if issubclass(val.__class__, bool):
        return val

    # Interepret as bool
    val = str(val).lower()

    if val in {'true', '1', 'yes', 't', 'y'}:
        return True

    if val in {'false', '0', 'no', 'f', 'n'}:
        return False

    # Cannot interpret as bool
    raise ValueError('Cannot interpret as boolean value: {}'.format(val))


def get_heap_options(config=None):
    """
    Get keyword arguments for `heaplib.ds.max_heap.Heap` from a configuration dictionary.

    Recognized keys:
    * capacity: Initial storage size (integer or integer string, 0 or greater). Defaults to
        `heaplib.constants.DEFAULT_CAPACITY`.
    * comparator: Comparator function or `None` for natural order.
    * reverse: If true (see `as_bool()`), invert the comparator so the heap returns its smallest element first.

    :param config: Configuration dictionary or `None` for defaults.

    :return: A dictionary with keys "capacity" and "comparator".
    """

    if config is None:
        config = dict()

    if not isinstance(config, dict):
        raise ValueError(f'get_heap_options(): Argument config is not type dict: {type(config)}')

    unknown_keys = set(config.keys()) - HEAP_OPTION_KEYS

    if unknown_keys:
        raise ValueError('get_heap_options(): Unknown heap option(s): {}'.format(', '.join(sorted(str(key) for key in unknown_keys))))

    # Capacity
    capacity = config.get('capacity', None)

    if capacity is None:
        capacity = heaplib.constants.DEFAULT_CAPACITY

    if isinstance(capacity, bool) or not is_int(capacity) or (not isinstance(capacity, str) and int(capacity) != capacity):
        raise ValueError(f'get_heap_options(): Option capacity is not an integer: {capacity}')

    capacity = int(capacity)

    if capacity < 0:
        raise ValueError(f'get_heap_options(): Option capacity must not be negative: {capacity}')

    if capacity > heaplib.constants.MAX_ARRAY_SIZE:
        raise ValueError(f'get_heap_options(): Option capacity exceeds maximum size {heaplib.constants.MAX_ARRAY_SIZE}: {capacity}')

    # Comparator
    comparator = config.get('comparator', None)

    if comparator is not None and not callable(comparator):
        raise ValueError(f'get_heap_options(): Option comparator is not callable: {type(comparator)}')

    if as_bool(config.get('reverse', None), False):
        comparator = heaplib.ds.order.reverse_order(comparator)

    return {
        'capacity': capacity,
        'comparator': comparator
    }
