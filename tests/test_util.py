#!/usr/bin/env python
#
# Description: tests heap option parsing.

import pytest

import heaplib.constants
from heaplib.ds.max_heap import Heap
from heaplib.ds.order import natural_order
from heaplib.util import is_int, as_bool, get_heap_options


def test_is_int():
    assert is_int(3)
    assert is_int('12')
    assert not is_int('1.5')
    assert not is_int('abc')
    assert not is_int(None)


def test_as_bool():
    for val in (True, 'true', 'YES', '1', 't', 'y', 1):
        assert as_bool(val) is True

    for val in (False, 'false', 'No', '0', 'f', 'n', 0):
        assert as_bool(val) is False

    assert as_bool(None, False) is False

    with pytest.raises(ValueError):
        as_bool(None)

    with pytest.raises(ValueError):
        as_bool(None, 'no')

    with pytest.raises(ValueError):
        as_bool('maybe')


def test_default_options():
    options = get_heap_options()
    assert options == {'capacity': heaplib.constants.DEFAULT_CAPACITY, 'comparator': None}

    assert get_heap_options({}) == options


def test_capacity_option():
    assert get_heap_options({'capacity': 0})['capacity'] == 0
    assert get_heap_options({'capacity': '32'})['capacity'] == 32

    for capacity in (-1, '-4', 'ten', 2.5, True):
        with pytest.raises(ValueError):
            get_heap_options({'capacity': capacity})


def test_comparator_option():
    cmp = lambda a, b: len(a) - len(b)
    assert get_heap_options({'comparator': cmp})['comparator'] is cmp

    with pytest.raises(ValueError):
        get_heap_options({'comparator': 'len'})


def test_reverse_option():
    options = get_heap_options({'capacity': 4, 'reverse': 'true'})

    heap = Heap(**options)
    for val in (5, 1, 3):
        heap.add(val)

    assert heap.peek_max() == 1
    assert heap.capacity == 4

    options = get_heap_options({'reverse': 'no'})
    assert options['comparator'] is None

    cmp = lambda a, b: natural_order(len(a), len(b))
    heap = Heap(**get_heap_options({'comparator': cmp, 'reverse': True}))
    for word in ('ccc', 'a', 'bb'):
        heap.add(word)

    assert heap.peek_max() == 'a'


def test_bad_options():
    with pytest.raises(ValueError):
        get_heap_options({'capacity': 4, 'size': 4})

    with pytest.raises(ValueError):
        get_heap_options([('capacity', 4)])


def test_capacity_option_too_large():
    for capacity in (10**400, heaplib.constants.MAX_ARRAY_SIZE + 1, float('inf')):
        with pytest.raises(ValueError):
            get_heap_options({'capacity': capacity})

    assert get_heap_options({'capacity': 2.0})['capacity'] == 2
