#!/usr/bin/env python
#
# Description: tests balanced partitioning on a max-heap.

import pytest
import pandas as pd

from heaplib.partition import partition, Partition, WeightedItem


def test_partition_two():
    weight_series = pd.Series({'a': 10, 'b': 7, 'c': 6, 'd': 5, 'e': 4})

    result = partition(weight_series, 2)

    assert len(result) == 2
    assert set(result) == {('a', 'c'), ('b', 'd', 'e')}


def test_partition_covers_all_items():
    weight_series = pd.Series({f'item{i}': (i * 37) % 101 + 1 for i in range(40)})

    result = partition(weight_series, 4)

    assert len(result) == 4
    labels = [label for part in result for label in part]
    assert sorted(labels) == sorted(weight_series.index)

    # Bins are close in weight
    weights = [weight_series[list(part)].sum() for part in result]
    assert max(weights) - min(weights) <= weight_series.max()


def test_partition_fewer_items_than_bins():
    result = partition(pd.Series({'x': 5, 'y': 3}), 3)

    assert len(result) == 3
    assert sorted(result) == [(), ('x',), ('y',)]


def test_partition_empty():
    assert partition(pd.Series(dtype=int), 3) == [(), (), ()]


def test_partition_bad_args():
    weight_series = pd.Series({'a': 1})

    with pytest.raises(ValueError):
        partition(weight_series, 1)

    with pytest.raises(ValueError):
        partition(weight_series, '2')

    with pytest.raises(ValueError):
        partition(None, 2)

    with pytest.raises(ValueError):
        partition({'a': 1}, 2)


def test_partition_merge():
    left = Partition([[WeightedItem('a', 8)], []])
    right = Partition([[WeightedItem('b', 5)], []])

    assert left.spread == 8
    assert right < left

    merged = left.merge(right)
    assert merged.spread == 3
    assert repr(merged) == '[{a:8}, {b:5}]'

    with pytest.raises(ValueError):
        Partition([])
