"""
Balance weighted items into a set number of partitions.

Implementation solves a partition problem by Largest Differencing Method (LDM) using the Karmarkar–Karp algorithm.
Partial partitions are kept on a max-heap ranked by the spread of their bin weights, and the two with the largest
spread are merged until one remains.
"""

import logging

import pandas as pd

import heaplib.ds.max_heap

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class WeightedItem:
    """
    An item label and its weight.
    """

    def __init__(self, label, weight):
        self.label = label
        self.weight = weight

    def __lt__(self, other):
        return self.weight < other.weight

    def __repr__(self):
        return f'{self.label}:{self.weight}'


class Partition:
    """
    One partition containing k bins (k is the number of partitions). Each bin is a list of WeightedItem objects. A
    collection of partitions is collapsed to one iteratively using merge(), and the final Partition's `bin_list`
    contains one list of items for each bin.
    """

    def __init__(self, bin_list):

        if len(bin_list) == 0:
            raise ValueError('Cannot create partition from an empty list')

        self.bin_list = sorted(bin_list, key=lambda items: sum([item.weight for item in items]), reverse=True)  # Heaviest bin first
        self.spread = sum([item.weight for item in self.bin_list[0]]) - sum([item.weight for item in self.bin_list[-1]])  # Largest difference among bin weights

    def merge(self, other):
        """
        Merge this partition with another and return a new partition object. The heaviest bin of one is joined with
        the lightest bin of the other.

        :param other: Other partition.

        :return: New partition object with `self` and `other` merged.
        """
        return Partition([
                items_l + items_r for items_l, items_r in zip(
                    self.bin_list, other.bin_list[::-1]
                )
            ])

    def __lt__(self, other):
        return self.spread < other.spread

    def __repr__(self):
        repr_str = '[{'

        repr_str += '}, {'.join(
            [
                ', '.join([str(item) for item in items]) for items in self.bin_list
            ]
        )

        repr_str += '}]'

        return repr_str


def partition(weight_series, partitions):
    """
    Split items evenly into a set number of partitions.

    :param weight_series: Pandas Series object with item labels as the index and weights as the values.
    :param partitions: Number of partitions to split items into.

    :return: A list (`partitions` elements long) where each element is a sorted tuple of item labels assigned to one
        partition.
    """

    # Check arguments
    if isinstance(partitions, bool) or not isinstance(partitions, int):
        raise ValueError(f'partition(): Argument partitions is not type int: {type(partitions)}')

    if partitions < 2:
        raise ValueError(f'partition(): Argument partitions must be 2 or greater: {partitions}')

    if weight_series is None:
        raise ValueError('partition(): Argument weight_series is None')

    if not isinstance(weight_series, pd.Series):
        raise ValueError(f'partition(): Argument weight_series is not type pd.Series: {type(weight_series)}')

    if weight_series.shape[0] == 0:
        return [()] * partitions

    # Construct a max-heap of initial Partition objects (one item per partition)
    partition_list = list()

    for label, weight in weight_series.items():
        bin_list = list()

        bin_list.append([WeightedItem(label, weight)])

        for i in range(partitions - 1):
            bin_list.append(list())

        partition_list.append(Partition(bin_list))

    heap = heaplib.ds.max_heap.heapify(partition_list)

    # Iteratively collapse partitions until there is one left
    while heap.size() > 1:
        merged = heap.extract_max().merge(heap.peek_max())
        heap.replace_top(merged)

    logger.debug('Partitioned %d items into %d bins (spread=%s)', weight_series.shape[0], partitions, heap.peek_max().spread)

    return [
        tuple(sorted([item.label for item in items])) for items in heap.peek_max().bin_list
    ]
