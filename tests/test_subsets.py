# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

import math

import pytest

from lagrange_consensus.subsets import batched_subsets, count_subsets, iter_subsets


@pytest.mark.parametrize("n", range(0, 11))
def test_all_combinations_once(n):
    for k in range(1, n + 1):
        subsets = list(iter_subsets(n, k))
        assert len(subsets) == math.comb(n, k) == count_subsets(n, k)
        assert len(set(subsets)) == len(subsets)
        for subset in subsets:
            assert len(subset) == k
            assert list(subset) == sorted(set(subset))
            assert all(0 <= i < n for i in subset)


def test_lexicographic_and_restartable():
    first = list(iter_subsets(4, 2))
    assert first == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    assert list(iter_subsets(4, 2)) == first


def test_more_than_available_yields_nothing():
    assert list(iter_subsets(2, 3)) == []
    assert count_subsets(2, 3) == 0


def test_negative_arguments_rejected():
    with pytest.raises(ValueError):
        iter_subsets(-1, 1)
    with pytest.raises(ValueError):
        count_subsets(3, -1)


def test_batches_cover_enumeration_in_order():
    batches = list(batched_subsets(5, 3, 4))
    assert [start for start, _ in batches] == [0, 4, 8]
    flat = [subset for _, batch in batches for subset in batch]
    assert flat == list(iter_subsets(5, 3))
    with pytest.raises(ValueError):
        list(batched_subsets(5, 3, 0))
