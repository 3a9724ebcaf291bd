"""Nearest-rank percentile helpers."""
from decimal import Decimal

import pytest

from support_ops.shared.domain import (
    as_number,
    nearest_rank,
    nearest_rank_index,
)


def test_p95_of_five_values_is_the_largest():
    assert nearest_rank([10, 20, 30, 40, 50], 95) == 50


def test_unsorted_input_is_sorted_first():
    assert nearest_rank([50, 10, 40, 20, 30], 50) == 30


def test_empty_is_none():
    assert nearest_rank([], 95) is None


@pytest.mark.parametrize(
    "count,percent,expected",
    [
        (1, 95, 0),
        (20, 95, 18),   # rank 19 exactly, no float drift
        (21, 95, 19),   # ceil(19.95) = 20
        (100, 95, 94),
        (10, 100, 9),
    ],
)
def test_nearest_rank_index(count, percent, expected):
    assert nearest_rank_index(count, percent) == expected


@pytest.mark.parametrize("count,percent", [(0, 95), (5, 0), (5, 101)])
def test_nearest_rank_index_rejects_bad_input(count, percent):
    with pytest.raises(ValueError):
        nearest_rank_index(count, percent)


def test_as_number():
    assert as_number(None) is None
    assert as_number(Decimal("12")) == 12
    assert isinstance(as_number(Decimal("12.00")), int)
    assert as_number(Decimal("12.25")) == 12.25
    assert as_number(7) == 7
