"""
Nearest-rank percentile and numeric conversion helpers.

The trend reports compute percentiles in SQL with ``percentile_disc``;
``nearest_rank`` is the same rule over an in-memory sample.
"""

from decimal import Decimal
from typing import Any, Optional, Sequence, TypeVar, Union

Number = TypeVar("Number", int, float)


def nearest_rank_index(count: int, percent: int) -> int:
    """
    Zero-based index of the nearest-rank percentile in a sorted sample.

    rank = ceil(percent/100 * count), computed with integers so that exact
    ranks never drift upwards through float error.
    """
    if count <= 0:
        raise ValueError("count must be positive")
    if not 0 < percent <= 100:
        raise ValueError("percent must be in (0, 100]")
    rank = -(-percent * count // 100)
    return max(rank, 1) - 1


def nearest_rank(values: Sequence[Number], percent: int = 95) -> Optional[Number]:
    """
    Nearest-rank percentile (no interpolation).

    >>> nearest_rank([10, 20, 30, 40, 50], 95)
    50
    """
    if not values:
        return None
    ordered = sorted(values)
    return ordered[nearest_rank_index(len(ordered), percent)]


def as_number(value: Any) -> Optional[Union[int, float]]:
    """
    Plain int/float for a numeric column value.

    Postgres returns NUMERIC aggregates as Decimal, which JSON encoders
    would render as strings.
    """
    if value is None or isinstance(value, (int, float)):
        return value
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return float(value)
