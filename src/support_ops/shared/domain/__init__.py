"""
Shared Domain Layer
===================

Pure computations reused by several reports.
"""

from support_ops.shared.domain.statistics import (
    as_number,
    nearest_rank,
    nearest_rank_index,
)

__all__ = ["as_number", "nearest_rank", "nearest_rank_index"]
