"""Holdings aggregation services.

Groups positions, totals them per valuation basis and derives the ordering
and allocation views built on top of the aggregate.
"""

from .aggregation import accumulate, aggregate
from .allocation import allocation_slices, cash_related_value
from .categories import is_account, is_cash, is_cash_related, report_category
from .grouping import GroupBy, group_key, parse_group_by, resolve_path
from .sorting import SortDirection, sort_group_keys, sort_positions

__all__ = [
    "GroupBy",
    "SortDirection",
    "accumulate",
    "aggregate",
    "allocation_slices",
    "cash_related_value",
    "group_key",
    "is_account",
    "is_cash",
    "is_cash_related",
    "parse_group_by",
    "report_category",
    "resolve_path",
    "sort_group_keys",
    "sort_positions",
]
