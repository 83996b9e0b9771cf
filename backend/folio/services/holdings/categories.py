"""Asset category predicates and report category mapping.

Holdings aggregation buckets only CASH assets into the cash total. Allocation
and exposure views also treat real estate as cash-adjacent.
"""

from functools import cmp_to_key

from folio.constants import UNCLASSIFIED_SECTOR, AssetCategory, ReportCategory
from folio.schemas import Asset

REPORT_CATEGORY_SORT_ORDER = [
    ReportCategory.EQUITY,
    ReportCategory.ETF,
    ReportCategory.MUTUAL_FUND,
    ReportCategory.PROPERTY,
    ReportCategory.CASH,
]

_REPORT_CATEGORY_MAP = {
    "CASH": ReportCategory.CASH,
    "ACCOUNT": ReportCategory.CASH,
    "TRADE": ReportCategory.CASH,
    "BANK ACCOUNT": ReportCategory.CASH,
    "EQUITY": ReportCategory.EQUITY,
    "RE": ReportCategory.PROPERTY,
    "REAL ESTATE": ReportCategory.PROPERTY,
    "ETF": ReportCategory.ETF,
    "EXCHANGE TRADED FUND": ReportCategory.ETF,
    "MUTUAL FUND": ReportCategory.MUTUAL_FUND,
}


def is_cash(asset: Asset) -> bool:
    return asset.category.id == AssetCategory.CASH


def is_cash_related(asset: Asset) -> bool:
    return is_cash(asset) or asset.category.id == AssetCategory.RE


def is_account(asset: Asset) -> bool:
    return asset.category.id == AssetCategory.ACCOUNT


def map_to_report_category(category: str) -> str:
    """Map a detailed category id or name to its report category.

    Unknown categories are returned unchanged.
    """
    return _REPORT_CATEGORY_MAP.get(category.upper(), category)


def report_category(asset: Asset) -> str:
    """Report category for an asset, preferring the backend-computed value."""
    if asset.effective_report_category:
        return asset.effective_report_category
    return map_to_report_category(asset.category.name or asset.category.id or "Equity")


def compare_by_report_category(a: str, b: str) -> int:
    """Order report categories; unknown categories sort last."""
    last = len(REPORT_CATEGORY_SORT_ORDER)
    index_a = REPORT_CATEGORY_SORT_ORDER.index(a) if a in REPORT_CATEGORY_SORT_ORDER else last
    index_b = REPORT_CATEGORY_SORT_ORDER.index(b) if b in REPORT_CATEGORY_SORT_ORDER else last
    return index_a - index_b


def compare_by_sector(a: str, b: str) -> int:
    """Classified sectors alphabetically, then Unclassified, then Cash."""
    for trailing in (ReportCategory.CASH, UNCLASSIFIED_SECTOR):
        if a == trailing and b == trailing:
            return 0
        if a == trailing:
            return 1
        if b == trailing:
            return -1
    return (a > b) - (a < b)


report_category_key = cmp_to_key(compare_by_report_category)
sector_key = cmp_to_key(compare_by_sector)
