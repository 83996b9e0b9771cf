"""Ordering of positions within a group and of group keys."""

from decimal import Decimal
from enum import Enum

from folio.schemas import HoldingGroup, Position, ValueIn
from folio.services.holdings.categories import report_category_key, sector_key
from folio.services.holdings.grouping import GroupBy

ZERO = Decimal("0")

# Sort keys read from the position's price data
_PRICE_KEYS = {"price": "close", "change_percent": "change_percent"}

# Sort keys read directly from the position's money values
_MONEY_KEYS = {
    "cost_value",
    "market_value",
    "dividends",
    "unrealised_gain",
    "realised_gain",
    "total_gain",
    "gain_on_day",
    "irr",
    "weight",
}


class SortDirection(str, Enum):
    """Sort direction for position tables."""

    ASC = "asc"
    DESC = "desc"


def _sort_value(position: Position, sort_key: str, value_in: ValueIn) -> Decimal | str:
    if sort_key == "quantity":
        return position.quantity_values.total
    values = position.money_values.get(value_in)
    if sort_key in _PRICE_KEYS:
        if values is None or values.price_data is None:
            return ZERO
        return getattr(values.price_data, _PRICE_KEYS[sort_key])
    if sort_key in _MONEY_KEYS:
        return getattr(values, sort_key) if values is not None else ZERO
    # asset_name and anything unrecognised
    return position.asset.code.lower()


def sort_positions(
    group: HoldingGroup,
    sort_key: str | None,
    value_in: ValueIn,
    direction: SortDirection = SortDirection.ASC,
) -> HoldingGroup:
    """Return a copy of a group with its positions sorted.

    Args:
        group: Group to sort
        sort_key: Column to sort on, e.g. "market_value"; None keeps input order
        value_in: Basis money values are read from
        direction: Ascending or descending

    Returns:
        A new HoldingGroup with the same subtotals
    """
    if not sort_key:
        return group
    positions = sorted(
        group.positions,
        key=lambda position: _sort_value(position, sort_key, value_in),
        reverse=direction == SortDirection.DESC,
    )
    return HoldingGroup(positions=positions, sub_totals=group.sub_totals)


def sort_group_keys(keys, group_by: GroupBy | str) -> list[str]:
    """Order group keys for display.

    Asset classes follow the report category order, sectors put Unclassified
    and Cash last, everything else is alphabetical.
    """
    if group_by == GroupBy.ASSET_CLASS:
        return sorted(keys, key=report_category_key)
    if group_by == GroupBy.SECTOR:
        return sorted(keys, key=sector_key)
    return sorted(keys)
