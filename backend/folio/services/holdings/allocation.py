"""Allocation views derived from aggregated holdings."""

from decimal import Decimal

from folio.schemas import AllocationSlice, HoldingContract, Holdings, ValueIn
from folio.services.holdings.categories import is_cash_related

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def allocation_slices(holdings: Holdings) -> list[AllocationSlice]:
    """Share of market value per group, largest first.

    Uses the subtotals already computed for the holdings' active basis, so
    the slices always agree with the subtotal rows. Returns an empty list
    when there is no market value to allocate.
    """
    entries = [
        (key, group.sub_totals[holdings.value_in])
        for key, group in holdings.holding_groups.items()
        if holdings.value_in in group.sub_totals
    ]
    total = sum((sub_total.market_value for _, sub_total in entries), ZERO)
    if total == 0:
        return []

    slices = [
        AllocationSlice(
            key=key,
            label=key,
            value=sub_total.market_value,
            percentage=sub_total.market_value / total * HUNDRED,
            gain_on_day=sub_total.gain_on_day,
        )
        for key, sub_total in entries
    ]
    slices.sort(key=lambda item: item.value, reverse=True)
    return slices


def cash_related_value(
    contract: HoldingContract, value_in: ValueIn, hide_empty: bool = False
) -> Decimal:
    """Market value held in cash or cash-adjacent (real estate) assets."""
    total = ZERO
    for position in contract.positions.values():
        if hide_empty and position.quantity_values.is_empty:
            continue
        values = position.money_values.get(value_in)
        if values is not None and is_cash_related(position.asset):
            total += values.market_value
    return total
