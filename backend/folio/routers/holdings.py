"""Holdings API router - grouped, totalled views of a holding contract."""

from decimal import Decimal

from fastapi import APIRouter, Query

from folio.config import settings
from folio.schemas import AllocationSummary, HoldingContract, Holdings, ValueIn
from folio.services.holdings import (
    SortDirection,
    aggregate,
    allocation_slices,
    cash_related_value,
    parse_group_by,
    sort_group_keys,
    sort_positions,
)

router = APIRouter(prefix="/api/holdings", tags=["holdings"])


def _resolve_options(
    value_in: ValueIn | None, group_by: str | None, hide_empty: bool | None
) -> tuple[ValueIn, str, bool]:
    return (
        value_in or ValueIn(settings.default_value_in),
        group_by or settings.default_group_by,
        settings.hide_empty if hide_empty is None else hide_empty,
    )


@router.post("", response_model=Holdings)
async def aggregate_holdings(
    contract: HoldingContract,
    value_in: ValueIn | None = Query(None, description="Valuation basis for subtotals"),
    group_by: str | None = Query(
        None, description="ASSET_CLASS, SECTOR, MARKET_CURRENCY, MARKET or a property path"
    ),
    hide_empty: bool | None = Query(None, description="Hide positions with zero quantity"),
    sort_by: str | None = Query(None, description="Position column to sort groups by"),
    direction: SortDirection = Query(SortDirection.ASC, description="Position sort direction"),
) -> Holdings:
    """
    Group and total the positions of a holding contract.

    Groups are returned in display order. TRADE totals are omitted when the
    portfolio trades in mixed currencies.
    """
    value_in, group_by, hide_empty = _resolve_options(value_in, group_by, hide_empty)
    strategy = parse_group_by(group_by)
    holdings = aggregate(contract, hide_empty, value_in, strategy)

    holdings.holding_groups = {
        key: sort_positions(holdings.holding_groups[key], sort_by, value_in, direction)
        for key in sort_group_keys(holdings.holding_groups, strategy)
    }
    return holdings


@router.post("/allocation", response_model=AllocationSummary)
async def holdings_allocation(
    contract: HoldingContract,
    value_in: ValueIn | None = Query(None, description="Valuation basis"),
    group_by: str | None = Query(None, description="Grouping strategy or property path"),
    hide_empty: bool | None = Query(None, description="Hide positions with zero quantity"),
) -> AllocationSummary:
    """
    Share of market value per group for a holding contract.

    Also reports how much of the value sits in cash or real estate.
    """
    value_in, group_by, hide_empty = _resolve_options(value_in, group_by, hide_empty)
    holdings = aggregate(contract, hide_empty, value_in, group_by)
    total = holdings.view_totals.market_value if holdings.view_totals else Decimal("0")
    return AllocationSummary(
        value_in=value_in,
        slices=allocation_slices(holdings),
        total=total,
        cash_related_value=cash_related_value(contract, value_in, hide_empty),
    )
