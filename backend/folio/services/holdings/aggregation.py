"""Holdings aggregation - groups positions and totals them per valuation basis.

Portfolio-wide totals are kept for every basis so the caller can switch the
"value in" selection without recomputing. Group subtotals only cover the
selected basis.
"""

import logging

from folio.config import settings
from folio.constants import UNDEFINED_GROUP
from folio.exceptions import CurrencyMismatchError
from folio.schemas import (
    Currency,
    HoldingContract,
    HoldingGroup,
    Holdings,
    MoneyValues,
    Position,
    ValueIn,
)
from folio.services.holdings.categories import is_cash
from folio.services.holdings.grouping import GroupBy, group_key, parse_group_by

logger = logging.getLogger(__name__)

# Fields every position contributes to
ALWAYS_ACCUMULATED = (
    "market_value",
    "cost_value",
    "dividends",
    "realised_gain",
    "unrealised_gain",
    "total_gain",
)

# Trading activity, only meaningful for non-cash assets
TRADING_ACCUMULATED = ("purchases", "sales", "gain_on_day")

SUMMARY_FIELDS = ALWAYS_ACCUMULATED + ("cash",) + TRADING_ACCUMULATED


def _check_currency(
    total: MoneyValues,
    values: MoneyValues,
    position: Position,
    value_in: ValueIn,
    strict_currency: bool,
) -> None:
    if total.currency.code == values.currency.code:
        return
    if strict_currency:
        raise CurrencyMismatchError(
            value_in.value, total.currency.code, values.currency.code, position.asset.code
        )
    logger.warning(
        f"{value_in.value} total in {total.currency.code} received {values.currency.code} "
        f"from {position.asset.code}; keeping {total.currency.code}"
    )


def accumulate(
    total: MoneyValues | None,
    position: Position,
    value_in: ValueIn,
    strict_currency: bool = False,
) -> MoneyValues:
    """Add a position's money values for one basis into a running total.

    Args:
        total: Running total, or None to start one in the position's currency
        position: Contributing position
        value_in: Valuation basis to read from the position
        strict_currency: Raise instead of warn on a currency mismatch

    Returns:
        The updated total (the same object when one was passed in)

    Raises:
        CurrencyMismatchError: If strict_currency is set and the currencies differ
    """
    values = position.money_values[value_in]
    if total is None:
        total = MoneyValues.zero(values.currency, value_in)
    else:
        _check_currency(total, values, position, value_in, strict_currency)

    for field in ALWAYS_ACCUMULATED:
        setattr(total, field, getattr(total, field) + getattr(values, field))

    if is_cash(position.asset):
        total.cash += values.market_value
    else:
        for field in TRADING_ACCUMULATED:
            setattr(total, field, getattr(total, field) + getattr(values, field))

    return total


def totalled_bases(contract: HoldingContract) -> list[ValueIn]:
    """Bases that can be totalled across the whole contract.

    Summing trade amounts across different trading currencies is
    meaningless, so TRADE is dropped for mixed-currency portfolios.
    """
    bases = [ValueIn.PORTFOLIO, ValueIn.BASE]
    if not contract.mixed_currencies:
        bases.append(ValueIn.TRADE)
    return bases


def summarise_groups(
    holding_groups: dict[str, HoldingGroup], value_in: ValueIn, currency: Currency
) -> MoneyValues:
    """Sum every group's subtotal for the active basis."""
    summary = MoneyValues.zero(currency, value_in)
    for group in holding_groups.values():
        sub_total = group.sub_totals.get(value_in)
        if sub_total is None:
            continue
        for field in SUMMARY_FIELDS:
            setattr(summary, field, getattr(summary, field) + getattr(sub_total, field))
    return summary


def aggregate(
    contract: HoldingContract,
    hide_empty: bool = False,
    value_in: ValueIn = ValueIn.PORTFOLIO,
    group_by: GroupBy | str = GroupBy.ASSET_CLASS,
    strict_currency: bool | None = None,
) -> Holdings:
    """Group a holding contract's positions and total them.

    Positions are grouped in insertion order; callers sort group keys before
    display. A fresh result is built on every call and the contract is never
    modified.

    Args:
        contract: Positions and flags from the holdings service
        hide_empty: Drop positions whose total quantity is zero
        value_in: Basis used for group subtotals
        group_by: Grouping strategy, strategy name, or dotted property path
        strict_currency: Override settings.strict_currency

    Returns:
        Holdings with groups, per-basis totals and view totals
    """
    if strict_currency is None:
        strict_currency = settings.strict_currency
    group_by = parse_group_by(group_by)
    bases = totalled_bases(contract)

    holding_groups: dict[str, HoldingGroup] = {}
    totals: dict[ValueIn, MoneyValues] = {}
    skipped = 0

    for position in contract.positions.values():
        if hide_empty and position.quantity_values.is_empty:
            skipped += 1
            continue

        key = group_key(position, group_by)
        group = holding_groups.setdefault(key, HoldingGroup())
        group.positions.append(position)

        for basis in bases:
            totals[basis] = accumulate(totals.get(basis), position, basis, strict_currency)

        group.sub_totals[value_in] = accumulate(
            group.sub_totals.get(value_in), position, value_in, strict_currency
        )

    # Nothing contributed; totals are zero in the portfolio's currencies
    for basis in bases:
        if basis not in totals:
            totals[basis] = MoneyValues.zero(contract.portfolio.currency_for(basis), basis)

    if UNDEFINED_GROUP in holding_groups:
        logger.warning(
            f"{len(holding_groups[UNDEFINED_GROUP].positions)} position(s) in portfolio "
            f"{contract.portfolio.code} have no value for {group_by}"
        )

    view_totals = None
    if value_in in totals:
        view_totals = summarise_groups(holding_groups, value_in, totals[value_in].currency)

    logger.debug(
        f"Aggregated {contract.portfolio.code}: {len(holding_groups)} groups, "
        f"{len(contract.positions) - skipped} positions, {skipped} hidden"
    )

    return Holdings(
        portfolio=contract.portfolio,
        value_in=value_in,
        holding_groups=holding_groups,
        totals=totals,
        view_totals=view_totals,
    )
