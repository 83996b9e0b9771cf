"""Cash ladder - running cash balance reconstructed from transactions.

Transactions arrive newest first. The current balance is the sum of every
signed amount; walking backwards from it gives the balance immediately after
each transaction. Ordering is the caller's responsibility and is not checked.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from folio.schemas import Transaction, TrnType, TrnWithBalance
from folio.services.ledger.cash_sign import signed_amount

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

_SIMPLE_DESCRIPTIONS = {
    TrnType.DEPOSIT: "Deposit",
    TrnType.WITHDRAWAL: "Withdrawal",
}

# Descriptions that name the asset and quantity, e.g. "Buy 10 Apple Inc"
_QUANTITY_DESCRIPTIONS = {
    TrnType.BUY: "Buy",
    TrnType.SELL: "Sell",
    TrnType.ADD: "Add",
    TrnType.REDUCE: "Reduce",
}

# Descriptions that name only the asset, e.g. "Dividend Apple Inc"
_ASSET_DESCRIPTIONS = {
    TrnType.DIVI: "Dividend",
    TrnType.EXPENSE: "Expense",
    TrnType.DEDUCTION: "Deduction",
    TrnType.INCOME: "Income",
}


def build_ladder(transactions: Sequence[Transaction], cash_asset_id: str) -> list[TrnWithBalance]:
    """Annotate transactions with signed cash amounts and running balances.

    Args:
        transactions: Transactions sorted newest first
        cash_asset_id: Cash asset whose balance is being reconstructed

    Returns:
        Annotated transactions in the same order as the input
    """
    amounts = [signed_amount(trn, cash_asset_id) for trn in transactions]
    balance = sum(amounts, ZERO)
    closing_balance = balance

    ladder = []
    for trn, amount in zip(transactions, amounts):
        running_balance = balance
        balance -= amount
        ladder.append(
            TrnWithBalance.model_validate(
                {
                    **trn.model_dump(),
                    "signed_cash_amount": amount,
                    "running_balance": running_balance,
                }
            )
        )

    logger.debug(
        f"Built cash ladder for {cash_asset_id}: {len(ladder)} transactions, "
        f"balance {closing_balance}"
    )
    return ladder


def _display_code(code: str) -> str:
    # Private assets carry an owner prefix, e.g. "owner.SCB-SGD"
    return code.rsplit(".", 1)[-1]


def _format_quantity(quantity: Decimal) -> str:
    return format(quantity.normalize(), "f")


def describe_transaction(trn: Transaction) -> str:
    """Human readable description of a ladder entry.

    Comments win; otherwise the description is derived from the type.
    """
    if trn.comments:
        return trn.comments

    trn_type = trn.trn_type
    asset_name = trn.asset.name or _display_code(trn.asset.code)

    if trn_type in _SIMPLE_DESCRIPTIONS:
        return _SIMPLE_DESCRIPTIONS[trn_type]
    if trn_type.value == "FX" or trn_type.value.startswith("FX_"):
        cash_code = trn.cash_currency.code if trn.cash_currency else ""
        return f"FX {trn.trade_currency.code} to {cash_code}"
    if trn_type in _QUANTITY_DESCRIPTIONS:
        return f"{_QUANTITY_DESCRIPTIONS[trn_type]} {_format_quantity(trn.quantity)} {asset_name}"
    if trn_type in _ASSET_DESCRIPTIONS:
        return f"{_ASSET_DESCRIPTIONS[trn_type]} {asset_name}"
    return f"{trn_type.value} {asset_name}"


def ladder_row(trn: TrnWithBalance) -> str:
    """Tab-separated export row for one ladder entry."""
    return "\t".join(
        [
            trn.trade_date.isoformat(),
            trn.trn_type.value,
            describe_transaction(trn),
            f"{trn.price:.2f}",
            f"{trn.signed_cash_amount:.2f}",
            f"{trn.running_balance:.2f}",
        ]
    )
