"""Canonical signing of a transaction's cash impact.

Each transaction type records its cash effect in a different field, and the
stored sign of that field is not reliable. The rule table below decides both
the source field and the direction; the raw sign is discarded.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from folio.schemas import Transaction, TrnType


class CashDirection(Enum):
    """Whether a transaction adds to or takes from the cash balance."""

    CREDIT = 1
    DEBIT = -1


@dataclass(frozen=True)
class CashRule:
    """Where a transaction type's cash amount lives and which way it moves."""

    field: str
    direction: CashDirection

    def apply(self, trn: Transaction) -> Decimal:
        amount = abs(getattr(trn, self.field))
        return amount if self.direction == CashDirection.CREDIT else -amount


# Types not listed here debit cash_amount
DEFAULT_CASH_RULE = CashRule("cash_amount", CashDirection.DEBIT)

# FX_BUY viewed from the currency that was bought
FX_BUY_CREDIT_RULE = CashRule("quantity", CashDirection.CREDIT)

CASH_RULES: dict[TrnType, CashRule] = {
    # Amount carried as quantity with a price of 1
    TrnType.DEPOSIT: CashRule("quantity", CashDirection.CREDIT),
    TrnType.WITHDRAWAL: CashRule("quantity", CashDirection.DEBIT),
    TrnType.DEDUCTION: CashRule("quantity", CashDirection.DEBIT),
    # Quantity of 1 with the amount as price
    TrnType.INCOME: CashRule("trade_amount", CashDirection.CREDIT),
    TrnType.SELL: CashRule("cash_amount", CashDirection.CREDIT),
    TrnType.DIVI: CashRule("cash_amount", CashDirection.CREDIT),
    TrnType.BUY: DEFAULT_CASH_RULE,
    TrnType.ADD: DEFAULT_CASH_RULE,
    TrnType.REDUCE: DEFAULT_CASH_RULE,
    TrnType.EXPENSE: DEFAULT_CASH_RULE,
    TrnType.FX: DEFAULT_CASH_RULE,
    TrnType.FX_BUY: DEFAULT_CASH_RULE,
    TrnType.SPLIT: DEFAULT_CASH_RULE,
    TrnType.COST_ADJUST: DEFAULT_CASH_RULE,
    TrnType.BALANCE: DEFAULT_CASH_RULE,
}


def cash_rule(trn: Transaction, queried_cash_asset_id: str) -> CashRule:
    """Rule that applies to a transaction when viewed from one cash asset.

    An FX_BUY whose asset is the queried cash asset is the purchase of that
    currency, so it credits the bought quantity.
    """
    if trn.trn_type == TrnType.FX_BUY and trn.asset.id == queried_cash_asset_id:
        return FX_BUY_CREDIT_RULE
    return CASH_RULES.get(trn.trn_type, DEFAULT_CASH_RULE)


def signed_amount(trn: Transaction, queried_cash_asset_id: str) -> Decimal:
    """Signed cash impact of a transaction on the queried cash asset.

    Args:
        trn: Transaction from the ledger service
        queried_cash_asset_id: Cash asset whose ledger is being built

    Returns:
        Positive for credits, negative for debits
    """
    return cash_rule(trn, queried_cash_asset_id).apply(trn)
