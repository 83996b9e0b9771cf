"""Transaction schemas consumed by the cash ladder."""

import datetime
from decimal import Decimal
from enum import Enum

from pydantic import Field, field_validator

from folio.schemas.asset import Asset, Currency
from folio.schemas.common import CamelModel


class TrnType(str, Enum):
    """Transaction types recognised by the ledger service."""

    BUY = "BUY"
    SELL = "SELL"
    DIVI = "DIVI"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    INCOME = "INCOME"
    DEDUCTION = "DEDUCTION"
    EXPENSE = "EXPENSE"
    FX = "FX"
    FX_BUY = "FX_BUY"
    ADD = "ADD"
    REDUCE = "REDUCE"
    SPLIT = "SPLIT"
    COST_ADJUST = "COST_ADJUST"
    BALANCE = "BALANCE"


class Broker(CamelModel):
    """Broker a transaction was executed with."""

    id: str
    name: str = ""


class Transaction(CamelModel):
    """A cash-affecting transaction, immutable once fetched."""

    id: str
    trn_type: TrnType
    asset: Asset
    cash_asset: Asset | None = None
    quantity: Decimal = Decimal("0")
    price: Decimal = Decimal("0")
    trade_amount: Decimal = Decimal("0")
    cash_amount: Decimal = Decimal("0")
    trade_currency: Currency
    cash_currency: Currency | None = None
    trade_date: datetime.date
    status: str = "SETTLED"
    broker: Broker | None = None
    comments: str | None = None

    @field_validator("cash_currency", mode="before")
    @classmethod
    def currency_from_code(cls, value):
        """Accept a bare currency code, as some ledger payloads send one."""
        if isinstance(value, str):
            return {"code": value, "symbol": value}
        return value


class TrnWithBalance(Transaction):
    """Transaction annotated with its signed cash impact and running balance."""

    signed_cash_amount: Decimal = Field(..., description="Canonically signed cash impact")
    running_balance: Decimal = Field(..., description="Cash balance immediately after")
