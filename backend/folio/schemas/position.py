"""Position schemas as produced by the upstream valuation service."""

import datetime
from decimal import Decimal

from pydantic import Field

from folio.schemas.asset import Asset, Currency
from folio.schemas.common import CamelModel
from folio.schemas.portfolio import ValueIn

ZERO = Decimal("0")


class PriceData(CamelModel):
    """Latest price information for an asset."""

    close: Decimal = ZERO
    previous_close: Decimal = ZERO
    change: Decimal = ZERO
    change_percent: Decimal = ZERO
    price_date: str | None = None


class MoneyValues(CamelModel):
    """Monetary facts about a position or group in one valuation basis.

    Numeric fields start at zero and are only ever accumulated by addition.
    average_cost and weight are derived by callers, never accumulated here.
    """

    currency: Currency
    value_in: ValueIn | None = None

    market_value: Decimal = ZERO
    cost_value: Decimal = ZERO
    dividends: Decimal = ZERO
    fees: Decimal = ZERO
    tax: Decimal = ZERO
    cash: Decimal = ZERO
    purchases: Decimal = ZERO
    sales: Decimal = ZERO
    cost_basis: Decimal = ZERO
    average_cost: Decimal = ZERO
    realised_gain: Decimal = ZERO
    unrealised_gain: Decimal = ZERO
    total_gain: Decimal = ZERO
    gain_on_day: Decimal = ZERO
    weight: Decimal = ZERO
    irr: Decimal = ZERO

    price_data: PriceData | None = None

    @classmethod
    def zero(cls, currency: Currency, value_in: ValueIn | None = None) -> "MoneyValues":
        """Create an all-zero accumulator fixed to a currency."""
        return cls(currency=currency, value_in=value_in)


class QuantityValues(CamelModel):
    """Current and lifetime unit counts of a position."""

    total: Decimal = ZERO
    purchased: Decimal = ZERO
    sold: Decimal = ZERO
    precision: int = 0

    @property
    def is_empty(self) -> bool:
        """A zero total marks a closed position."""
        return self.total == 0


class DateValues(CamelModel):
    """Key dates in the life of a position."""

    opened_date: datetime.date | None = None
    closed_date: datetime.date | None = None
    last_dividend: datetime.date | None = None


class Position(CamelModel):
    """A held asset with one MoneyValues per valuation basis."""

    asset: Asset
    money_values: dict[ValueIn, MoneyValues] = Field(default_factory=dict)
    quantity_values: QuantityValues = Field(default_factory=QuantityValues)
    date_values: DateValues | None = None
    last_trade_date: datetime.date | None = None
