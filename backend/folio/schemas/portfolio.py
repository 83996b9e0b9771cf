"""Portfolio schemas."""

from enum import Enum

from folio.schemas.asset import Currency
from folio.schemas.common import CamelModel


class ValueIn(str, Enum):
    """Valuation basis a money value is expressed in."""

    TRADE = "TRADE"  # Position's native trading currency
    BASE = "BASE"  # Portfolio's declared base currency
    PORTFOLIO = "PORTFOLIO"  # Portfolio's display currency


class Portfolio(CamelModel):
    """Portfolio owning a set of positions."""

    id: str
    code: str
    name: str = ""
    currency: Currency
    base: Currency

    def currency_for(self, value_in: ValueIn) -> Currency:
        """Return the portfolio-level currency for a valuation basis.

        TRADE has no single portfolio currency; the display currency stands in.
        """
        if value_in == ValueIn.BASE:
            return self.base
        return self.currency
