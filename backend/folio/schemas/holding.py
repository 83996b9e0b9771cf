"""Holding contract and aggregated holdings schemas."""

import datetime
from decimal import Decimal

from pydantic import Field

from folio.schemas.common import CamelModel
from folio.schemas.portfolio import Portfolio, ValueIn
from folio.schemas.position import MoneyValues, Position


class HoldingContract(CamelModel):
    """Positions of a portfolio as delivered by the holdings service.

    mixed_currencies is set when positions trade in more than one currency,
    in which case TRADE-basis totals are meaningless.
    """

    portfolio: Portfolio
    positions: dict[str, Position] = Field(default_factory=dict)
    mixed_currencies: bool = False
    as_at: datetime.date | None = None


class HoldingGroup(CamelModel):
    """Positions sharing a group key, subtotaled for the active basis."""

    positions: list[Position] = Field(default_factory=list)
    sub_totals: dict[ValueIn, MoneyValues] = Field(default_factory=dict)


class Holdings(CamelModel):
    """Grouped holdings ready for display.

    totals has no TRADE entry when the contract holds mixed currencies; an
    absent total is not displayable and must not be read as zero.
    """

    portfolio: Portfolio
    value_in: ValueIn
    holding_groups: dict[str, HoldingGroup] = Field(default_factory=dict)
    totals: dict[ValueIn, MoneyValues] = Field(default_factory=dict)
    view_totals: MoneyValues | None = Field(
        None, description="Sum of all group subtotals for the active basis"
    )


class AllocationSlice(CamelModel):
    """Share of a holdings view attributable to one group."""

    key: str
    label: str
    value: Decimal
    percentage: Decimal
    gain_on_day: Decimal = Decimal("0")


class AllocationSummary(CamelModel):
    """Allocation of a holdings view plus its cash-adjacent exposure."""

    value_in: ValueIn
    slices: list[AllocationSlice] = Field(default_factory=list)
    total: Decimal = Decimal("0")
    cash_related_value: Decimal = Decimal("0")
