"""Pydantic schemas for holdings and cash ledger payloads."""

from folio.schemas.asset import Asset, AssetCategory, Currency, Market
from folio.schemas.common import CamelModel, ErrorResponse
from folio.schemas.holding import (
    AllocationSlice,
    AllocationSummary,
    HoldingContract,
    HoldingGroup,
    Holdings,
)
from folio.schemas.portfolio import Portfolio, ValueIn
from folio.schemas.position import (
    DateValues,
    MoneyValues,
    Position,
    PriceData,
    QuantityValues,
)
from folio.schemas.transaction import Broker, Transaction, TrnType, TrnWithBalance

__all__ = [
    "AllocationSlice",
    "AllocationSummary",
    "Asset",
    "AssetCategory",
    "Broker",
    "CamelModel",
    "Currency",
    "DateValues",
    "ErrorResponse",
    "HoldingContract",
    "HoldingGroup",
    "Holdings",
    "Market",
    "MoneyValues",
    "Portfolio",
    "Position",
    "PriceData",
    "QuantityValues",
    "Transaction",
    "TrnType",
    "TrnWithBalance",
    "ValueIn",
]
