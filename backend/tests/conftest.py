"""Shared builders for holdings and cash ledger tests."""

import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from folio.main import app
from folio.schemas import (
    Asset,
    AssetCategory,
    Currency,
    HoldingContract,
    Market,
    MoneyValues,
    Portfolio,
    Position,
    QuantityValues,
    Transaction,
    TrnType,
    ValueIn,
)
from tests.factories import CATEGORY_NAMES, NZD, USD


@pytest.fixture
def make_asset():
    """Factory for catalog assets."""

    def _make(
        code: str,
        category: str = "EQUITY",
        market: str = "US",
        currency: Currency = USD,
        sector: str | None = None,
        name: str | None = None,
    ) -> Asset:
        return Asset(
            id=f"id-{code}",
            code=code,
            name=name if name is not None else f"{code} Inc",
            category=AssetCategory(id=category, name=CATEGORY_NAMES.get(category, category)),
            market=Market(code=market, currency=currency),
            sector=sector,
        )

    return _make


@pytest.fixture
def make_position():
    """Factory for positions with the same money values in every basis.

    TRADE values are in the asset's market currency; BASE and PORTFOLIO
    default to USD. per_basis overrides individual bases.
    """

    def _make(
        asset: Asset,
        quantity: str = "10",
        base_currency: Currency = USD,
        portfolio_currency: Currency = USD,
        per_basis: dict | None = None,
        **money,
    ) -> Position:
        currencies = {
            ValueIn.TRADE: asset.market.currency,
            ValueIn.BASE: base_currency,
            ValueIn.PORTFOLIO: portfolio_currency,
        }
        money_values = {}
        for value_in, currency in currencies.items():
            fields = {key: Decimal(str(value)) for key, value in money.items()}
            fields.update((per_basis or {}).get(value_in, {}))
            money_values[value_in] = MoneyValues(currency=currency, value_in=value_in, **fields)
        return Position(
            asset=asset,
            money_values=money_values,
            quantity_values=QuantityValues(total=Decimal(quantity), purchased=Decimal(quantity)),
        )

    return _make


@pytest.fixture
def portfolio():
    return Portfolio(id="p-1", code="TEST", name="Test Portfolio", currency=USD, base=NZD)


@pytest.fixture
def make_contract(portfolio):
    """Factory for holding contracts keyed by asset id."""

    def _make(positions: list[Position], mixed_currencies: bool = False) -> HoldingContract:
        return HoldingContract(
            portfolio=portfolio,
            positions={position.asset.id: position for position in positions},
            mixed_currencies=mixed_currencies,
            as_at=datetime.date(2026, 10, 16),
        )

    return _make


@pytest.fixture
def cash_asset(make_asset):
    return make_asset("USD", category="CASH", market="CASH", name="US Dollar")


@pytest.fixture
def make_trn(make_asset, cash_asset):
    """Factory for ledger transactions against the USD cash asset."""
    counter = iter(range(1, 1000))

    def _make(
        trn_type: TrnType,
        quantity: str = "0",
        cash_amount: str = "0",
        trade_amount: str = "0",
        price: str = "1",
        asset: Asset | None = None,
        trade_date: datetime.date = datetime.date(2026, 1, 1),
        comments: str | None = None,
        cash_currency: Currency | None = USD,
    ) -> Transaction:
        return Transaction(
            id=f"trn-{next(counter)}",
            trn_type=trn_type,
            asset=asset or cash_asset,
            cash_asset=cash_asset,
            quantity=Decimal(quantity),
            price=Decimal(price),
            trade_amount=Decimal(trade_amount),
            cash_amount=Decimal(cash_amount),
            trade_currency=USD,
            cash_currency=cash_currency,
            trade_date=trade_date,
            comments=comments,
        )

    return _make


@pytest.fixture
def client():
    """Test client for the API."""
    with TestClient(app) as test_client:
        yield test_client
