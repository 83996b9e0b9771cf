"""Tests for cash sign normalization."""

from decimal import Decimal

import pytest

from folio.schemas import TrnType
from folio.services.ledger import CASH_RULES, CashDirection, cash_rule, signed_amount

CASH_ID = "id-USD"


class TestCashRules:
    """Test the rule table."""

    def test_every_type_has_a_rule(self):
        """The table covers the whole transaction type set."""
        assert set(CASH_RULES) == set(TrnType)

    @pytest.mark.parametrize(
        "trn_type", [TrnType.DEPOSIT, TrnType.SELL, TrnType.DIVI, TrnType.INCOME]
    )
    def test_credit_types(self, trn_type):
        """Only deposits, sales, dividends and income credit cash."""
        assert CASH_RULES[trn_type].direction == CashDirection.CREDIT

    def test_everything_else_debits(self):
        """All remaining types debit cash."""
        credits = {TrnType.DEPOSIT, TrnType.SELL, TrnType.DIVI, TrnType.INCOME}
        for trn_type, rule in CASH_RULES.items():
            if trn_type not in credits:
                assert rule.direction == CashDirection.DEBIT, trn_type


class TestSignedAmount:
    """Test signed_amount."""

    @pytest.mark.parametrize("quantity", ["500", "-500"])
    def test_withdrawal_is_always_negative(self, make_trn, quantity):
        """Withdrawals debit regardless of the stored sign."""
        trn = make_trn(TrnType.WITHDRAWAL, quantity=quantity, cash_amount="123")
        assert signed_amount(trn, CASH_ID) == Decimal("-500")

    @pytest.mark.parametrize("quantity", ["1000", "-1000"])
    def test_deposit_is_always_positive(self, make_trn, quantity):
        """Deposits credit the quantity regardless of the stored sign."""
        trn = make_trn(TrnType.DEPOSIT, quantity=quantity)
        assert signed_amount(trn, CASH_ID) == Decimal("1000")

    def test_deduction_uses_quantity(self, make_trn):
        """Deductions debit the quantity."""
        trn = make_trn(TrnType.DEDUCTION, quantity="25", cash_amount="999")
        assert signed_amount(trn, CASH_ID) == Decimal("-25")

    def test_income_uses_trade_amount(self, make_trn):
        """Income credits the trade amount, not the unit quantity."""
        trn = make_trn(TrnType.INCOME, quantity="1", trade_amount="-75.50", price="75.50")
        assert signed_amount(trn, CASH_ID) == Decimal("75.50")

    def test_buy_debits_cash_amount(self, make_trn, make_asset):
        """Buys debit the cash amount."""
        trn = make_trn(TrnType.BUY, quantity="10", cash_amount="-300", asset=make_asset("AAPL"))
        assert signed_amount(trn, CASH_ID) == Decimal("-300")

    def test_sell_with_wrong_stored_sign(self, make_trn, make_asset):
        """Sales credit even when stored negative."""
        trn = make_trn(TrnType.SELL, quantity="10", cash_amount="-200", asset=make_asset("AAPL"))
        assert signed_amount(trn, CASH_ID) == Decimal("200")

    def test_dividend_credits(self, make_trn, make_asset):
        """Dividends credit the cash amount."""
        trn = make_trn(TrnType.DIVI, cash_amount="12.34", asset=make_asset("AAPL"))
        assert signed_amount(trn, CASH_ID) == Decimal("12.34")

    def test_fx_buy_into_queried_currency(self, make_trn, cash_asset):
        """Buying the queried currency credits the purchased quantity."""
        trn = make_trn(TrnType.FX_BUY, quantity="1350", cash_amount="-1000", asset=cash_asset)

        assert signed_amount(trn, CASH_ID) == Decimal("1350")
        assert cash_rule(trn, CASH_ID).field == "quantity"

    def test_fx_buy_paid_from_queried_currency(self, make_trn, make_asset):
        """Paying for another currency debits the cash amount."""
        sgd = make_asset("SGD", category="CASH")
        trn = make_trn(TrnType.FX_BUY, quantity="1350", cash_amount="1000", asset=sgd)

        assert signed_amount(trn, CASH_ID) == Decimal("-1000")

    def test_default_rule_for_other_types(self, make_trn, make_asset):
        """Other types fall back to debiting the cash amount."""
        trn = make_trn(TrnType.SPLIT, quantity="2", cash_amount="0", asset=make_asset("AAPL"))
        assert signed_amount(trn, CASH_ID) == 0

        trn = make_trn(TrnType.ADD, quantity="2", cash_amount="40", asset=make_asset("AAPL"))
        assert signed_amount(trn, CASH_ID) == Decimal("-40")
