"""Tests for group key resolution."""

from decimal import Decimal

import pytest

from folio.exceptions import UnknownGroupByError
from folio.services.holdings import GroupBy, group_key, parse_group_by, resolve_path
from tests.factories import SGD


class TestResolvePath:
    """Test resolve_path."""

    def test_wire_alias_and_field_name(self, make_asset, make_position):
        """camelCase aliases and snake_case names resolve to the same field."""
        position = make_position(make_asset("AAPL"))

        assert resolve_path("asset.assetCategory.name", position) == "Equity"
        assert resolve_path("asset.category.name", position) == "Equity"
        assert resolve_path("quantityValues.total", position) == "10"

    def test_nested_currency(self, make_asset, make_position):
        """Deep paths walk through nested models."""
        position = make_position(make_asset("D05", market="SGX", currency=SGD))

        assert resolve_path("asset.market.currency.code", position) == "SGD"

    def test_missing_value_is_undefined(self, make_asset, make_position):
        """A None along the way yields the undefined label."""
        position = make_position(make_asset("AAPL"))

        assert resolve_path("asset.sector", position) == "undefined"
        assert resolve_path("dateValues.openedDate", position) == "undefined"

    def test_unknown_field_is_undefined(self, make_asset, make_position):
        """Unknown segments do not raise."""
        position = make_position(make_asset("AAPL"))

        assert resolve_path("asset.nope.deeper", position) == "undefined"
        assert resolve_path("asset.model_dump", position) == "undefined"

    def test_falsy_values_are_undefined(self):
        """Empty strings and zero are treated as missing."""
        assert resolve_path("a.b", {"a": {"b": ""}}) == "undefined"
        assert resolve_path("a.b", {"a": {"b": Decimal("0")}}) == "undefined"
        assert resolve_path("a.b", {"a": None}) == "undefined"

    def test_mappings(self):
        """Plain mappings are walked by key."""
        assert resolve_path("asset.market.code", {"asset": {"market": {"code": "LSE"}}}) == "LSE"


class TestGroupBy:
    """Test grouping strategies."""

    def test_strategy_accessors(self, make_asset, make_position):
        """Each strategy extracts its key from the asset."""
        position = make_position(
            make_asset("D05", market="SGX", currency=SGD, sector="Financials")
        )

        assert GroupBy.ASSET_CLASS.key_for(position) == "Equity"
        assert GroupBy.SECTOR.key_for(position) == "Financials"
        assert GroupBy.MARKET_CURRENCY.key_for(position) == "SGD"
        assert GroupBy.MARKET.key_for(position) == "SGX"

    def test_strategies_agree_with_their_paths(self, make_asset, make_position):
        """A strategy and its property path produce the same key."""
        positions = [
            make_position(make_asset("AAPL", sector="Technology")),
            make_position(make_asset("CASH", category="CASH", market="CASH")),
        ]

        for strategy in GroupBy:
            for position in positions:
                assert strategy.key_for(position) == resolve_path(strategy.value, position)

    def test_group_key_dispatch(self, make_asset, make_position):
        """group_key accepts strategies and raw paths."""
        position = make_position(make_asset("AAPL", market="NASDAQ"))

        assert group_key(position, GroupBy.MARKET) == "NASDAQ"
        assert group_key(position, "asset.code") == "AAPL"


class TestParseGroupBy:
    """Test parse_group_by."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("ASSET_CLASS", GroupBy.ASSET_CLASS),
            ("MARKET_CURRENCY", GroupBy.MARKET_CURRENCY),
            ("asset.sector", GroupBy.SECTOR),
            ("asset.market.code", GroupBy.MARKET),
            (GroupBy.MARKET, GroupBy.MARKET),
        ],
    )
    def test_known_options(self, value, expected):
        """Strategy names and paths map to strategies."""
        assert parse_group_by(value) is expected

    def test_other_paths_pass_through(self):
        """Unrecognised but valid paths are kept as paths."""
        assert parse_group_by("asset.code") == "asset.code"

    @pytest.mark.parametrize("value", ["", "asset..code", "asset.market code", "by sector!"])
    def test_invalid_options(self, value):
        """Strings that are not property paths are rejected."""
        with pytest.raises(UnknownGroupByError):
            parse_group_by(value)
