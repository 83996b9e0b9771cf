"""Group key strategies for holdings views.

Group keys are display bucket labels. Missing reference data never fails a
grouping; the position lands in the "undefined" bucket instead.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from folio.constants import UNDEFINED_GROUP
from folio.exceptions import UnknownGroupByError
from folio.schemas import Position


def _model_field(model: BaseModel, name: str) -> Any:
    fields = type(model).model_fields
    if name in fields:
        return getattr(model, name)
    for field_name, info in fields.items():
        if name in (info.alias, to_camel(field_name)):
            return getattr(model, field_name)
    return None


def _step(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name)
    if isinstance(value, BaseModel):
        return _model_field(value, name)
    return None


def _label(value: Any) -> str:
    if not value:
        return UNDEFINED_GROUP
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def resolve_path(path: str, obj: Any) -> str:
    """Resolve a dot-separated property path against a position.

    Segments may use either the field name or its camelCase wire alias, so
    "asset.assetCategory.name" and "asset.category.name" are equivalent.
    A falsy or missing value at any step yields "undefined".

    Args:
        path: Dot-separated property path, e.g. "asset.market.code"
        obj: Pydantic model or mapping to walk

    Returns:
        The resolved value as a string, or "undefined"
    """
    value = obj
    for segment in path.split("."):
        if not value:
            return UNDEFINED_GROUP
        value = _step(value, segment)
    return _label(value)


def _asset_class(position: Position) -> str:
    return _label(position.asset.category.name)


def _sector(position: Position) -> str:
    return _label(position.asset.sector)


def _market_currency(position: Position) -> str:
    return _label(position.asset.market.currency.code)


def _market(position: Position) -> str:
    return _label(position.asset.market.code)


class GroupBy(str, Enum):
    """Supported grouping strategies, valued by their wire property path."""

    ASSET_CLASS = "asset.assetCategory.name"
    SECTOR = "asset.sector"
    MARKET_CURRENCY = "asset.market.currency.code"
    MARKET = "asset.market.code"

    def key_for(self, position: Position) -> str:
        return _ACCESSORS[self](position)


_ACCESSORS: dict[GroupBy, Callable[[Position], str]] = {
    GroupBy.ASSET_CLASS: _asset_class,
    GroupBy.SECTOR: _sector,
    GroupBy.MARKET_CURRENCY: _market_currency,
    GroupBy.MARKET: _market,
}


def parse_group_by(value: "GroupBy | str") -> "GroupBy | str":
    """Turn a caller-supplied grouping option into a strategy or raw path.

    Accepts a strategy name ("MARKET"), a strategy's property path
    ("asset.market.code") or any other dotted property path.

    Raises:
        UnknownGroupByError: If value is not a usable property path
    """
    if isinstance(value, GroupBy):
        return value
    if value in GroupBy.__members__:
        return GroupBy[value]
    try:
        return GroupBy(value)
    except ValueError:
        pass
    if value and all(segment.isidentifier() for segment in value.split(".")):
        return value
    raise UnknownGroupByError(value)


def group_key(position: Position, group_by: "GroupBy | str") -> str:
    """Group key for a position under a strategy or raw property path."""
    if isinstance(group_by, GroupBy):
        return group_by.key_for(position)
    return resolve_path(group_by, position)
