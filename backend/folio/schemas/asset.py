"""Asset reference data schemas."""

from pydantic import ConfigDict, Field

from folio.schemas.common import CamelModel


class Currency(CamelModel):
    """Currency reference data, shared by many money values."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="ISO currency code")
    symbol: str = ""
    name: str | None = None


class Market(CamelModel):
    """Market an asset trades on."""

    code: str
    currency: Currency


class AssetCategory(CamelModel):
    """Category of an asset, e.g. CASH, EQUITY, ETF, RE, ACCOUNT."""

    id: str
    name: str = ""


class Asset(CamelModel):
    """Asset as supplied by the asset catalog."""

    id: str
    code: str
    name: str = ""
    category: AssetCategory = Field(..., alias="assetCategory")
    market: Market
    sector: str | None = None
    effective_report_category: str | None = Field(
        None, description="Backend-computed report category, preferred over local mapping"
    )
