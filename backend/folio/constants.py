"""Application constants to avoid magic strings."""


class AssetCategory:
    """Asset category identifiers as supplied by the asset catalog."""

    CASH = "CASH"
    EQUITY = "EQUITY"
    ETF = "ETF"
    MUTUAL_FUND = "MUTUAL FUND"
    RE = "RE"
    ACCOUNT = "ACCOUNT"
    POLICY = "POLICY"


class ReportCategory:
    """Broad categories used to label and order asset class groups."""

    CASH = "Cash"
    EQUITY = "Equity"
    ETF = "ETF"
    MUTUAL_FUND = "Mutual Fund"
    PROPERTY = "Property"


# Literal key used when a grouping value cannot be resolved
UNDEFINED_GROUP = "undefined"

# Sector label for positions without a sector classification
UNCLASSIFIED_SECTOR = "Unclassified"
