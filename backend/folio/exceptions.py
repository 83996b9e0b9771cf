"""Folio-specific exceptions.

The aggregation and ledger algorithms degrade gracefully on sparse data, so
these are only raised at the edges: strict currency checking and parsing of
caller-supplied grouping options.
"""


class FolioError(Exception):
    """Base exception for folio operations."""


class CurrencyMismatchError(FolioError):
    """A position's currency differs from the total it is being added to."""

    def __init__(self, value_in: str, expected: str, actual: str, asset_code: str | None = None):
        self.value_in = value_in
        self.expected = expected
        self.actual = actual
        self.asset_code = asset_code
        super().__init__(
            f"{value_in} total is in {expected} but {asset_code or 'position'} "
            f"contributes {actual}"
        )


class UnknownGroupByError(FolioError):
    """Grouping option is neither a known strategy nor a property path."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown group by option: {value!r}")
