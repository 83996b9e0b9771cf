"""Valuation and cash ledger core for portfolio holdings."""

__version__ = "0.1.0"
