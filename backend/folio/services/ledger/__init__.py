"""Cash ledger services.

Handles cash sign normalization and running balance reconstruction.
"""

from .cash_ladder import build_ladder, describe_transaction, ladder_row
from .cash_sign import CASH_RULES, CashDirection, CashRule, cash_rule, signed_amount

__all__ = [
    "CASH_RULES",
    "CashDirection",
    "CashRule",
    "build_ladder",
    "cash_rule",
    "describe_transaction",
    "ladder_row",
    "signed_amount",
]
