"""Cash ladder API router - running cash balances for one cash asset."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from folio.schemas import Transaction, TrnWithBalance
from folio.services.ledger import build_ladder, ladder_row

router = APIRouter(prefix="/api/cash-ladder", tags=["cash-ladder"])


@router.post("/{cash_asset_id}", response_model=list[TrnWithBalance])
async def cash_ladder(cash_asset_id: str, transactions: list[Transaction]) -> list[TrnWithBalance]:
    """
    Annotate cash transactions with signed amounts and running balances.

    Transactions must be sorted newest first; the response keeps that order.
    """
    return build_ladder(transactions, cash_asset_id)


@router.post("/{cash_asset_id}/export", response_class=PlainTextResponse)
async def export_cash_ladder(cash_asset_id: str, transactions: list[Transaction]) -> str:
    """
    Cash ladder as tab-separated rows, one per transaction.

    Columns: trade date, type, description, price, signed amount, balance.
    """
    return "\n".join(ladder_row(trn) for trn in build_ladder(transactions, cash_asset_id))
