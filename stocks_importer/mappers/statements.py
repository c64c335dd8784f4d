"""Financial statement mappers: one row per statement end date."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

from stocks_importer.domain.statements import (
    BalanceSheetHistory,
    CashflowStatementHistory,
    IncomeStatementHistory,
)
from stocks_importer.domain.values import fmt

from .base import Record, entries, flatten


def _statement_rows(symbol: str, statements: Sequence[BaseModel] | None) -> list[Record]:
    return [
        {
            "symbol": symbol,
            **flatten(statement),
            "end_date_fmt": fmt(statement.end_date),
        }
        for statement in entries(statements)
    ]


def map_cashflow_statements(symbol: str, doc: CashflowStatementHistory) -> list[Record]:
    return _statement_rows(symbol, doc.cashflow_statements)


def map_income_statements(symbol: str, doc: IncomeStatementHistory) -> list[Record]:
    return _statement_rows(symbol, doc.income_statement_history)


def map_balance_sheets(symbol: str, doc: BalanceSheetHistory) -> list[Record]:
    return _statement_rows(symbol, doc.balance_sheet_statements)
