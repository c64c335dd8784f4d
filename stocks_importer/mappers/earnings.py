"""Earnings mappers: reported history, charts and the earnings calendar."""

from __future__ import annotations

from stocks_importer.domain.earnings import CalendarEvents, Earnings, EarningsHistory
from stocks_importer.domain.values import fmt, raw

from .base import Record, entries, flatten


def map_earnings_history(symbol: str, doc: EarningsHistory) -> list[Record]:
    return [
        {
            "symbol": symbol,
            **flatten(quarter),
            "quarter_fmt": fmt(quarter.quarter),
        }
        for quarter in entries(doc.history)
    ]


def map_earnings_chart(symbol: str, doc: Earnings) -> list[Record]:
    if doc.earnings_chart is None:
        return []
    return [{"symbol": symbol, **flatten(entry)} for entry in entries(doc.earnings_chart.quarterly)]


def map_financials_chart_yearly(symbol: str, doc: Earnings) -> list[Record]:
    if doc.financials_chart is None:
        return []
    return [{"symbol": symbol, **flatten(entry)} for entry in entries(doc.financials_chart.yearly)]


def map_financials_chart_quarterly(symbol: str, doc: Earnings) -> list[Record]:
    if doc.financials_chart is None:
        return []
    return [{"symbol": symbol, **flatten(entry)} for entry in entries(doc.financials_chart.quarterly)]


def map_calendar_events(symbol: str, doc: CalendarEvents) -> list[Record]:
    """One row per announced earnings date, consensus and dividend dates repeated."""
    earnings = doc.earnings
    if earnings is None:
        return []

    shared = {
        "earnings_average": raw(earnings.earnings_average),
        "earnings_low": raw(earnings.earnings_low),
        "earnings_high": raw(earnings.earnings_high),
        "revenue_average": raw(earnings.revenue_average),
        "revenue_low": raw(earnings.revenue_low),
        "revenue_high": raw(earnings.revenue_high),
        "ex_dividend_date": raw(doc.ex_dividend_date),
        "dividend_date": raw(doc.dividend_date),
    }
    return [
        {
            "symbol": symbol,
            "earnings_date": raw(date),
            "earnings_date_fmt": fmt(date),
            **shared,
        }
        for date in entries(earnings.earnings_date)
    ]
