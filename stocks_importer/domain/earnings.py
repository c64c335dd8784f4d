"""Earnings sub-documents: earningsHistory, earnings charts, calendarEvents."""

from __future__ import annotations

from .values import Text, Wrapped, YahooModel


class EarningsQuarter(YahooModel):
    quarter: Wrapped = None
    period: Text = None
    eps_actual: Wrapped = None
    eps_estimate: Wrapped = None
    eps_difference: Wrapped = None
    surprise_percent: Wrapped = None


class EarningsHistory(YahooModel):
    """``earningsHistory``: the last four reported quarters."""

    history: list[EarningsQuarter] | None = None


class EarningsChartEntry(YahooModel):
    date: Text = None
    actual: Wrapped = None
    estimate: Wrapped = None


class EarningsChart(YahooModel):
    quarterly: list[EarningsChartEntry] | None = None


class FinancialsChartEntry(YahooModel):
    date: Text = None
    revenue: Wrapped = None
    earnings: Wrapped = None


class FinancialsChart(YahooModel):
    yearly: list[FinancialsChartEntry] | None = None
    quarterly: list[FinancialsChartEntry] | None = None


class Earnings(YahooModel):
    """``earnings``: feeds three tables (EPS chart, yearly and quarterly financials)."""

    earnings_chart: EarningsChart | None = None
    financials_chart: FinancialsChart | None = None
    financial_currency: Text = None


class CalendarEarnings(YahooModel):
    earnings_date: list[Wrapped] | None = None
    earnings_average: Wrapped = None
    earnings_low: Wrapped = None
    earnings_high: Wrapped = None
    revenue_average: Wrapped = None
    revenue_low: Wrapped = None
    revenue_high: Wrapped = None


class CalendarEvents(YahooModel):
    """``calendarEvents``."""

    earnings: CalendarEarnings | None = None
    ex_dividend_date: Wrapped = None
    dividend_date: Wrapped = None
