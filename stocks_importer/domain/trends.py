"""Analyst and index trend sub-documents."""

from __future__ import annotations

from pydantic import Field

from .values import JsonList, Text, Wrapped, YahooModel


class RecommendationPeriod(YahooModel):
    period: Text = None
    strong_buy: Wrapped = None
    buy: Wrapped = None
    hold: Wrapped = None
    sell: Wrapped = None
    strong_sell: Wrapped = None


class RecommendationTrend(YahooModel):
    """``recommendationTrend``: rating counts for 0m, -1m, -2m, -3m."""

    trend: list[RecommendationPeriod] | None = None


class IndexTrendEstimate(YahooModel):
    period: Text = None
    growth: Wrapped = None


class IndexTrend(YahooModel):
    """``indexTrend``: growth estimates for the symbol's benchmark index."""

    index_symbol: Text = Field(None, alias="symbol")
    pe_ratio: Wrapped = None
    peg_ratio: Wrapped = None
    estimates: list[IndexTrendEstimate] | None = None


class PeerTrend(YahooModel):
    """``sectorTrend`` / ``industryTrend``: stored whole, estimates as JSON."""

    trend_symbol: Text = Field(None, alias="symbol")
    pe_ratio: Wrapped = None
    peg_ratio: Wrapped = None
    estimates: JsonList = None


class EarningsEstimate(YahooModel):
    avg: Wrapped = None
    low: Wrapped = None
    high: Wrapped = None
    year_ago_eps: Wrapped = None
    number_of_analysts: Wrapped = None
    growth: Wrapped = None


class RevenueEstimate(YahooModel):
    avg: Wrapped = None
    low: Wrapped = None
    high: Wrapped = None
    number_of_analysts: Wrapped = None
    year_ago_revenue: Wrapped = None
    growth: Wrapped = None


class EpsTrend(YahooModel):
    current: Wrapped = None
    days_ago_7: Wrapped = Field(None, alias="7daysAgo")
    days_ago_30: Wrapped = Field(None, alias="30daysAgo")
    days_ago_60: Wrapped = Field(None, alias="60daysAgo")
    days_ago_90: Wrapped = Field(None, alias="90daysAgo")


class EpsRevisions(YahooModel):
    up_last_7days: Wrapped = Field(None, alias="upLast7days")
    up_last_30days: Wrapped = Field(None, alias="upLast30days")
    down_last_30days: Wrapped = Field(None, alias="downLast30days")
    down_last_90days: Wrapped = Field(None, alias="downLast90days")


class EarningsTrendPeriod(YahooModel):
    period: Text = None
    end_date: Text = None
    growth: Wrapped = None
    earnings_estimate: EarningsEstimate | None = None
    revenue_estimate: RevenueEstimate | None = None
    eps_trend: EpsTrend | None = None
    eps_revisions: EpsRevisions | None = None


class EarningsTrend(YahooModel):
    """``earningsTrend``: consensus for 0q, +1q, 0y, +1y (and longer)."""

    trend: list[EarningsTrendPeriod] | None = None


class GradeChange(YahooModel):
    epoch_grade_date: Wrapped = None
    firm: Text = None
    to_grade: Text = None
    from_grade: Text = None
    action: Text = None


class UpgradeDowngradeHistory(YahooModel):
    """``upgradeDowngradeHistory``."""

    history: list[GradeChange] | None = None
