"""Analyst and index trend mappers."""

from __future__ import annotations

from stocks_importer.domain.trends import (
    EarningsTrend,
    IndexTrend,
    PeerTrend,
    RecommendationTrend,
    UpgradeDowngradeHistory,
)
from stocks_importer.domain.values import raw

from .base import Record, entries, flatten, singleton


def map_recommendation_trend(symbol: str, doc: RecommendationTrend) -> list[Record]:
    return [{"symbol": symbol, **flatten(period)} for period in entries(doc.trend)]


def map_index_trend(symbol: str, doc: IndexTrend) -> list[Record]:
    """One row per estimate period; index-level ratios repeat on each row."""
    return [
        {
            "symbol": symbol,
            "period": estimate.period,
            "growth": raw(estimate.growth),
            "index_symbol": doc.index_symbol,
            "pe_ratio": raw(doc.pe_ratio),
            "peg_ratio": raw(doc.peg_ratio),
        }
        for estimate in entries(doc.estimates)
    ]


def map_peer_trend(symbol: str, doc: PeerTrend) -> list[Record]:
    return singleton(symbol, doc)


def map_earnings_trend(symbol: str, doc: EarningsTrend) -> list[Record]:
    records = []
    for period in entries(doc.trend):
        earnings = period.earnings_estimate
        revenue = period.revenue_estimate
        eps_trend = period.eps_trend
        revisions = period.eps_revisions

        records.append({
            "symbol": symbol,
            "period": period.period,
            "end_date": period.end_date,
            "growth": raw(period.growth),
            "earnings_estimate_avg": raw(earnings.avg) if earnings is not None else None,
            "earnings_estimate_low": raw(earnings.low) if earnings is not None else None,
            "earnings_estimate_high": raw(earnings.high) if earnings is not None else None,
            "earnings_estimate_year_ago_eps": raw(earnings.year_ago_eps) if earnings is not None else None,
            "earnings_estimate_number_of_analysts": raw(earnings.number_of_analysts) if earnings is not None else None,
            "earnings_estimate_growth": raw(earnings.growth) if earnings is not None else None,
            "revenue_estimate_avg": raw(revenue.avg) if revenue is not None else None,
            "revenue_estimate_low": raw(revenue.low) if revenue is not None else None,
            "revenue_estimate_high": raw(revenue.high) if revenue is not None else None,
            "revenue_estimate_number_of_analysts": raw(revenue.number_of_analysts) if revenue is not None else None,
            "revenue_estimate_year_ago_revenue": raw(revenue.year_ago_revenue) if revenue is not None else None,
            "revenue_estimate_growth": raw(revenue.growth) if revenue is not None else None,
            "eps_trend_current": raw(eps_trend.current) if eps_trend is not None else None,
            "eps_trend_7days_ago": raw(eps_trend.days_ago_7) if eps_trend is not None else None,
            "eps_trend_30days_ago": raw(eps_trend.days_ago_30) if eps_trend is not None else None,
            "eps_trend_60days_ago": raw(eps_trend.days_ago_60) if eps_trend is not None else None,
            "eps_trend_90days_ago": raw(eps_trend.days_ago_90) if eps_trend is not None else None,
            "eps_revisions_up_last_7days": raw(revisions.up_last_7days) if revisions is not None else None,
            "eps_revisions_up_last_30days": raw(revisions.up_last_30days) if revisions is not None else None,
            "eps_revisions_down_last_30days": raw(revisions.down_last_30days) if revisions is not None else None,
            "eps_revisions_down_last_90days": raw(revisions.down_last_90days) if revisions is not None else None,
        })
    return records


def map_upgrade_downgrade_history(symbol: str, doc: UpgradeDowngradeHistory) -> list[Record]:
    return [
        {
            "symbol": symbol,
            "grade_date": raw(change.epoch_grade_date),
            "firm": change.firm,
            "to_grade": change.to_grade,
            "from_grade": change.from_grade,
            "action": change.action,
        }
        for change in entries(doc.history)
    ]
