"""SQLAlchemy ORM models for the stocks importer.

One root table (``stocks``) and one dependent table per quote summary
sub-document (or per list inside one). Every dependent table references
``stocks.symbol`` with ``ON DELETE CASCADE``; natural keys are enforced by a
primary key (singletons) or a named ``UNIQUE`` constraint (series).

Usage:
    from stocks_importer.database.orm import Stock, AssetProfile

    async with db.session() as session:
        profile = await session.get(AssetProfile, "AAPL")
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    DateTime,
    Float,
    ForeignKey,
    Index,
    MetaData,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# Naming convention for constraints and indexes
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

STOCK_FK = "stocks.symbol"


class Base(DeclarativeBase):
    """Base class for all ORM models with naming convention."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# =============================================================================
# ROOT
# =============================================================================


class Stock(Base):
    """Symbol record: one per ticker, owner of every dependent row."""
    __tablename__ = "stocks"

    symbol: Mapped[str] = mapped_column(String(20), primary_key=True)
    company_name: Mapped[str | None] = mapped_column(String(255))
    category_id: Mapped[str] = mapped_column(String(100), nullable=False)
    category_name: Mapped[str] = mapped_column(String(255), nullable=False)
    market_price: Mapped[float | None] = mapped_column(Float)
    market_cap: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_stocks_category", "category_id"),
    )


# =============================================================================
# PROFILE (singletons)
# =============================================================================


class AssetProfile(Base):
    """Company profile, officers and governance risk scores."""
    __tablename__ = "asset_profile"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    address1: Mapped[str | None] = mapped_column(String(255))
    address2: Mapped[str | None] = mapped_column(String(255))
    city: Mapped[str | None] = mapped_column(String(100))
    state: Mapped[str | None] = mapped_column(String(100))
    zip: Mapped[str | None] = mapped_column(String(20))
    country: Mapped[str | None] = mapped_column(String(100))
    phone: Mapped[str | None] = mapped_column(String(50))
    fax: Mapped[str | None] = mapped_column(String(50))
    website: Mapped[str | None] = mapped_column(String(255))
    industry: Mapped[str | None] = mapped_column(String(255))
    industry_key: Mapped[str | None] = mapped_column(String(255))
    industry_disp: Mapped[str | None] = mapped_column(String(255))
    sector: Mapped[str | None] = mapped_column(String(255))
    sector_key: Mapped[str | None] = mapped_column(String(255))
    sector_disp: Mapped[str | None] = mapped_column(String(255))
    long_business_summary: Mapped[str | None] = mapped_column(Text)
    full_time_employees: Mapped[int | None] = mapped_column(BigInteger)
    company_officers: Mapped[str | None] = mapped_column(Text)  # JSON array
    audit_risk: Mapped[int | None] = mapped_column(BigInteger)
    board_risk: Mapped[int | None] = mapped_column(BigInteger)
    compensation_risk: Mapped[int | None] = mapped_column(BigInteger)
    share_holder_rights_risk: Mapped[int | None] = mapped_column(BigInteger)
    overall_risk: Mapped[int | None] = mapped_column(BigInteger)
    governance_epoch_date: Mapped[int | None] = mapped_column(BigInteger)
    compensation_as_of_epoch_date: Mapped[int | None] = mapped_column(BigInteger)
    ir_website: Mapped[str | None] = mapped_column(String(255))
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class SummaryProfile(Base):
    """Short company profile (no officers or risk scores)."""
    __tablename__ = "summary_profile"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    address1: Mapped[str | None] = mapped_column(String(255))
    city: Mapped[str | None] = mapped_column(String(100))
    state: Mapped[str | None] = mapped_column(String(100))
    zip: Mapped[str | None] = mapped_column(String(20))
    country: Mapped[str | None] = mapped_column(String(100))
    phone: Mapped[str | None] = mapped_column(String(50))
    website: Mapped[str | None] = mapped_column(String(255))
    industry: Mapped[str | None] = mapped_column(String(255))
    industry_key: Mapped[str | None] = mapped_column(String(255))
    industry_disp: Mapped[str | None] = mapped_column(String(255))
    sector: Mapped[str | None] = mapped_column(String(255))
    sector_key: Mapped[str | None] = mapped_column(String(255))
    sector_disp: Mapped[str | None] = mapped_column(String(255))
    long_business_summary: Mapped[str | None] = mapped_column(Text)
    full_time_employees: Mapped[int | None] = mapped_column(BigInteger)
    ir_website: Mapped[str | None] = mapped_column(String(255))
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class QuoteType(Base):
    """Instrument identity: exchange, quote type, names, time zone."""
    __tablename__ = "quote_type"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    exchange: Mapped[str | None] = mapped_column(String(20))
    quote_type: Mapped[str | None] = mapped_column(String(20))
    underlying_symbol: Mapped[str | None] = mapped_column(String(20))
    short_name: Mapped[str | None] = mapped_column(String(255))
    long_name: Mapped[str | None] = mapped_column(String(255))
    first_trade_date_epoch_utc: Mapped[int | None] = mapped_column(BigInteger)
    time_zone_full_name: Mapped[str | None] = mapped_column(String(100))
    time_zone_short_name: Mapped[str | None] = mapped_column(String(20))
    uuid: Mapped[str | None] = mapped_column(String(64))
    message_board_id: Mapped[str | None] = mapped_column(String(100))
    gmt_off_set_milliseconds: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


# =============================================================================
# MARKET DATA (singletons)
# =============================================================================


class SummaryDetail(Base):
    """Trading summary: prices, volumes, dividend and valuation ratios."""
    __tablename__ = "summary_detail"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    price_hint: Mapped[int | None] = mapped_column(BigInteger)
    previous_close: Mapped[float | None] = mapped_column(Float)
    open: Mapped[float | None] = mapped_column(Float)
    day_low: Mapped[float | None] = mapped_column(Float)
    day_high: Mapped[float | None] = mapped_column(Float)
    regular_market_previous_close: Mapped[float | None] = mapped_column(Float)
    regular_market_open: Mapped[float | None] = mapped_column(Float)
    regular_market_day_low: Mapped[float | None] = mapped_column(Float)
    regular_market_day_high: Mapped[float | None] = mapped_column(Float)
    dividend_rate: Mapped[float | None] = mapped_column(Float)
    dividend_yield: Mapped[float | None] = mapped_column(Float)
    ex_dividend_date: Mapped[int | None] = mapped_column(BigInteger)
    payout_ratio: Mapped[float | None] = mapped_column(Float)
    five_year_avg_dividend_yield: Mapped[float | None] = mapped_column(Float)
    beta: Mapped[float | None] = mapped_column(Float)
    trailing_pe: Mapped[float | None] = mapped_column(Float)
    forward_pe: Mapped[float | None] = mapped_column(Float)
    volume: Mapped[int | None] = mapped_column(BigInteger)
    regular_market_volume: Mapped[int | None] = mapped_column(BigInteger)
    average_volume: Mapped[int | None] = mapped_column(BigInteger)
    average_volume_10days: Mapped[int | None] = mapped_column(BigInteger)
    average_daily_volume_10_day: Mapped[int | None] = mapped_column(BigInteger)
    bid: Mapped[float | None] = mapped_column(Float)
    ask: Mapped[float | None] = mapped_column(Float)
    bid_size: Mapped[int | None] = mapped_column(BigInteger)
    ask_size: Mapped[int | None] = mapped_column(BigInteger)
    market_cap: Mapped[int | None] = mapped_column(BigInteger)
    fifty_two_week_low: Mapped[float | None] = mapped_column(Float)
    fifty_two_week_high: Mapped[float | None] = mapped_column(Float)
    price_to_sales_trailing_12_months: Mapped[float | None] = mapped_column(Float)
    fifty_day_average: Mapped[float | None] = mapped_column(Float)
    two_hundred_day_average: Mapped[float | None] = mapped_column(Float)
    trailing_annual_dividend_rate: Mapped[float | None] = mapped_column(Float)
    trailing_annual_dividend_yield: Mapped[float | None] = mapped_column(Float)
    currency: Mapped[str | None] = mapped_column(String(10))
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class Price(Base):
    """Latest regular, pre and post market quote."""
    __tablename__ = "price"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    pre_market_change_percent: Mapped[float | None] = mapped_column(Float)
    pre_market_change: Mapped[float | None] = mapped_column(Float)
    pre_market_time: Mapped[int | None] = mapped_column(BigInteger)
    pre_market_price: Mapped[float | None] = mapped_column(Float)
    post_market_change_percent: Mapped[float | None] = mapped_column(Float)
    post_market_change: Mapped[float | None] = mapped_column(Float)
    post_market_time: Mapped[int | None] = mapped_column(BigInteger)
    post_market_price: Mapped[float | None] = mapped_column(Float)
    regular_market_change_percent: Mapped[float | None] = mapped_column(Float)
    regular_market_change: Mapped[float | None] = mapped_column(Float)
    regular_market_time: Mapped[int | None] = mapped_column(BigInteger)
    regular_market_price: Mapped[float | None] = mapped_column(Float)
    regular_market_day_high: Mapped[float | None] = mapped_column(Float)
    regular_market_day_low: Mapped[float | None] = mapped_column(Float)
    regular_market_volume: Mapped[int | None] = mapped_column(BigInteger)
    regular_market_previous_close: Mapped[float | None] = mapped_column(Float)
    regular_market_open: Mapped[float | None] = mapped_column(Float)
    average_daily_volume_10_day: Mapped[int | None] = mapped_column(BigInteger)
    average_daily_volume_3_month: Mapped[int | None] = mapped_column(BigInteger)
    exchange: Mapped[str | None] = mapped_column(String(20))
    exchange_name: Mapped[str | None] = mapped_column(String(100))
    exchange_data_delayed_by: Mapped[int | None] = mapped_column(BigInteger)
    market_state: Mapped[str | None] = mapped_column(String(20))
    quote_type: Mapped[str | None] = mapped_column(String(20))
    currency: Mapped[str | None] = mapped_column(String(10))
    currency_symbol: Mapped[str | None] = mapped_column(String(10))
    short_name: Mapped[str | None] = mapped_column(String(255))
    long_name: Mapped[str | None] = mapped_column(String(255))
    market_cap: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class DefaultKeyStatistics(Base):
    """Share structure, short interest and per-share valuation figures."""
    __tablename__ = "default_key_statistics"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    price_hint: Mapped[int | None] = mapped_column(BigInteger)
    enterprise_value: Mapped[int | None] = mapped_column(BigInteger)
    forward_pe: Mapped[float | None] = mapped_column(Float)
    profit_margins: Mapped[float | None] = mapped_column(Float)
    float_shares: Mapped[int | None] = mapped_column(BigInteger)
    shares_outstanding: Mapped[int | None] = mapped_column(BigInteger)
    shares_short: Mapped[int | None] = mapped_column(BigInteger)
    shares_short_prior_month: Mapped[int | None] = mapped_column(BigInteger)
    shares_short_previous_month_date: Mapped[int | None] = mapped_column(BigInteger)
    date_short_interest: Mapped[int | None] = mapped_column(BigInteger)
    shares_percent_shares_out: Mapped[float | None] = mapped_column(Float)
    held_percent_insiders: Mapped[float | None] = mapped_column(Float)
    held_percent_institutions: Mapped[float | None] = mapped_column(Float)
    short_ratio: Mapped[float | None] = mapped_column(Float)
    short_percent_of_float: Mapped[float | None] = mapped_column(Float)
    beta: Mapped[float | None] = mapped_column(Float)
    implied_shares_outstanding: Mapped[int | None] = mapped_column(BigInteger)
    book_value: Mapped[float | None] = mapped_column(Float)
    price_to_book: Mapped[float | None] = mapped_column(Float)
    last_fiscal_year_end: Mapped[int | None] = mapped_column(BigInteger)
    next_fiscal_year_end: Mapped[int | None] = mapped_column(BigInteger)
    most_recent_quarter: Mapped[int | None] = mapped_column(BigInteger)
    earnings_quarterly_growth: Mapped[float | None] = mapped_column(Float)
    net_income_to_common: Mapped[int | None] = mapped_column(BigInteger)
    trailing_eps: Mapped[float | None] = mapped_column(Float)
    forward_eps: Mapped[float | None] = mapped_column(Float)
    last_split_factor: Mapped[str | None] = mapped_column(String(20))
    last_split_date: Mapped[int | None] = mapped_column(BigInteger)
    enterprise_to_revenue: Mapped[float | None] = mapped_column(Float)
    enterprise_to_ebitda: Mapped[float | None] = mapped_column(Float)
    change_52_week: Mapped[float | None] = mapped_column(Float)
    sand_p_52_week_change: Mapped[float | None] = mapped_column(Float)
    last_dividend_value: Mapped[float | None] = mapped_column(Float)
    last_dividend_date: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class FinancialData(Base):
    """Analyst targets, margins, cash and debt figures."""
    __tablename__ = "financial_data"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    current_price: Mapped[float | None] = mapped_column(Float)
    target_high_price: Mapped[float | None] = mapped_column(Float)
    target_low_price: Mapped[float | None] = mapped_column(Float)
    target_mean_price: Mapped[float | None] = mapped_column(Float)
    target_median_price: Mapped[float | None] = mapped_column(Float)
    recommendation_mean: Mapped[float | None] = mapped_column(Float)
    recommendation_key: Mapped[str | None] = mapped_column(String(50))
    number_of_analyst_opinions: Mapped[int | None] = mapped_column(BigInteger)
    total_cash: Mapped[int | None] = mapped_column(BigInteger)
    total_cash_per_share: Mapped[float | None] = mapped_column(Float)
    ebitda: Mapped[int | None] = mapped_column(BigInteger)
    total_debt: Mapped[int | None] = mapped_column(BigInteger)
    quick_ratio: Mapped[float | None] = mapped_column(Float)
    current_ratio: Mapped[float | None] = mapped_column(Float)
    total_revenue: Mapped[int | None] = mapped_column(BigInteger)
    debt_to_equity: Mapped[float | None] = mapped_column(Float)
    revenue_per_share: Mapped[float | None] = mapped_column(Float)
    return_on_assets: Mapped[float | None] = mapped_column(Float)
    return_on_equity: Mapped[float | None] = mapped_column(Float)
    gross_profits: Mapped[int | None] = mapped_column(BigInteger)
    free_cashflow: Mapped[int | None] = mapped_column(BigInteger)
    operating_cashflow: Mapped[int | None] = mapped_column(BigInteger)
    earnings_growth: Mapped[float | None] = mapped_column(Float)
    revenue_growth: Mapped[float | None] = mapped_column(Float)
    gross_margins: Mapped[float | None] = mapped_column(Float)
    ebitda_margins: Mapped[float | None] = mapped_column(Float)
    operating_margins: Mapped[float | None] = mapped_column(Float)
    profit_margins: Mapped[float | None] = mapped_column(Float)
    financial_currency: Mapped[str | None] = mapped_column(String(10))
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


# =============================================================================
# HOLDERS (singletons)
# =============================================================================


class MajorHoldersBreakdown(Base):
    """Insider and institutional ownership percentages."""
    __tablename__ = "major_holders_breakdown"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    insiders_percent_held: Mapped[float | None] = mapped_column(Float)
    institutions_percent_held: Mapped[float | None] = mapped_column(Float)
    institutions_float_percent_held: Mapped[float | None] = mapped_column(Float)
    institutions_count: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class MajorDirectHolders(Base):
    __tablename__ = "major_direct_holders"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    holders: Mapped[str | None] = mapped_column(Text)  # JSON array
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class NetSharePurchaseActivity(Base):
    """Insider buy/sell totals over the reported period."""
    __tablename__ = "net_share_purchase_activity"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    period: Mapped[str | None] = mapped_column(String(20))
    buy_info_count: Mapped[int | None] = mapped_column(BigInteger)
    buy_info_shares: Mapped[int | None] = mapped_column(BigInteger)
    buy_percent_insider_shares: Mapped[float | None] = mapped_column(Float)
    sell_info_count: Mapped[int | None] = mapped_column(BigInteger)
    sell_info_shares: Mapped[int | None] = mapped_column(BigInteger)
    sell_percent_insider_shares: Mapped[float | None] = mapped_column(Float)
    net_info_count: Mapped[int | None] = mapped_column(BigInteger)
    net_info_shares: Mapped[int | None] = mapped_column(BigInteger)
    net_percent_insider_shares: Mapped[float | None] = mapped_column(Float)
    total_insider_shares: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


# =============================================================================
# SECTOR / INDUSTRY TRENDS (singletons)
# =============================================================================


class SectorTrend(Base):
    __tablename__ = "sector_trend"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    trend_symbol: Mapped[str | None] = mapped_column(String(20))
    pe_ratio: Mapped[float | None] = mapped_column(Float)
    peg_ratio: Mapped[float | None] = mapped_column(Float)
    estimates: Mapped[str | None] = mapped_column(Text)  # JSON array
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class IndustryTrend(Base):
    __tablename__ = "industry_trend"

    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), primary_key=True)
    trend_symbol: Mapped[str | None] = mapped_column(String(20))
    pe_ratio: Mapped[float | None] = mapped_column(Float)
    peg_ratio: Mapped[float | None] = mapped_column(Float)
    estimates: Mapped[str | None] = mapped_column(Text)  # JSON array
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


# =============================================================================
# ANALYST TRENDS (series)
# =============================================================================


class RecommendationTrend(Base):
    """Analyst rating counts per relative period (0m, -1m, ...)."""
    __tablename__ = "recommendation_trend"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    period: Mapped[str] = mapped_column(String(20), nullable=False)
    strong_buy: Mapped[int | None] = mapped_column(BigInteger)
    buy: Mapped[int | None] = mapped_column(BigInteger)
    hold: Mapped[int | None] = mapped_column(BigInteger)
    sell: Mapped[int | None] = mapped_column(BigInteger)
    strong_sell: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "period", name="uq_recommendation_trend_symbol_period"),
    )


class IndexTrend(Base):
    """Index growth estimates per period, with the index PE/PEG."""
    __tablename__ = "index_trend"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    period: Mapped[str] = mapped_column(String(20), nullable=False)
    growth: Mapped[float | None] = mapped_column(Float)
    index_symbol: Mapped[str | None] = mapped_column(String(20))
    pe_ratio: Mapped[float | None] = mapped_column(Float)
    peg_ratio: Mapped[float | None] = mapped_column(Float)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "period", name="uq_index_trend_symbol_period"),
    )


class EarningsTrend(Base):
    """Consensus EPS/revenue estimates, EPS trend and revisions per period."""
    __tablename__ = "earnings_trend"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    period: Mapped[str] = mapped_column(String(20), nullable=False)
    end_date: Mapped[str | None] = mapped_column(String(20))
    growth: Mapped[float | None] = mapped_column(Float)
    earnings_estimate_avg: Mapped[float | None] = mapped_column(Float)
    earnings_estimate_low: Mapped[float | None] = mapped_column(Float)
    earnings_estimate_high: Mapped[float | None] = mapped_column(Float)
    earnings_estimate_year_ago_eps: Mapped[float | None] = mapped_column(Float)
    earnings_estimate_number_of_analysts: Mapped[int | None] = mapped_column(BigInteger)
    earnings_estimate_growth: Mapped[float | None] = mapped_column(Float)
    revenue_estimate_avg: Mapped[int | None] = mapped_column(BigInteger)
    revenue_estimate_low: Mapped[int | None] = mapped_column(BigInteger)
    revenue_estimate_high: Mapped[int | None] = mapped_column(BigInteger)
    revenue_estimate_number_of_analysts: Mapped[int | None] = mapped_column(BigInteger)
    revenue_estimate_year_ago_revenue: Mapped[int | None] = mapped_column(BigInteger)
    revenue_estimate_growth: Mapped[float | None] = mapped_column(Float)
    eps_trend_current: Mapped[float | None] = mapped_column(Float)
    eps_trend_7days_ago: Mapped[float | None] = mapped_column(Float)
    eps_trend_30days_ago: Mapped[float | None] = mapped_column(Float)
    eps_trend_60days_ago: Mapped[float | None] = mapped_column(Float)
    eps_trend_90days_ago: Mapped[float | None] = mapped_column(Float)
    eps_revisions_up_last_7days: Mapped[int | None] = mapped_column(BigInteger)
    eps_revisions_up_last_30days: Mapped[int | None] = mapped_column(BigInteger)
    eps_revisions_down_last_30days: Mapped[int | None] = mapped_column(BigInteger)
    eps_revisions_down_last_90days: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "period", name="uq_earnings_trend_symbol_period"),
    )


class UpgradeDowngradeHistory(Base):
    """Broker rating changes keyed by grade date and firm."""
    __tablename__ = "upgrade_downgrade_history"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    grade_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    firm: Mapped[str] = mapped_column(String(255), nullable=False)
    to_grade: Mapped[str | None] = mapped_column(String(100))
    from_grade: Mapped[str | None] = mapped_column(String(100))
    action: Mapped[str | None] = mapped_column(String(20))
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "grade_date", "firm", name="uq_upgrade_downgrade_history_symbol_date_firm"),
    )


# =============================================================================
# FINANCIAL STATEMENTS (series keyed by statement end date)
# =============================================================================


class CashflowColumns:
    """Value columns shared by the annual and quarterly cash flow tables."""

    end_date_fmt: Mapped[str | None] = mapped_column(String(20))
    net_income: Mapped[int | None] = mapped_column(BigInteger)
    depreciation: Mapped[int | None] = mapped_column(BigInteger)
    change_to_netincome: Mapped[int | None] = mapped_column(BigInteger)
    change_to_account_receivables: Mapped[int | None] = mapped_column(BigInteger)
    change_to_liabilities: Mapped[int | None] = mapped_column(BigInteger)
    change_to_inventory: Mapped[int | None] = mapped_column(BigInteger)
    change_to_operating_activities: Mapped[int | None] = mapped_column(BigInteger)
    total_cash_from_operating_activities: Mapped[int | None] = mapped_column(BigInteger)
    capital_expenditures: Mapped[int | None] = mapped_column(BigInteger)
    investments: Mapped[int | None] = mapped_column(BigInteger)
    other_cashflows_from_investing_activities: Mapped[int | None] = mapped_column(BigInteger)
    total_cashflows_from_investing_activities: Mapped[int | None] = mapped_column(BigInteger)
    dividends_paid: Mapped[int | None] = mapped_column(BigInteger)
    net_borrowings: Mapped[int | None] = mapped_column(BigInteger)
    other_cashflows_from_financing_activities: Mapped[int | None] = mapped_column(BigInteger)
    total_cash_from_financing_activities: Mapped[int | None] = mapped_column(BigInteger)
    change_in_cash: Mapped[int | None] = mapped_column(BigInteger)
    repurchase_of_stock: Mapped[int | None] = mapped_column(BigInteger)
    issuance_of_stock: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class CashflowStatementHistory(CashflowColumns, Base):
    __tablename__ = "cashflow_statement_history"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    end_date: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("symbol", "end_date", name="uq_cashflow_statement_history_symbol_end_date"),
    )


class CashflowStatementHistoryQuarterly(CashflowColumns, Base):
    __tablename__ = "cashflow_statement_history_quarterly"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    end_date: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("symbol", "end_date", name="uq_cashflow_statement_history_quarterly_symbol_end_date"),
    )


class IncomeStatementColumns:
    """Value columns shared by the annual and quarterly income tables."""

    end_date_fmt: Mapped[str | None] = mapped_column(String(20))
    total_revenue: Mapped[int | None] = mapped_column(BigInteger)
    cost_of_revenue: Mapped[int | None] = mapped_column(BigInteger)
    gross_profit: Mapped[int | None] = mapped_column(BigInteger)
    research_development: Mapped[int | None] = mapped_column(BigInteger)
    selling_general_administrative: Mapped[int | None] = mapped_column(BigInteger)
    total_operating_expenses: Mapped[int | None] = mapped_column(BigInteger)
    operating_income: Mapped[int | None] = mapped_column(BigInteger)
    total_other_income_expense_net: Mapped[int | None] = mapped_column(BigInteger)
    ebit: Mapped[int | None] = mapped_column(BigInteger)
    interest_expense: Mapped[int | None] = mapped_column(BigInteger)
    income_before_tax: Mapped[int | None] = mapped_column(BigInteger)
    income_tax_expense: Mapped[int | None] = mapped_column(BigInteger)
    net_income_from_continuing_ops: Mapped[int | None] = mapped_column(BigInteger)
    net_income: Mapped[int | None] = mapped_column(BigInteger)
    net_income_applicable_to_common_shares: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class IncomeStatementHistory(IncomeStatementColumns, Base):
    __tablename__ = "income_statement_history"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    end_date: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("symbol", "end_date", name="uq_income_statement_history_symbol_end_date"),
    )


class IncomeStatementHistoryQuarterly(IncomeStatementColumns, Base):
    __tablename__ = "income_statement_history_quarterly"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    end_date: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("symbol", "end_date", name="uq_income_statement_history_quarterly_symbol_end_date"),
    )


class BalanceSheetColumns:
    """Value columns shared by the annual and quarterly balance sheet tables."""

    end_date_fmt: Mapped[str | None] = mapped_column(String(20))
    cash: Mapped[int | None] = mapped_column(BigInteger)
    short_term_investments: Mapped[int | None] = mapped_column(BigInteger)
    net_receivables: Mapped[int | None] = mapped_column(BigInteger)
    inventory: Mapped[int | None] = mapped_column(BigInteger)
    other_current_assets: Mapped[int | None] = mapped_column(BigInteger)
    total_current_assets: Mapped[int | None] = mapped_column(BigInteger)
    long_term_investments: Mapped[int | None] = mapped_column(BigInteger)
    property_plant_equipment: Mapped[int | None] = mapped_column(BigInteger)
    good_will: Mapped[int | None] = mapped_column(BigInteger)
    intangible_assets: Mapped[int | None] = mapped_column(BigInteger)
    other_assets: Mapped[int | None] = mapped_column(BigInteger)
    total_assets: Mapped[int | None] = mapped_column(BigInteger)
    accounts_payable: Mapped[int | None] = mapped_column(BigInteger)
    short_long_term_debt: Mapped[int | None] = mapped_column(BigInteger)
    other_current_liab: Mapped[int | None] = mapped_column(BigInteger)
    total_current_liabilities: Mapped[int | None] = mapped_column(BigInteger)
    long_term_debt: Mapped[int | None] = mapped_column(BigInteger)
    other_liab: Mapped[int | None] = mapped_column(BigInteger)
    total_liab: Mapped[int | None] = mapped_column(BigInteger)
    common_stock: Mapped[int | None] = mapped_column(BigInteger)
    retained_earnings: Mapped[int | None] = mapped_column(BigInteger)
    treasury_stock: Mapped[int | None] = mapped_column(BigInteger)
    other_stockholder_equity: Mapped[int | None] = mapped_column(BigInteger)
    total_stockholder_equity: Mapped[int | None] = mapped_column(BigInteger)
    net_tangible_assets: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class BalanceSheetHistory(BalanceSheetColumns, Base):
    __tablename__ = "balance_sheet_history"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    end_date: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("symbol", "end_date", name="uq_balance_sheet_history_symbol_end_date"),
    )


class BalanceSheetHistoryQuarterly(BalanceSheetColumns, Base):
    __tablename__ = "balance_sheet_history_quarterly"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    end_date: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("symbol", "end_date", name="uq_balance_sheet_history_quarterly_symbol_end_date"),
    )


# =============================================================================
# EARNINGS (series)
# =============================================================================


class EarningsHistory(Base):
    """Reported vs estimated EPS for the last four quarters."""
    __tablename__ = "earnings_history"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    quarter: Mapped[int] = mapped_column(BigInteger, nullable=False)
    quarter_fmt: Mapped[str | None] = mapped_column(String(20))
    period: Mapped[str | None] = mapped_column(String(20))
    eps_actual: Mapped[float | None] = mapped_column(Float)
    eps_estimate: Mapped[float | None] = mapped_column(Float)
    eps_difference: Mapped[float | None] = mapped_column(Float)
    surprise_percent: Mapped[float | None] = mapped_column(Float)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "quarter", name="uq_earnings_history_symbol_quarter"),
    )


class EarningsChart(Base):
    """Quarterly actual vs estimate EPS, keyed by label like ``3Q2024``."""
    __tablename__ = "earnings_chart"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    date: Mapped[str] = mapped_column(String(20), nullable=False)
    actual: Mapped[float | None] = mapped_column(Float)
    estimate: Mapped[float | None] = mapped_column(Float)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "date", name="uq_earnings_chart_symbol_date"),
    )


class FinancialsChartYearly(Base):
    __tablename__ = "financials_chart_yearly"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    date: Mapped[str] = mapped_column(String(20), nullable=False)
    revenue: Mapped[int | None] = mapped_column(BigInteger)
    earnings: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "date", name="uq_financials_chart_yearly_symbol_date"),
    )


class FinancialsChartQuarterly(Base):
    __tablename__ = "financials_chart_quarterly"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    date: Mapped[str] = mapped_column(String(20), nullable=False)
    revenue: Mapped[int | None] = mapped_column(BigInteger)
    earnings: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "date", name="uq_financials_chart_quarterly_symbol_date"),
    )


class CalendarEvents(Base):
    """Upcoming earnings date(s) with consensus, plus dividend dates.

    One row per announced earnings date; Yahoo sends a range (two dates)
    when the exact day is not confirmed.
    """
    __tablename__ = "calendar_events"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    earnings_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    earnings_date_fmt: Mapped[str | None] = mapped_column(String(20))
    earnings_average: Mapped[float | None] = mapped_column(Float)
    earnings_low: Mapped[float | None] = mapped_column(Float)
    earnings_high: Mapped[float | None] = mapped_column(Float)
    revenue_average: Mapped[int | None] = mapped_column(BigInteger)
    revenue_low: Mapped[int | None] = mapped_column(BigInteger)
    revenue_high: Mapped[int | None] = mapped_column(BigInteger)
    ex_dividend_date: Mapped[int | None] = mapped_column(BigInteger)
    dividend_date: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "earnings_date", name="uq_calendar_events_symbol_earnings_date"),
    )


# =============================================================================
# OWNERSHIP (multi-holder)
# =============================================================================


class OwnershipColumns:
    """Value columns shared by fund and institution ownership."""

    report_date_fmt: Mapped[str | None] = mapped_column(String(20))
    pct_held: Mapped[float | None] = mapped_column(Float)
    position: Mapped[int | None] = mapped_column(BigInteger)
    value: Mapped[int | None] = mapped_column(BigInteger)
    pct_change: Mapped[float | None] = mapped_column(Float)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class FundOwnership(OwnershipColumns, Base):
    __tablename__ = "fund_ownership"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    report_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    organization: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("symbol", "report_date", "organization", name="uq_fund_ownership_symbol_date_org"),
    )


class InstitutionOwnership(OwnershipColumns, Base):
    __tablename__ = "institution_ownership"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    report_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    organization: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("symbol", "report_date", "organization", name="uq_institution_ownership_symbol_date_org"),
    )


class InsiderHolders(Base):
    """Insider positions, one row per (name, relation)."""
    __tablename__ = "insider_holders"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    relation: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str | None] = mapped_column(String(500))
    transaction_description: Mapped[str | None] = mapped_column(String(255))
    latest_trans_date: Mapped[int | None] = mapped_column(BigInteger)
    position_direct: Mapped[int | None] = mapped_column(BigInteger)
    position_direct_date: Mapped[int | None] = mapped_column(BigInteger)
    position_indirect: Mapped[int | None] = mapped_column(BigInteger)
    position_indirect_date: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "name", "relation", name="uq_insider_holders_symbol_name_relation"),
    )


class InsiderTransactions(Base):
    """Insider filings keyed by filer and transaction start date."""
    __tablename__ = "insider_transactions"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(20), ForeignKey(STOCK_FK, ondelete="CASCADE"), nullable=False)
    filer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    start_date_fmt: Mapped[str | None] = mapped_column(String(20))
    filer_relation: Mapped[str | None] = mapped_column(String(255))
    filer_url: Mapped[str | None] = mapped_column(String(500))
    transaction_text: Mapped[str | None] = mapped_column(Text)
    money_text: Mapped[str | None] = mapped_column(String(255))
    ownership: Mapped[str | None] = mapped_column(String(10))
    shares: Mapped[int | None] = mapped_column(BigInteger)
    value: Mapped[int | None] = mapped_column(BigInteger)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("symbol", "filer_name", "start_date", name="uq_insider_transactions_symbol_filer_date"),
    )
