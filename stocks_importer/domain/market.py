"""Market data sub-documents: summaryDetail, price, defaultKeyStatistics, financialData."""

from __future__ import annotations

from pydantic import Field

from .values import Text, Wrapped, YahooModel


class SummaryDetail(YahooModel):
    """``summaryDetail``."""

    price_hint: Wrapped = None
    previous_close: Wrapped = None
    open: Wrapped = None
    day_low: Wrapped = None
    day_high: Wrapped = None
    regular_market_previous_close: Wrapped = None
    regular_market_open: Wrapped = None
    regular_market_day_low: Wrapped = None
    regular_market_day_high: Wrapped = None
    dividend_rate: Wrapped = None
    dividend_yield: Wrapped = None
    ex_dividend_date: Wrapped = None
    payout_ratio: Wrapped = None
    five_year_avg_dividend_yield: Wrapped = None
    beta: Wrapped = None
    trailing_pe: Wrapped = Field(None, alias="trailingPE")
    forward_pe: Wrapped = Field(None, alias="forwardPE")
    volume: Wrapped = None
    regular_market_volume: Wrapped = None
    average_volume: Wrapped = None
    average_volume_10days: Wrapped = Field(None, alias="averageVolume10days")
    average_daily_volume_10_day: Wrapped = Field(None, alias="averageDailyVolume10Day")
    bid: Wrapped = None
    ask: Wrapped = None
    bid_size: Wrapped = None
    ask_size: Wrapped = None
    market_cap: Wrapped = None
    fifty_two_week_low: Wrapped = None
    fifty_two_week_high: Wrapped = None
    price_to_sales_trailing_12_months: Wrapped = Field(None, alias="priceToSalesTrailing12Months")
    fifty_day_average: Wrapped = None
    two_hundred_day_average: Wrapped = None
    trailing_annual_dividend_rate: Wrapped = None
    trailing_annual_dividend_yield: Wrapped = None
    currency: Text = None


class Price(YahooModel):
    """``price``: also feeds the symbol record snapshot."""

    pre_market_change_percent: Wrapped = None
    pre_market_change: Wrapped = None
    pre_market_time: Wrapped = None
    pre_market_price: Wrapped = None
    post_market_change_percent: Wrapped = None
    post_market_change: Wrapped = None
    post_market_time: Wrapped = None
    post_market_price: Wrapped = None
    regular_market_change_percent: Wrapped = None
    regular_market_change: Wrapped = None
    regular_market_time: Wrapped = None
    regular_market_price: Wrapped = None
    regular_market_day_high: Wrapped = None
    regular_market_day_low: Wrapped = None
    regular_market_volume: Wrapped = None
    regular_market_previous_close: Wrapped = None
    regular_market_open: Wrapped = None
    average_daily_volume_10_day: Wrapped = Field(None, alias="averageDailyVolume10Day")
    average_daily_volume_3_month: Wrapped = Field(None, alias="averageDailyVolume3Month")
    exchange: Text = None
    exchange_name: Text = None
    exchange_data_delayed_by: Wrapped = None
    market_state: Text = None
    quote_type: Text = None
    currency: Text = None
    currency_symbol: Text = None
    short_name: Text = None
    long_name: Text = None
    market_cap: Wrapped = None


class DefaultKeyStatistics(YahooModel):
    """``defaultKeyStatistics``."""

    price_hint: Wrapped = None
    enterprise_value: Wrapped = None
    forward_pe: Wrapped = Field(None, alias="forwardPE")
    profit_margins: Wrapped = None
    float_shares: Wrapped = None
    shares_outstanding: Wrapped = None
    shares_short: Wrapped = None
    shares_short_prior_month: Wrapped = None
    shares_short_previous_month_date: Wrapped = None
    date_short_interest: Wrapped = None
    shares_percent_shares_out: Wrapped = None
    held_percent_insiders: Wrapped = None
    held_percent_institutions: Wrapped = None
    short_ratio: Wrapped = None
    short_percent_of_float: Wrapped = None
    beta: Wrapped = None
    implied_shares_outstanding: Wrapped = None
    book_value: Wrapped = None
    price_to_book: Wrapped = None
    last_fiscal_year_end: Wrapped = None
    next_fiscal_year_end: Wrapped = None
    most_recent_quarter: Wrapped = None
    earnings_quarterly_growth: Wrapped = None
    net_income_to_common: Wrapped = None
    trailing_eps: Wrapped = None
    forward_eps: Wrapped = None
    last_split_factor: Text = None
    last_split_date: Wrapped = None
    enterprise_to_revenue: Wrapped = None
    enterprise_to_ebitda: Wrapped = None
    change_52_week: Wrapped = Field(None, alias="52WeekChange")
    sand_p_52_week_change: Wrapped = Field(None, alias="SandP52WeekChange")
    last_dividend_value: Wrapped = None
    last_dividend_date: Wrapped = None


class FinancialData(YahooModel):
    """``financialData``."""

    current_price: Wrapped = None
    target_high_price: Wrapped = None
    target_low_price: Wrapped = None
    target_mean_price: Wrapped = None
    target_median_price: Wrapped = None
    recommendation_mean: Wrapped = None
    recommendation_key: Text = None
    number_of_analyst_opinions: Wrapped = None
    total_cash: Wrapped = None
    total_cash_per_share: Wrapped = None
    ebitda: Wrapped = None
    total_debt: Wrapped = None
    quick_ratio: Wrapped = None
    current_ratio: Wrapped = None
    total_revenue: Wrapped = None
    debt_to_equity: Wrapped = None
    revenue_per_share: Wrapped = None
    return_on_assets: Wrapped = None
    return_on_equity: Wrapped = None
    gross_profits: Wrapped = None
    free_cashflow: Wrapped = None
    operating_cashflow: Wrapped = None
    earnings_growth: Wrapped = None
    revenue_growth: Wrapped = None
    gross_margins: Wrapped = None
    ebitda_margins: Wrapped = None
    operating_margins: Wrapped = None
    profit_margins: Wrapped = None
    financial_currency: Text = None
