"""Company identity sub-documents: assetProfile, summaryProfile, quoteType."""

from __future__ import annotations

from pydantic import Field

from .values import JsonList, Text, Wrapped, YahooModel


class AssetProfile(YahooModel):
    """``assetProfile``: address, classification, officers, governance risk."""

    address1: Text = None
    address2: Text = None
    city: Text = None
    state: Text = None
    zip: Text = None
    country: Text = None
    phone: Text = None
    fax: Text = None
    website: Text = None
    industry: Text = None
    industry_key: Text = None
    industry_disp: Text = None
    sector: Text = None
    sector_key: Text = None
    sector_disp: Text = None
    long_business_summary: Text = None
    full_time_employees: Wrapped = None
    company_officers: JsonList = None
    audit_risk: Wrapped = None
    board_risk: Wrapped = None
    compensation_risk: Wrapped = None
    share_holder_rights_risk: Wrapped = None
    overall_risk: Wrapped = None
    governance_epoch_date: Wrapped = None
    compensation_as_of_epoch_date: Wrapped = None
    ir_website: Text = None


class SummaryProfile(YahooModel):
    """``summaryProfile``: the profile without officers or risk scores."""

    address1: Text = None
    city: Text = None
    state: Text = None
    zip: Text = None
    country: Text = None
    phone: Text = None
    website: Text = None
    industry: Text = None
    industry_key: Text = None
    industry_disp: Text = None
    sector: Text = None
    sector_key: Text = None
    sector_disp: Text = None
    long_business_summary: Text = None
    full_time_employees: Wrapped = None
    ir_website: Text = None


class QuoteType(YahooModel):
    """``quoteType``."""

    exchange: Text = None
    quote_type: Text = None
    underlying_symbol: Text = None
    short_name: Text = None
    long_name: Text = None
    first_trade_date_epoch_utc: Wrapped = None
    time_zone_full_name: Text = None
    time_zone_short_name: Text = None
    uuid: Text = None
    message_board_id: Text = None
    gmt_off_set_milliseconds: Wrapped = Field(None, alias="gmtOffSetMilliseconds")
