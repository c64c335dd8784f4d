"""Financial statement sub-documents (annual and quarterly share a shape)."""

from __future__ import annotations

from .values import Wrapped, YahooModel


class CashflowStatement(YahooModel):
    end_date: Wrapped = None
    net_income: Wrapped = None
    depreciation: Wrapped = None
    change_to_netincome: Wrapped = None
    change_to_account_receivables: Wrapped = None
    change_to_liabilities: Wrapped = None
    change_to_inventory: Wrapped = None
    change_to_operating_activities: Wrapped = None
    total_cash_from_operating_activities: Wrapped = None
    capital_expenditures: Wrapped = None
    investments: Wrapped = None
    other_cashflows_from_investing_activities: Wrapped = None
    total_cashflows_from_investing_activities: Wrapped = None
    dividends_paid: Wrapped = None
    net_borrowings: Wrapped = None
    other_cashflows_from_financing_activities: Wrapped = None
    total_cash_from_financing_activities: Wrapped = None
    change_in_cash: Wrapped = None
    repurchase_of_stock: Wrapped = None
    issuance_of_stock: Wrapped = None


class CashflowStatementHistory(YahooModel):
    """``cashflowStatementHistory`` / ``cashflowStatementHistoryQuarterly``."""

    cashflow_statements: list[CashflowStatement] | None = None


class IncomeStatement(YahooModel):
    end_date: Wrapped = None
    total_revenue: Wrapped = None
    cost_of_revenue: Wrapped = None
    gross_profit: Wrapped = None
    research_development: Wrapped = None
    selling_general_administrative: Wrapped = None
    total_operating_expenses: Wrapped = None
    operating_income: Wrapped = None
    total_other_income_expense_net: Wrapped = None
    ebit: Wrapped = None
    interest_expense: Wrapped = None
    income_before_tax: Wrapped = None
    income_tax_expense: Wrapped = None
    net_income_from_continuing_ops: Wrapped = None
    net_income: Wrapped = None
    net_income_applicable_to_common_shares: Wrapped = None


class IncomeStatementHistory(YahooModel):
    """``incomeStatementHistory`` / ``incomeStatementHistoryQuarterly``."""

    income_statement_history: list[IncomeStatement] | None = None


class BalanceSheet(YahooModel):
    end_date: Wrapped = None
    cash: Wrapped = None
    short_term_investments: Wrapped = None
    net_receivables: Wrapped = None
    inventory: Wrapped = None
    other_current_assets: Wrapped = None
    total_current_assets: Wrapped = None
    long_term_investments: Wrapped = None
    property_plant_equipment: Wrapped = None
    good_will: Wrapped = None
    intangible_assets: Wrapped = None
    other_assets: Wrapped = None
    total_assets: Wrapped = None
    accounts_payable: Wrapped = None
    short_long_term_debt: Wrapped = None
    other_current_liab: Wrapped = None
    total_current_liabilities: Wrapped = None
    long_term_debt: Wrapped = None
    other_liab: Wrapped = None
    total_liab: Wrapped = None
    common_stock: Wrapped = None
    retained_earnings: Wrapped = None
    treasury_stock: Wrapped = None
    other_stockholder_equity: Wrapped = None
    total_stockholder_equity: Wrapped = None
    net_tangible_assets: Wrapped = None


class BalanceSheetHistory(YahooModel):
    """``balanceSheetHistory`` / ``balanceSheetHistoryQuarterly``."""

    balance_sheet_statements: list[BalanceSheet] | None = None
