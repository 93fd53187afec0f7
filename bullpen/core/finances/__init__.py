"""Franchise money: revenue, expenses, attendance and contracts."""

from bullpen.core.finances.attendance import AttendanceResult, calculate_attendance
from bullpen.core.finances.config import (
    DEFAULT_FINANCIAL_CONFIG,
    FinancialConfig,
    SponsorshipBand,
)
from bullpen.core.finances.contracts import (
    ContractOffer,
    FreeAgentOutcome,
    FreeAgentResult,
    PayrollSummary,
    calculate_contract_years,
    calculate_payroll,
    calculate_resign_probability,
    calculate_salary,
    can_afford_salary,
    expiring_contracts,
    generate_contract_offer,
    generate_rookie_contract,
    player_accepts_offer,
    process_contract_expiration,
)
from bullpen.core.finances.expenses import ExpenseBreakdown
from bullpen.core.finances.revenue import RevenueBreakdown
from bullpen.core.finances.simulation import (
    BankruptcyStatus,
    BudgetRecommendation,
    FinancialSimulationResult,
    calculate_minimum_roster_cost,
    calculate_player_salary,
    check_bankruptcy_status,
    classify_bankruptcy_risk,
    debt_ratio,
    generate_budget_recommendations,
    simulate_finances,
)

__all__ = [
    "AttendanceResult",
    "BankruptcyStatus",
    "BudgetRecommendation",
    "ContractOffer",
    "DEFAULT_FINANCIAL_CONFIG",
    "ExpenseBreakdown",
    "FinancialConfig",
    "FinancialSimulationResult",
    "FreeAgentOutcome",
    "FreeAgentResult",
    "PayrollSummary",
    "RevenueBreakdown",
    "SponsorshipBand",
    "calculate_attendance",
    "calculate_contract_years",
    "calculate_minimum_roster_cost",
    "calculate_payroll",
    "calculate_player_salary",
    "calculate_resign_probability",
    "calculate_salary",
    "can_afford_salary",
    "check_bankruptcy_status",
    "classify_bankruptcy_risk",
    "debt_ratio",
    "expiring_contracts",
    "generate_budget_recommendations",
    "generate_contract_offer",
    "generate_rookie_contract",
    "player_accepts_offer",
    "process_contract_expiration",
    "simulate_finances",
]
