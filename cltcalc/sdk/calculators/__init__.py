"""calculators - Independent payroll and benefit calculators.

Each calculator takes primitive inputs and returns a small result record.
None of them is composed with the termination engine.
"""

from .unemployment import (
    calculate_unemployment_benefit,
    average_salary,
    benefit_installments,
    payment_schedule,
    UnemploymentResult,
    Payment,
)
from .vacation import calculate_vacation, entitled_vacation_days, VacationResult
from .overtime import (
    calculate_overtime,
    calculate_night_shift,
    OvertimeResult,
    NightShiftResult,
)
from .fgts import (
    calculate_fgts_anniversary,
    project_fgts_scenarios,
    AnniversaryWithdrawal,
    FgtsProjection,
)
from .investment import calculate_investment_projection, InvestmentProjection
from .salary import (
    calculate_net_salary,
    calculate_thirteenth_salary,
    exit_date_strategy,
    NetSalaryResult,
    ThirteenthSalaryResult,
    ExitDateStrategy,
)
from .domestic import calculate_domestic_payroll, DomesticPayroll, DaeGuide
from .clt_vs_pj import compare_clt_pj, CltVsPjResult, CltPackage, PjPackage
from .timesheet import calculate_work_schedule, WorkSchedule
from .survival import project_survival, SurvivalProjection, MonthBalance

__all__ = [
    "calculate_unemployment_benefit",
    "average_salary",
    "benefit_installments",
    "payment_schedule",
    "UnemploymentResult",
    "Payment",
    "calculate_vacation",
    "entitled_vacation_days",
    "VacationResult",
    "calculate_overtime",
    "calculate_night_shift",
    "OvertimeResult",
    "NightShiftResult",
    "calculate_fgts_anniversary",
    "project_fgts_scenarios",
    "AnniversaryWithdrawal",
    "FgtsProjection",
    "calculate_investment_projection",
    "InvestmentProjection",
    "calculate_net_salary",
    "calculate_thirteenth_salary",
    "exit_date_strategy",
    "NetSalaryResult",
    "ThirteenthSalaryResult",
    "ExitDateStrategy",
    "calculate_domestic_payroll",
    "DomesticPayroll",
    "DaeGuide",
    "compare_clt_pj",
    "CltVsPjResult",
    "CltPackage",
    "PjPackage",
    "calculate_work_schedule",
    "WorkSchedule",
    "project_survival",
    "SurvivalProjection",
    "MonthBalance",
]
