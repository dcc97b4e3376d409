"""CLT Calc MCP Server - FastMCP implementation for severance and payroll tools."""

import dataclasses
import json
import logging
from datetime import date
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from cltcalc.sdk import (
    NoticeType,
    TerminationInputs,
    TerminationReason,
    allowed_notice_types,
    average_salary,
    calculate_domestic_payroll as sdk_calculate_domestic_payroll,
    calculate_fgts_anniversary as sdk_calculate_fgts_anniversary,
    calculate_overtime as sdk_calculate_overtime,
    calculate_termination as sdk_calculate_termination,
    calculate_unemployment_benefit as sdk_calculate_unemployment_benefit,
    calculate_vacation as sdk_calculate_vacation,
    compare_clt_pj as sdk_compare_clt_pj,
    configure_logging,
    load_tax_rules,
    validate_inputs,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("clt-calc")


def _dump(obj: Any) -> Any:
    """Dataclass or plain structure to JSON-safe values (dates as ISO strings)."""
    if dataclasses.is_dataclass(obj):
        obj = dataclasses.asdict(obj)
    return json.loads(json.dumps(obj, default=str))


# --- Tools ---

@mcp.tool()
async def calculate_termination(
    salary: float = Field(description="Monthly gross salary in BRL"),
    start_date: str = Field(description="Contract start date (YYYY-MM-DD)"),
    end_date: str = Field(description="Last worked day (YYYY-MM-DD)"),
    reason: str = Field(
        default="dismissal_no_cause",
        description="One of: " + ", ".join(r.value for r in TerminationReason),
    ),
    notice_type: str | None = Field(
        default=None,
        description="One of: " + ", ".join(n.value for n in NoticeType)
        + ". Defaults to the usual choice for the reason.",
    ),
    vacation_overdue_days: int = Field(default=0, description="Vested vacation days not yet taken"),
    fgts_balance: float = Field(default=0.0, description="FGTS balance, used for the fine"),
    dependents: int = Field(default=0, description="Dependents for IRRF"),
    thirteenth_advanced: bool = Field(default=False, description="First 13th installment already paid"),
    year: int | None = Field(default=None, description="Tax table year (default: newest)"),
) -> dict[str, Any]:
    """Estimate Brazilian CLT severance (rescisao): itemized earnings, discounts and net total."""
    try:
        termination_reason = TerminationReason(reason)
        inputs = TerminationInputs(
            salary=salary,
            start_date=date.fromisoformat(start_date),
            end_date=date.fromisoformat(end_date),
            reason=termination_reason,
            notice_type=NoticeType(notice_type) if notice_type else allowed_notice_types(termination_reason)[0],
            vacation_overdue_days=vacation_overdue_days,
            fgts_balance=fgts_balance,
            dependents=dependents,
            thirteenth_advanced=thirteenth_advanced,
        )
        validation = validate_inputs(inputs)
        result = sdk_calculate_termination(inputs, load_tax_rules(year))

        return {
            "result": result.model_dump(mode="json"),
            "errors": validation.errors,
            "warnings": validation.warnings,
        }

    except Exception as e:
        logger.error(f"Error calculating termination: {e}")
        return {"error": str(e)}


@mcp.tool()
async def calculate_unemployment_benefit(
    salaries: list[float] = Field(description="Last monthly salaries (up to 3 are used)"),
    months_worked: int = Field(description="Months worked in the qualifying period"),
    request_count: int = Field(default=1, description="Request ordinal: 1, 2, or 3 for third and later"),
    dismissal_date: str | None = Field(default=None, description="Dismissal date (YYYY-MM-DD) for payment dates"),
    year: int | None = Field(default=None, description="Tax table year (default: newest)"),
) -> dict[str, Any]:
    """Estimate unemployment insurance (seguro-desemprego) value and installments."""
    try:
        result = sdk_calculate_unemployment_benefit(
            average_salary(salaries[-3:]),
            months_worked,
            request_count,
            load_tax_rules(year),
            dismissal_date=date.fromisoformat(dismissal_date) if dismissal_date else None,
        )
        return _dump(result)

    except Exception as e:
        logger.error(f"Error calculating unemployment benefit: {e}")
        return {"error": str(e)}


@mcp.tool()
async def calculate_vacation(
    salary: float = Field(description="Monthly gross salary in BRL"),
    sell_days: bool = Field(default=False, description="Sell 10 days (abono pecuniario)"),
    dependents: int = Field(default=0, description="Dependents for IRRF"),
    absences: int = Field(default=0, description="Unjustified absences in the accrual period"),
    advance_thirteenth: bool = Field(default=False, description="Pay the first 13th installment with it"),
    year: int | None = Field(default=None, description="Tax table year (default: newest)"),
) -> dict[str, Any]:
    """Calculate vacation pay (ferias) with the one-third bonus, taxes and net."""
    try:
        result = sdk_calculate_vacation(
            salary,
            sell_days,
            dependents,
            load_tax_rules(year),
            absences=absences,
            advance_thirteenth=advance_thirteenth,
        )
        return _dump(result)

    except Exception as e:
        logger.error(f"Error calculating vacation: {e}")
        return {"error": str(e)}


@mcp.tool()
async def calculate_overtime(
    salary: float = Field(description="Monthly gross salary in BRL"),
    hours: float = Field(description="Overtime hours in the month"),
    rate: float = Field(default=50, description="Premium in percent (50 weekdays, 100 Sundays/holidays)"),
    dsr: bool = Field(default=True, description="Include the weekly rest (DSR) supplement"),
) -> dict[str, Any]:
    """Calculate overtime pay (horas extras) on a 220-hour month."""
    try:
        return _dump(sdk_calculate_overtime(salary, hours, rate, dsr=dsr))

    except Exception as e:
        logger.error(f"Error calculating overtime: {e}")
        return {"error": str(e)}


@mcp.tool()
async def calculate_fgts_anniversary(
    balance: float = Field(description="FGTS balance in BRL"),
    year: int | None = Field(default=None, description="Tax table year (default: newest)"),
) -> dict[str, Any]:
    """Annual FGTS withdrawal (saque-aniversario) for a balance."""
    try:
        return _dump(sdk_calculate_fgts_anniversary(balance, load_tax_rules(year)))

    except Exception as e:
        logger.error(f"Error calculating FGTS withdrawal: {e}")
        return {"error": str(e)}


@mcp.tool()
async def calculate_domestic_payroll(
    salary: float = Field(description="Domestic worker's monthly salary in BRL"),
    transport_voucher: float = Field(default=0.0, description="Transport voucher provided this month"),
    overtime_50_hours: float = Field(default=0.0, description="Overtime hours at +50%"),
    overtime_100_hours: float = Field(default=0.0, description="Overtime hours at +100%"),
    night_hours: float = Field(default=0.0, description="Hours worked between 22h and 5h"),
    dependents: int = Field(default=0, description="Dependents for IRRF"),
    year: int | None = Field(default=None, description="Tax table year (default: newest)"),
) -> dict[str, Any]:
    """Domestic worker payslip, eSocial DAE guide and total employer cost."""
    try:
        result = sdk_calculate_domestic_payroll(
            salary,
            transport_voucher,
            overtime_50_hours,
            overtime_100_hours,
            night_hours,
            dependents,
            rules=load_tax_rules(year),
        )
        data = _dump(result)
        data["dae"]["total"] = result.dae.total
        return data

    except Exception as e:
        logger.error(f"Error calculating domestic payroll: {e}")
        return {"error": str(e)}


@mcp.tool()
async def compare_clt_pj(
    salary: float = Field(description="CLT monthly gross salary in BRL"),
    pj_gross: float = Field(description="PJ monthly invoice in BRL"),
    monthly_benefits: float = Field(default=0.0, description="CLT benefits per month (meal voucher, health plan, others)"),
    pj_tax_rate: float = Field(default=6.0, description="PJ tax on revenue, in percent"),
    pj_monthly_costs: float = Field(default=0.0, description="Accountant and other PJ costs per month"),
    year: int | None = Field(default=None, description="Tax table year (default: newest)"),
) -> dict[str, Any]:
    """Compare a year as CLT employee against a year invoicing as PJ."""
    try:
        result = sdk_compare_clt_pj(
            salary,
            pj_gross,
            other_benefits=monthly_benefits,
            pj_tax_rate=pj_tax_rate,
            pj_expenses=pj_monthly_costs,
            rules=load_tax_rules(year),
        )
        return _dump(result)

    except Exception as e:
        logger.error(f"Error comparing CLT and PJ: {e}")
        return {"error": str(e)}


@mcp.tool()
async def get_tax_tables(
    year: int | None = Field(default=None, description="Tax table year (default: newest)"),
) -> dict[str, Any]:
    """Return the INSS, IRRF and unemployment tables for a year."""
    try:
        rules = load_tax_rules(year)
        return json.loads(rules.model_dump_json())

    except Exception as e:
        logger.error(f"Error loading tax tables: {e}")
        return {"error": str(e)}


def run_server():
    """Run the MCP server in stdio mode."""
    configure_logging()
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
