"""CLT Calc SDK - Core functionality for severance and payroll estimates."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    get_data_path,
    configure_logging,
    ConfigNotFoundError,
    KNOWN_SETTINGS,
)

from .taxes import (
    TaxBracket,
    TaxRules,
    load_tax_rules,
    resolve_year,
    get_available_years,
    get_tax_rules_dir,
    TaxRulesNotFoundError,
    calc_progressive_withholding,
    calc_marginal_withholding,
    calc_inss,
    calc_irrf,
)

from .termination import (
    TerminationReason,
    NoticeType,
    TerminationInputs,
    CalculationResult,
    allowed_notice_types,
    resolve_entitlements,
    calculate_termination,
    validate_inputs,
    InputValidationResult,
    InputValidationError,
)

from .calculators import (
    calculate_unemployment_benefit,
    average_salary,
    calculate_vacation,
    calculate_overtime,
    calculate_night_shift,
    calculate_fgts_anniversary,
    project_fgts_scenarios,
    calculate_investment_projection,
    calculate_net_salary,
    calculate_thirteenth_salary,
    exit_date_strategy,
    calculate_domestic_payroll,
    compare_clt_pj,
    calculate_work_schedule,
    project_survival,
)

from .hourly import HourlyRateWidget, JsonFileStore, MemoryStore

from .formatting import format_currency, format_date, format_percent, amount_in_words

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "get_data_path",
    "configure_logging",
    "ConfigNotFoundError",
    "KNOWN_SETTINGS",
    # Tax tables
    "TaxBracket",
    "TaxRules",
    "load_tax_rules",
    "resolve_year",
    "get_available_years",
    "get_tax_rules_dir",
    "TaxRulesNotFoundError",
    "calc_progressive_withholding",
    "calc_marginal_withholding",
    "calc_inss",
    "calc_irrf",
    # Termination
    "TerminationReason",
    "NoticeType",
    "TerminationInputs",
    "CalculationResult",
    "allowed_notice_types",
    "resolve_entitlements",
    "calculate_termination",
    "validate_inputs",
    "InputValidationResult",
    "InputValidationError",
    # Calculators
    "calculate_unemployment_benefit",
    "average_salary",
    "calculate_vacation",
    "calculate_overtime",
    "calculate_night_shift",
    "calculate_fgts_anniversary",
    "project_fgts_scenarios",
    "calculate_investment_projection",
    "calculate_net_salary",
    "calculate_thirteenth_salary",
    "exit_date_strategy",
    "calculate_domestic_payroll",
    "compare_clt_pj",
    "calculate_work_schedule",
    "project_survival",
    # Hourly widget
    "HourlyRateWidget",
    "JsonFileStore",
    "MemoryStore",
    # Formatting
    "format_currency",
    "format_date",
    "format_percent",
    "amount_in_words",
]
