"""CLT Calc - Brazilian labor-law severance and payroll calculators."""

__version__ = "0.3.0"
