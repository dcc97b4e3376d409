"""CLT Calc command-line interface."""
