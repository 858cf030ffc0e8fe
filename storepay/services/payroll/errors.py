"""Errors raised by the payroll calculation core."""


class PayrollValidationError(ValueError):
    """Input rejected before it could produce a negative or meaningless result."""
