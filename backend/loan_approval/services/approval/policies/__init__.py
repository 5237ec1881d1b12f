"""Approval policies for each loan product."""

from .prime_personal_loan import PrimePersonalLoanPolicy

__all__ = ["PrimePersonalLoanPolicy"]
