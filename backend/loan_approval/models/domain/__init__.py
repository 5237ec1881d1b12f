"""Domain models for the approval workflow."""

from loan_approval.models.domain.loan import (
    CarLoan,
    LoanRecord,
    PrimePersonalLoan,
    SubprimePersonalLoan,
)

__all__ = [
    "LoanRecord",
    "PrimePersonalLoan",
    "SubprimePersonalLoan",
    "CarLoan",
]
