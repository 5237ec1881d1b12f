"""Loan approval workflow built on a fixed sequence of policy-supplied steps."""

from loan_approval.core.enums import ApprovalStep, LoanProduct
from loan_approval.core.exceptions import LoanApprovalError, StepEvaluationError
from loan_approval.models.domain import (
    CarLoan,
    LoanRecord,
    PrimePersonalLoan,
    SubprimePersonalLoan,
)
from loan_approval.services.approval import (
    ApprovalEvaluation,
    ApprovalPipeline,
    LoanApprovalPolicy,
    StepOutcome,
    StepResult,
)
from loan_approval.services.approval.policies import PrimePersonalLoanPolicy

__all__ = [
    "ApprovalEvaluation",
    "ApprovalPipeline",
    "ApprovalStep",
    "CarLoan",
    "LoanApprovalError",
    "LoanApprovalPolicy",
    "LoanProduct",
    "LoanRecord",
    "PrimePersonalLoan",
    "PrimePersonalLoanPolicy",
    "StepEvaluationError",
    "StepOutcome",
    "StepResult",
    "SubprimePersonalLoan",
]
