"""Approval workflow: fixed step pipeline and per-product policies."""

from .base import LoanApprovalPolicy, StepOutcome, StepResult
from .pipeline import ApprovalEvaluation, ApprovalPipeline

__all__ = [
    "ApprovalEvaluation",
    "ApprovalPipeline",
    "LoanApprovalPolicy",
    "StepOutcome",
    "StepResult",
]
