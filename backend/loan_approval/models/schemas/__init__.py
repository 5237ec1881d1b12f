"""Pydantic schemas for serializing approval decisions."""

from loan_approval.models.schemas.decision import (
    LoanDecisionResponse,
    StepEvaluationResponse,
)

__all__ = ["LoanDecisionResponse", "StepEvaluationResponse"]
