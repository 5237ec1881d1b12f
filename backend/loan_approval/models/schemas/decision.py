"""Pydantic schemas for reporting approval decisions."""

from typing import List, Optional

from pydantic import BaseModel, Field

from loan_approval.core.enums import ApprovalStep, LoanProduct
from loan_approval.services.approval.pipeline import ApprovalEvaluation


class StepEvaluationResponse(BaseModel):
    """Schema for a single step's result."""

    step: ApprovalStep
    passed: bool
    message: Optional[str] = None


class LoanDecisionResponse(BaseModel):
    """Schema for the decision of one approval run."""

    product: Optional[LoanProduct] = None
    is_approved: bool
    rejection_reasons: List[str] = Field(default_factory=list)
    steps_passed: int = Field(ge=0)
    steps_failed: int = Field(ge=0)
    steps: List[StepEvaluationResponse] = Field(default_factory=list)

    @classmethod
    def from_evaluation(cls, evaluation: ApprovalEvaluation) -> "LoanDecisionResponse":
        """Build the response from a completed pipeline run."""
        return cls(
            product=evaluation.loan.product,
            is_approved=evaluation.is_approved,
            rejection_reasons=list(evaluation.loan.rejection_reasons),
            steps_passed=evaluation.steps_passed,
            steps_failed=evaluation.steps_failed,
            steps=[
                StepEvaluationResponse(
                    step=outcome.step,
                    passed=outcome.result.passed,
                    message=outcome.result.message,
                )
                for outcome in evaluation.step_outcomes
            ],
        )
