"""Exceptions raised by the approval workflow."""

from loan_approval.core.enums import ApprovalStep


class LoanApprovalError(Exception):
    """Base exception for loan approval errors."""
    pass


class StepEvaluationError(LoanApprovalError):
    """
    Raised when a step cannot be evaluated.

    A business rejection is never reported this way; it is a failing
    StepResult. This error means the step itself broke (raised, or returned
    something other than a StepResult), so no decision exists for the loan.

    Attributes:
        step: The step that failed to evaluate
    """

    def __init__(self, step: ApprovalStep, message: str):
        self.step = step
        super().__init__(f"Step '{step.value}' could not be evaluated: {message}")
