"""Approval workflow foundation with step results and the base policy."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Generic, Optional, Type, TypeVar

from loan_approval.core.enums import ApprovalStep
from loan_approval.models.domain.loan import LoanRecord

LoanT = TypeVar("LoanT", bound=LoanRecord)


@dataclass(frozen=True)
class StepResult:
    """
    Result of a single approval step.

    Only passed governs the decision. A message may accompany a passing
    result as information; the pipeline keeps messages of failed steps only.

    Attributes:
        passed: Whether the step approved the loan
        message: Human-readable explanation, usually the rejection reason
    """

    passed: bool
    message: Optional[str] = None


@dataclass(frozen=True)
class StepOutcome:
    """A step paired with the result it produced during a run."""

    step: ApprovalStep
    result: StepResult


class LoanApprovalPolicy(ABC, Generic[LoanT]):
    """
    Abstract base class for loan product approval policies.

    A policy supplies the decision for each of the five approval steps. The
    pipeline owns the order and the aggregation; a policy never calls the
    pipeline or its own steps.

    Subclasses must implement verify_documents(), maker_approve() and
    checker_approve(). get_pre_clearance() and get_post_clearance() are hooks
    that pass with no message unless overridden.

    Steps read the bound loan and must not mutate it.
    """

    loan_type: ClassVar[Type[LoanRecord]]

    def __init__(self, loan: LoanT):
        """
        Bind the policy to a loan record for one run.

        Args:
            loan: The record the steps read from
        """
        self.loan = loan

    @abstractmethod
    def verify_documents(self) -> StepResult:
        """Verify the applicant's documents."""
        pass

    def get_pre_clearance(self) -> StepResult:
        """Pre-clearance hook. Passes by default."""
        return StepResult(passed=True)

    @abstractmethod
    def maker_approve(self) -> StepResult:
        """Approval by the maker."""
        pass

    @abstractmethod
    def checker_approve(self) -> StepResult:
        """Approval by the checker."""
        pass

    def get_post_clearance(self) -> StepResult:
        """Post-clearance hook. Passes by default."""
        return StepResult(passed=True)
