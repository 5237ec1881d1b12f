"""Approval pipeline that runs the fixed step sequence for a loan policy."""

import logging
from typing import Callable, Dict, Generic, List, Optional, Type, Union

from loan_approval.core.enums import ApprovalStep
from loan_approval.core.exceptions import StepEvaluationError
from loan_approval.services.approval.base import (
    LoanApprovalPolicy,
    LoanT,
    StepOutcome,
    StepResult,
)

logger = logging.getLogger(__name__)


class ApprovalEvaluation(Generic[LoanT]):
    """
    Result of running every approval step for one loan.

    Attributes:
        loan: The record created for the run, with its decision applied
        is_approved: Overall decision (all steps passed)
        steps_passed: Number of steps that passed
        steps_failed: Number of steps that failed
        step_outcomes: Every step with its result, in evaluation order
    """

    def __init__(
        self,
        loan: LoanT,
        is_approved: bool,
        steps_passed: int,
        steps_failed: int,
        step_outcomes: List[StepOutcome],
    ):
        self.loan = loan
        self.is_approved = is_approved
        self.steps_passed = steps_passed
        self.steps_failed = steps_failed
        self.step_outcomes = step_outcomes


class ApprovalPipeline(Generic[LoanT]):
    """
    Runs the loan approval workflow for a policy.

    This class:
    - Creates a fresh loan record and binds a fresh policy to it per run
    - Evaluates all five steps in fixed order, with no short-circuit
    - Approves the loan only when every step passes
    - Collects the messages of failed steps as rejection reasons

    The pipeline keeps no state between runs, so one instance may be reused.
    """

    def __init__(
        self,
        policy_class: Type[LoanApprovalPolicy[LoanT]],
        loan_factory: Optional[Callable[[], LoanT]] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            policy_class: Policy to bind to each new loan record
            loan_factory: Zero-argument callable creating the loan record.
                Defaults to the policy's loan_type.
        """
        self.policy_class = policy_class
        self.loan_factory = loan_factory or policy_class.loan_type

    def process(self) -> LoanT:
        """
        Run the workflow on a new loan record.

        Returns:
            The loan record with is_approved and rejection_reasons set

        Raises:
            StepEvaluationError: If a step could not be evaluated
        """
        return self.run().loan

    def run(self) -> ApprovalEvaluation[LoanT]:
        """
        Run the workflow and keep the outcome of every step.

        Returns:
            ApprovalEvaluation with the decided loan and per-step outcomes

        Raises:
            StepEvaluationError: If a step could not be evaluated
        """
        loan = self.loan_factory()
        policy = self.policy_class(loan)
        logger.info(
            f"Starting approval of {type(loan).__name__} with {self.policy_class.__name__}"
        )

        step_outcomes: List[StepOutcome] = []
        for step, evaluate in self._step_evaluators(policy).items():
            step_outcomes.append(self._run_step(step, evaluate))

        failed = [outcome for outcome in step_outcomes if not outcome.result.passed]
        loan.rejection_reasons = [self._rejection_reason(outcome) for outcome in failed]
        loan.is_approved = not failed

        logger.info(
            f"Approval of {type(loan).__name__} completed: approved={loan.is_approved}, "
            f"failed steps={[outcome.step.value for outcome in failed]}"
        )

        return ApprovalEvaluation(
            loan=loan,
            is_approved=loan.is_approved,
            steps_passed=len(step_outcomes) - len(failed),
            steps_failed=len(failed),
            step_outcomes=step_outcomes,
        )

    def evaluate_step(
        self,
        step: Union[ApprovalStep, str],
        loan: Optional[LoanT] = None,
    ) -> StepResult:
        """
        Evaluate a single step without deciding the loan.

        Args:
            step: The step to evaluate
            loan: Record to evaluate against. A new one is created if omitted.
                The record is not modified.

        Returns:
            StepResult produced by the policy

        Raises:
            ValueError: If step is not a known approval step
            StepEvaluationError: If the step could not be evaluated
        """
        step = ApprovalStep(step)
        policy = self.policy_class(loan if loan is not None else self.loan_factory())
        evaluate = self._step_evaluators(policy)[step]
        return self._run_step(step, evaluate).result

    @staticmethod
    def _step_evaluators(
        policy: LoanApprovalPolicy[LoanT],
    ) -> Dict[ApprovalStep, Callable[[], StepResult]]:
        """Map each step to the policy method deciding it, in evaluation order."""
        return {
            ApprovalStep.VERIFY_DOCUMENTS: policy.verify_documents,
            ApprovalStep.PRE_CLEARANCE: policy.get_pre_clearance,
            ApprovalStep.MAKER_APPROVE: policy.maker_approve,
            ApprovalStep.CHECKER_APPROVE: policy.checker_approve,
            ApprovalStep.POST_CLEARANCE: policy.get_post_clearance,
        }

    @staticmethod
    def _run_step(
        step: ApprovalStep, evaluate: Callable[[], StepResult]
    ) -> StepOutcome:
        """
        Evaluate one step, turning faults into StepEvaluationError.

        Args:
            step: The step being evaluated
            evaluate: Bound policy method for the step

        Returns:
            StepOutcome for the step

        Raises:
            StepEvaluationError: If the step raised or returned a non-StepResult
        """
        try:
            result = evaluate()
        except Exception as e:
            logger.error(f"Step {step.value} raised during evaluation: {e}", exc_info=True)
            raise StepEvaluationError(step, str(e)) from e

        if not isinstance(result, StepResult):
            logger.error(
                f"Step {step.value} returned {type(result).__name__} instead of StepResult"
            )
            raise StepEvaluationError(
                step, f"expected StepResult, got {type(result).__name__}"
            )

        logger.debug(
            f"Step {step.value}: passed={result.passed}, message={result.message!r}"
        )
        return StepOutcome(step=step, result=result)

    @staticmethod
    def _rejection_reason(outcome: StepOutcome) -> str:
        """Reason recorded for a failed step; steps failing silently get a generic one."""
        if outcome.result.message is not None:
            return outcome.result.message
        return f"Rejected at {outcome.step.value}"
