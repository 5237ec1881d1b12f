"""Approval policy for prime personal loans."""

import logging
from typing import Optional

from loan_approval.config import settings
from loan_approval.models.domain.loan import PrimePersonalLoan
from loan_approval.services.approval.base import LoanApprovalPolicy, StepResult

logger = logging.getLogger(__name__)


class PrimePersonalLoanPolicy(LoanApprovalPolicy[PrimePersonalLoan]):
    """
    Policy for prime personal loans.

    Handles:
    - Pre-clearance: minimum annual income
    - Document verification: always passes, flags the Aadhaar discrepancy
    - Maker approval: applicant must not be a city dweller
    - Checker approval: minimum credit score

    Post-clearance uses the default hook.
    """

    loan_type = PrimePersonalLoan

    def __init__(
        self,
        loan: PrimePersonalLoan,
        min_annual_income: Optional[int] = None,
        min_credit_score: Optional[int] = None,
    ):
        """
        Bind the policy to a prime personal loan.

        Args:
            loan: The loan record to evaluate
            min_annual_income: Pre-clearance threshold (default from settings)
            min_credit_score: Checker threshold (default from settings)
        """
        super().__init__(loan)
        self.min_annual_income = (
            settings.PRIME_MIN_ANNUAL_INCOME if min_annual_income is None else min_annual_income
        )
        self.min_credit_score = (
            settings.PRIME_MIN_CREDIT_SCORE if min_credit_score is None else min_credit_score
        )

    def verify_documents(self) -> StepResult:
        logger.info("PrimePersonalLoanPolicy: Verify documents")
        return StepResult(passed=True, message="Discrepancy in Aadhaar data")

    def get_pre_clearance(self) -> StepResult:
        logger.info("PrimePersonalLoanPolicy: Pre-clearance")
        passed = self.loan.annual_income >= self.min_annual_income
        return StepResult(
            passed=passed,
            message=None if passed else "Not enough annual income",
        )

    def maker_approve(self) -> StepResult:
        logger.info("PrimePersonalLoanPolicy: Maker approve")
        # Passes only for applicants outside the city.
        passed = not self.loan.city_dweller
        return StepResult(
            passed=passed,
            message=None if passed else "Not a city dweller",
        )

    def checker_approve(self) -> StepResult:
        logger.info("PrimePersonalLoanPolicy: Checker approve")
        passed = self.loan.credit_score >= self.min_credit_score
        return StepResult(
            passed=passed,
            message=None if passed else "Not enough credit score",
        )
