"""Core enums for type safety across the application."""

from enum import Enum
from typing import Tuple


class LoanProduct(str, Enum):
    """Loan products with an approval record type."""

    PRIME_PERSONAL = "prime_personal"
    SUBPRIME_PERSONAL = "subprime_personal"
    CAR = "car"


class ApprovalStep(str, Enum):
    """Steps of the loan approval workflow."""

    VERIFY_DOCUMENTS = "verify_documents"
    PRE_CLEARANCE = "pre_clearance"
    MAKER_APPROVE = "maker_approve"
    CHECKER_APPROVE = "checker_approve"
    POST_CLEARANCE = "post_clearance"

    @classmethod
    def ordered(cls) -> Tuple["ApprovalStep", ...]:
        """Return the steps in evaluation order."""
        return (
            cls.VERIFY_DOCUMENTS,
            cls.PRE_CLEARANCE,
            cls.MAKER_APPROVE,
            cls.CHECKER_APPROVE,
            cls.POST_CLEARANCE,
        )
