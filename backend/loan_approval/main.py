"""Command line entry point running the prime personal loan approval."""

import logging
import sys

from loan_approval.config import settings
from loan_approval.core.exceptions import LoanApprovalError
from loan_approval.models.schemas.decision import LoanDecisionResponse
from loan_approval.services.approval import ApprovalPipeline
from loan_approval.services.approval.policies import PrimePersonalLoanPolicy

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    """Approve a default prime personal loan and print the decision as JSON."""
    configure_logging()
    logger.info(f"Running loan approval ({settings.ENVIRONMENT})")

    pipeline = ApprovalPipeline(PrimePersonalLoanPolicy)
    try:
        evaluation = pipeline.run()
    except LoanApprovalError as e:
        logger.error(f"Loan approval failed: {e}")
        return 1

    decision = LoanDecisionResponse.from_evaluation(evaluation)
    print(decision.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
