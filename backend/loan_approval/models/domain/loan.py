"""Loan records evaluated by the approval pipeline."""

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional

from loan_approval.core.enums import LoanProduct


@dataclass
class LoanRecord:
    """
    Base record for a loan moving through the approval pipeline.

    Only the pipeline writes is_approved and rejection_reasons. Product
    records add the fields their policy reads.

    Attributes:
        is_approved: Final decision, False until the pipeline completes
        rejection_reasons: Messages of failed steps, in evaluation order
    """

    product: ClassVar[Optional[LoanProduct]] = None

    is_approved: bool = False
    rejection_reasons: List[str] = field(default_factory=list)


@dataclass
class PrimePersonalLoan(LoanRecord):
    """Prime personal loan applicant data."""

    product: ClassVar[LoanProduct] = LoanProduct.PRIME_PERSONAL

    credit_score: int = 730
    city_dweller: bool = True
    annual_income: int = 2_000_000


@dataclass
class SubprimePersonalLoan(LoanRecord):
    """Subprime personal loan record."""

    product: ClassVar[LoanProduct] = LoanProduct.SUBPRIME_PERSONAL


@dataclass
class CarLoan(LoanRecord):
    """Car loan record."""

    product: ClassVar[LoanProduct] = LoanProduct.CAR
