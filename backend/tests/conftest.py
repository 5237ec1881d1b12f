"""Shared fixtures for approval workflow tests."""

from typing import Callable, Dict

import pytest

from loan_approval.models.domain.loan import CarLoan, PrimePersonalLoan
from loan_approval.services.approval.base import LoanApprovalPolicy, StepResult


class CountingCarLoanPolicy(LoanApprovalPolicy[CarLoan]):
    """
    Test policy with configurable step results and call counting.

    Hooks are left to the base class so default behavior can be observed.
    """

    loan_type = CarLoan

    results: Dict[str, StepResult] = {}
    calls: Dict[str, int] = {}

    def _record(self, name: str) -> StepResult:
        type(self).calls[name] = type(self).calls.get(name, 0) + 1
        return type(self).results.get(name, StepResult(passed=True))

    def verify_documents(self) -> StepResult:
        return self._record("verify_documents")

    def maker_approve(self) -> StepResult:
        return self._record("maker_approve")

    def checker_approve(self) -> StepResult:
        return self._record("checker_approve")


@pytest.fixture
def counting_policy():
    """Provide a fresh CountingCarLoanPolicy subclass with its own counters."""

    class _Policy(CountingCarLoanPolicy):
        results: Dict[str, StepResult] = {}
        calls: Dict[str, int] = {}

    return _Policy


@pytest.fixture
def prime_loan_factory() -> Callable[..., Callable[[], PrimePersonalLoan]]:
    """Build loan factories creating prime personal loans with given fields."""

    def _factory(**fields) -> Callable[[], PrimePersonalLoan]:
        return lambda: PrimePersonalLoan(**fields)

    return _factory
