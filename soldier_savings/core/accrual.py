"""Month-by-month accrual of deposits and matching contributions."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Union

from dateutil.relativedelta import relativedelta

from soldier_savings.domain.deposits import deposit_for
from soldier_savings.domain.policy import lookup_policy
from soldier_savings.domain.service import months_for
from soldier_savings.exceptions import ComputationFault
from soldier_savings.models import (
    CalculationResult,
    DepositInput,
    MonthRecord,
    ServiceBranch,
)

logger = logging.getLogger(__name__)

# flat simple interest on total principal, applied once
INTEREST_RATE = 0.05


class AccrualEngine:
    """
    Projects the payout of one service period.

    Conventions:
      - The ledger runs from the start month through the discharge month,
        inclusive. Discharge is start_date + N calendar months, so a branch
        with N service months yields N + 1 month records.
      - Each month: deposit = min(bucket deposit, year cap),
        matched = deposit * year match ratio. Nothing is rounded.
      - Interest = total deposit * interest_rate, added once at the end.
    """

    def __init__(self, interest_rate: float = INTEREST_RATE):
        self.interest_rate = interest_rate

    def run(
        self,
        start_date: date,
        branch: Union[ServiceBranch, str],
        deposits: DepositInput,
    ) -> CalculationResult:
        total_months = months_for(branch)

        try:
            discharge_date = start_date + relativedelta(months=total_months)
            details = self._ledger(start_date, total_months, deposits)
        except (OverflowError, ValueError) as exc:
            logger.warning("accrual failed for start %s: %s", start_date, exc)
            raise ComputationFault(f"could not accrue from {start_date}: {exc}") from exc

        total_deposit = 0.0
        total_matched = 0.0
        for record in details:
            total_deposit += record.deposit
            total_matched += record.matched

        interest = total_deposit * self.interest_rate
        final_total = total_deposit + total_matched + interest

        logger.debug(
            "accrued %d months for %s from %s: deposit=%s matched=%s",
            len(details),
            branch,
            start_date,
            total_deposit,
            total_matched,
        )

        return CalculationResult(
            totalMonths=total_months,
            startDate=start_date,
            dischargeDate=discharge_date,
            totalDeposit=total_deposit,
            totalMatched=total_matched,
            interest=interest,
            finalTotal=final_total,
            monthlyDetails=tuple(details),
        )

    def _ledger(
        self,
        start_date: date,
        total_months: int,
        deposits: DepositInput,
    ) -> List[MonthRecord]:
        details: List[MonthRecord] = []
        running_deposit = 0.0
        running_matched = 0.0

        # offset == total_months is the discharge month
        for offset in range(total_months + 1):
            current = start_date + relativedelta(months=offset)
            policy = lookup_policy(current.year)

            deposit = min(deposit_for(current.year, deposits), policy.depositCap)
            matched = deposit * policy.matchRatio

            running_deposit += deposit
            running_matched += matched

            details.append(
                MonthRecord(
                    year=current.year,
                    month=current.month,
                    deposit=deposit,
                    matched=matched,
                    runningTotal=running_deposit + running_matched,
                )
            )

        return details


_DEFAULT_ENGINE = AccrualEngine()


def run_accrual(
    start_date: date,
    branch: Union[ServiceBranch, str],
    deposits: DepositInput,
) -> CalculationResult:
    """Run the default engine (5% interest)."""
    return _DEFAULT_ENGINE.run(start_date, branch, deposits)
