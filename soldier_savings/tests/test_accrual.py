from __future__ import annotations

from collections import Counter
from datetime import date

import pytest

from soldier_savings.core.accrual import INTEREST_RATE, AccrualEngine, run_accrual
from soldier_savings.domain.policy import lookup_policy
from soldier_savings.exceptions import ComputationFault, UnknownBranchError
from soldier_savings.models import ServiceBranch


def mixed_deposits() -> dict:
    return {2022: 400_000.0, 2023: 300_000.0, 2024: 350_000.0, 2025: 600_000.0}


@pytest.mark.parametrize(
    "start, branch",
    [
        (date(2022, 1, 1), "army"),
        (date(2022, 8, 17), "navy"),
        (date(2023, 11, 1), "airforce"),
        (date(2024, 12, 31), "marine"),
        (date(2027, 5, 9), "army"),
    ],
)
def test_totals_match_the_ledger(start, branch):
    result = run_accrual(start, branch, mixed_deposits())
    details = result.monthlyDetails

    assert result.totalDeposit == sum(record.deposit for record in details)
    assert result.totalMatched == sum(record.matched for record in details)
    assert result.interest == result.totalDeposit * INTEREST_RATE
    assert result.finalTotal == result.totalDeposit + result.totalMatched + result.interest

    running = [record.runningTotal for record in details]
    assert running == sorted(running)

    for record in details:
        policy = lookup_policy(record.year)
        assert record.deposit <= policy.depositCap
        assert record.matched == record.deposit * policy.matchRatio


def test_same_inputs_give_identical_results():
    first = run_accrual(date(2023, 3, 1), ServiceBranch.NAVY, mixed_deposits())
    second = run_accrual(date(2023, 3, 1), ServiceBranch.NAVY, mixed_deposits())

    assert first == second
    assert first is not second


def test_discharge_month_is_part_of_the_ledger():
    """Army serves 18 months; the ledger covers 19 calendar months, discharge included."""
    result = run_accrual(date(2022, 1, 15), "army", {2022: 100_000.0})

    assert result.totalMonths == 18
    assert result.dischargeDate == date(2023, 7, 15)
    assert len(result.monthlyDetails) == 19
    first, last = result.monthlyDetails[0], result.monthlyDetails[-1]
    assert (first.year, first.month) == (2022, 1)
    assert (last.year, last.month) == (2023, 7)


def test_month_end_start_dates_do_not_skip_months():
    result = run_accrual(date(2024, 1, 31), "navy", {})

    assert result.dischargeDate == date(2025, 9, 30)
    months = [(record.year, record.month) for record in result.monthlyDetails]
    assert len(months) == 21
    assert (2024, 2) in months
    assert len(set(months)) == len(months)


def test_scenario_first_year_deposit_at_cap():
    result = run_accrual(date(2022, 1, 1), "army", {2022: 400_000.0})

    months_2022 = [record for record in result.monthlyDetails if record.year == 2022]
    assert len(months_2022) == 12
    for record in months_2022:
        assert record.deposit == 400_000.0
        assert record.matched == 400_000.0 * 0.33

    # 2023 bucket was never supplied
    assert all(record.deposit == 0.0 for record in result.monthlyDetails if record.year == 2023)
    assert result.totalDeposit == 12 * 400_000.0


def test_scenario_deposit_above_cap_is_clamped_before_matching():
    result = run_accrual(date(2022, 1, 1), "army", {2022: 600_000.0})

    record = result.monthlyDetails[0]
    assert record.deposit == 400_000.0
    assert record.matched == 400_000.0 * 0.33


def test_scenario_service_across_year_boundaries():
    deposits = {2023: 300_000.0, 2024: 350_000.0, 2025: 500_000.0}
    result = run_accrual(date(2023, 11, 1), "army", deposits)

    per_year = Counter(record.year for record in result.monthlyDetails)
    assert per_year == {2023: 2, 2024: 12, 2025: 5}

    for record in result.monthlyDetails:
        if record.year == 2023:
            assert (record.deposit, record.matched) == (300_000.0, 300_000.0 * 0.71)
        elif record.year == 2024:
            assert (record.deposit, record.matched) == (350_000.0, 350_000.0)
        else:
            assert (record.deposit, record.matched) == (500_000.0, 500_000.0)


def test_scenario_unknown_branch_is_rejected_before_any_month():
    with pytest.raises(UnknownBranchError):
        run_accrual(date(2024, 1, 1), "coastguard", mixed_deposits())


def test_scenario_years_past_the_table_use_the_fallback():
    result = run_accrual(date(2030, 3, 1), "airforce", {2025: 700_000.0})

    assert {record.year for record in result.monthlyDetails} == {2030, 2031}
    assert len(result.monthlyDetails) == 22
    for record in result.monthlyDetails:
        assert record.deposit == 550_000.0
        assert record.matched == 550_000.0


def test_years_before_the_table_use_the_first_bucket_and_fallback_policy():
    result = run_accrual(date(2021, 11, 1), "army", {2022: 500_000.0})

    early = [record for record in result.monthlyDetails if record.year == 2021]
    assert [(r.deposit, r.matched) for r in early] == [(500_000.0, 500_000.0)] * 2
    in_table = [record for record in result.monthlyDetails if record.year == 2022]
    assert all(record.deposit == 400_000.0 for record in in_table)


def test_zero_deposits_give_a_zero_payout():
    result = run_accrual(date(2024, 6, 1), "marine", {})

    assert result.finalTotal == 0.0
    assert all(record.runningTotal == 0.0 for record in result.monthlyDetails)


def test_custom_interest_rate():
    engine = AccrualEngine(interest_rate=0.1)
    result = engine.run(date(2022, 1, 1), "army", {2022: 100_000.0})

    assert result.interest == result.totalDeposit * 0.1


def test_date_overflow_aborts_the_whole_run():
    with pytest.raises(ComputationFault):
        run_accrual(date(9999, 1, 1), "army", {2025: 100_000.0})
