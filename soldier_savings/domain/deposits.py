from __future__ import annotations

from soldier_savings.domain.policy import first_policy_year, last_policy_year
from soldier_savings.models import DepositInput


def bucket_year(year: int) -> int:
    """
    Map a calendar year to the deposit bucket it draws from.

    Years up to the first tabulated year share the first bucket, years from
    the last tabulated year onward share the last bucket, and years in
    between use their own.
    """
    first, last = first_policy_year(), last_policy_year()
    if year <= first:
        return first
    if year >= last:
        return last
    return year


def deposit_for(year: int, deposits: DepositInput) -> float:
    """Monthly deposit the user entered for ``year``'s bucket, 0.0 when missing."""
    return float(deposits.get(bucket_year(year), 0.0))
