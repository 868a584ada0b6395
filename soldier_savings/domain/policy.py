"""Year-by-year matching policy of the savings program."""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from soldier_savings.models import YearPolicy

POLICY_TABLE: Mapping[int, YearPolicy] = MappingProxyType(
    {
        2022: YearPolicy(matchRatio=0.33, depositCap=400_000),
        2023: YearPolicy(matchRatio=0.71, depositCap=400_000),
        2024: YearPolicy(matchRatio=1.0, depositCap=400_000),
        2025: YearPolicy(matchRatio=1.0, depositCap=550_000),
    }
)


def policy_years() -> List[int]:
    return sorted(POLICY_TABLE)


def first_policy_year() -> int:
    return min(POLICY_TABLE)


def last_policy_year() -> int:
    return max(POLICY_TABLE)


def fallback_policy() -> YearPolicy:
    """Full match at the cap of the latest tabulated year."""
    return YearPolicy(matchRatio=1.0, depositCap=POLICY_TABLE[last_policy_year()].depositCap)


def lookup_policy(year: int) -> YearPolicy:
    """Return the policy for ``year``; untabulated years get the fallback."""
    policy = POLICY_TABLE.get(year)
    if policy is None:
        return fallback_policy()
    return policy
