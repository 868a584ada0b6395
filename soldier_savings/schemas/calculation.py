"""Data contracts for the savings calculation endpoints."""

from __future__ import annotations

import math
from datetime import date
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from soldier_savings.domain.policy import policy_years
from soldier_savings.domain.service import parse_branch
from soldier_savings.models import ServiceBranch


def _non_negative_amount(value: Any) -> float:
    """Blank, non-numeric or negative amounts count as zero."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


class CalculationRequest(BaseModel):
    """Inputs for one payout projection, amounts in ``unit``."""

    model_config = ConfigDict(extra="forbid")

    startDate: date = Field(..., description="Enlistment date.")
    branch: ServiceBranch = Field(..., description="Service branch.")
    deposits: Dict[int, float] = Field(
        default_factory=dict,
        description="Monthly personal deposit per bucket year.",
    )
    unit: Optional[Literal["won", "manwon"]] = Field(
        None,
        description="Unit of the deposit amounts; defaults to the configured unit.",
    )
    save: bool = Field(True, description="Persist the run for later reload.")

    @field_validator("branch", mode="before")
    @classmethod
    def _known_branch(cls, value: Any) -> ServiceBranch:
        return parse_branch(value)

    @field_validator("deposits", mode="before")
    @classmethod
    def _normalize_amounts(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {year: _non_negative_amount(amount) for year, amount in value.items()}

    @field_validator("deposits")
    @classmethod
    def _known_bucket_years(cls, value: Dict[int, float]) -> Dict[int, float]:
        allowed = policy_years()
        unknown = sorted(year for year in value if year not in allowed)
        if unknown:
            raise ValueError(f"unknown bucket years {unknown}; expected a subset of {allowed}")
        return value


class MonthDetail(BaseModel):
    year: int
    month: int = Field(..., ge=1, le=12)
    deposit: float = Field(..., ge=0)
    matched: float = Field(..., ge=0)
    runningTotal: float = Field(..., ge=0)


class CalculationResponse(BaseModel):
    """Projected payout and monthly ledger, amounts in won."""

    totalMonths: int = Field(..., ge=1)
    startDate: date
    dischargeDate: date
    totalDeposit: float = Field(..., ge=0)
    totalMatched: float = Field(..., ge=0)
    interest: float = Field(..., ge=0)
    finalTotal: float = Field(..., ge=0)
    monthlyDetails: List[MonthDetail]


class ShareResponse(BaseModel):
    query: str
    url: str


class SavedRunResponse(BaseModel):
    payload: Optional[Dict[str, Any]] = None
    result: Optional[Dict[str, Any]] = None
    createdAt: Optional[str] = None
