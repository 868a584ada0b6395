from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

# bucket year -> monthly deposit in won
DepositInput = Dict[int, float]


class ServiceBranch(str, Enum):
    ARMY = "army"
    NAVY = "navy"
    AIRFORCE = "airforce"
    MARINE = "marine"


class YearPolicy(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    matchRatio: float = Field(ge=0, le=1)
    depositCap: float = Field(gt=0)


class MonthRecord(BaseModel):
    """One ledger row. runningTotal is deposit + matched so far, without interest."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    month: int = Field(ge=1, le=12)
    deposit: float = Field(ge=0)
    matched: float = Field(ge=0)
    runningTotal: float = Field(ge=0)


class CalculationResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    totalMonths: int = Field(ge=1)
    startDate: date
    dischargeDate: date
    totalDeposit: float
    totalMatched: float
    interest: float
    finalTotal: float
    monthlyDetails: Tuple[MonthRecord, ...]
