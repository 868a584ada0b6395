"""Pydantic schemas for the service metadata endpoints."""

from typing import Dict

from pydantic import BaseModel

from soldier_savings.models import YearPolicy


class PingResponse(BaseModel):
    message: str
    version: str


class PoliciesResponse(BaseModel):
    policies: Dict[int, YearPolicy]
    fallback: YearPolicy
    serviceMonths: Dict[str, int]
    interestRate: float
