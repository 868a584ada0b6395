"""Conversion from display units into canonical won."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from soldier_savings.models import DepositInput

UNIT_SCALE: Mapping[str, int] = MappingProxyType({"won": 1, "manwon": 10_000})


def to_won(amount: float, unit: str) -> float:
    return amount * UNIT_SCALE[unit]


def from_won(amount: float, unit: str) -> float:
    return amount / UNIT_SCALE[unit]


def deposits_to_won(deposits: DepositInput, unit: str) -> DepositInput:
    """Scale every bucket's deposit into won; the engine only sees won."""
    return {year: to_won(amount, unit) for year, amount in deposits.items()}
