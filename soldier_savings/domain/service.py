"""Service duration per branch."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from soldier_savings.exceptions import UnknownBranchError
from soldier_savings.models import ServiceBranch

SERVICE_MONTHS: Mapping[ServiceBranch, int] = MappingProxyType(
    {
        ServiceBranch.ARMY: 18,
        ServiceBranch.NAVY: 20,
        ServiceBranch.AIRFORCE: 21,
        ServiceBranch.MARINE: 18,
    }
)


def parse_branch(value: Union[ServiceBranch, str]) -> ServiceBranch:
    if isinstance(value, ServiceBranch):
        return value
    try:
        return ServiceBranch(value)
    except ValueError as exc:
        raise UnknownBranchError(value) from exc


def months_for(branch: Union[ServiceBranch, str]) -> int:
    """Return the length of service in months for ``branch``."""
    return SERVICE_MONTHS[parse_branch(branch)]
