"""Encode calculator inputs into a shareable query string and back."""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Dict, Mapping, Union
from urllib.parse import parse_qsl, urlencode

from soldier_savings.domain.service import parse_branch
from soldier_savings.exceptions import ShareLinkError
from soldier_savings.models import DepositInput, ServiceBranch

_DEPOSIT_KEY = re.compile(r"^deposit(\d{4})$")


def _format_amount(amount: float) -> str:
    if float(amount).is_integer():
        return str(int(amount))
    return repr(float(amount))


def encode_inputs(
    start_date: date,
    branch: Union[ServiceBranch, str],
    deposits: DepositInput,
) -> str:
    """
    Build ``startDate=...&branch=...&deposit<year>=...``.

    Amounts are written in won, bucket years in ascending order.
    """
    params = [
        ("startDate", start_date.isoformat()),
        ("branch", parse_branch(branch).value),
    ]
    for year in sorted(deposits):
        params.append((f"deposit{year}", _format_amount(deposits[year])))
    return urlencode(params)


def decode_inputs(query: Union[str, Mapping[str, str]]) -> Dict[str, Any]:
    """Parse a share query back into ``{startDate, branch, deposits}``."""
    if isinstance(query, str):
        params: Mapping[str, str] = dict(parse_qsl(query.lstrip("?")))
    else:
        params = query

    raw_start = params.get("startDate")
    raw_branch = params.get("branch")
    if not raw_start:
        raise ShareLinkError("share link is missing startDate")
    if not raw_branch:
        raise ShareLinkError("share link is missing branch")

    try:
        start_date = date.fromisoformat(raw_start)
    except ValueError as exc:
        raise ShareLinkError(f"invalid startDate in share link: {raw_start!r}") from exc

    deposits: DepositInput = {}
    for key, value in params.items():
        match = _DEPOSIT_KEY.match(key)
        if match is None:
            continue
        try:
            deposits[int(match.group(1))] = float(value)
        except ValueError as exc:
            raise ShareLinkError(f"invalid amount for {key}: {value!r}") from exc

    return {
        "startDate": start_date,
        "branch": parse_branch(raw_branch),
        "deposits": deposits,
    }
