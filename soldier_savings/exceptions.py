"""Exception hierarchy for the savings calculator."""

from __future__ import annotations


class SavingsCalculatorError(Exception):
    """Base exception for all calculator errors."""


class UnknownBranchError(SavingsCalculatorError, ValueError):
    """Service branch is not one of the known branches."""

    def __init__(self, branch: object) -> None:
        self.branch = branch
        super().__init__(f"unknown service branch: {branch!r}")


class ComputationFault(SavingsCalculatorError):
    """A run failed part way through; no partial result is available."""


class ShareLinkError(SavingsCalculatorError, ValueError):
    """A share-link query string could not be decoded."""
