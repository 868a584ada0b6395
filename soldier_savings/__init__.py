"""Payout projection for the soldier savings matching program."""

__version__ = "0.1.0"
