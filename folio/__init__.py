"""Folio: invitation-only artist portfolios and commissions."""

__version__ = "0.1.0"
