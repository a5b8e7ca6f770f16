# File: portfolio_edge/core/errors.py

"""
Error types raised by the store adapters and record decoding.

Route handlers turn these into fixed plain-text 500 responses; the
message here is for logs only and never reaches the client.
"""

from typing import Optional


class PortfolioError(Exception):
    """Base exception for portfolio API failures."""

    def __init__(self, message: str, *, key: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.key = key


class StoreError(PortfolioError):
    """A record or blob store read failed (driver / I/O error)."""


class RecordDecodeError(PortfolioError):
    """A stored project record is not valid JSON or does not match the schema."""
