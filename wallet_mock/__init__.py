"""Mock custodial-wallet backend.

Simulates wallet connection, balance tracking, gas estimation and transaction
execution against an in-memory ledger. No real chain is ever contacted.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
