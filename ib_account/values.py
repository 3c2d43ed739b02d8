"""
Account values and portfolio values reported for an account.

Plain records; the account only owns them, it does not interpret them.
"""

from __future__ import annotations

from dataclasses import dataclass

from ib_account.contract import Contract


@dataclass(frozen=True)
class AccountValue:
    """One key/value line of the account summary (e.g. NetLiquidation, USD)."""

    key: str
    value: str
    currency: str = ""


@dataclass(frozen=True)
class PortfolioValue:
    """Position snapshot for one contract."""

    contract: Contract
    position: float
    market_price: float = 0.0
    market_value: float = 0.0
    average_cost: float = 0.0
    unrealized_pnl: float = 0.0
    realized_pnl: float = 0.0
