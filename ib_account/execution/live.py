"""
Live trading guard: wraps any Gateway and blocks orders for live accounts.

Demo accounts (identifier starting with D) pass straight through. Orders stamped
with a live account identifier are refused unless IB_ACCOUNT_LIVE_TRADING_ENABLED=true.
"""

from __future__ import annotations

import logging
import os

from ib_account.contract import Contract
from ib_account.errors import GatewayError
from ib_account.order import Order

from ib_account.execution.gateway import Gateway
from ib_account.execution.types import OrderAck

logger = logging.getLogger(__name__)

# Environment variable that must be set to "true" to allow orders on live (non-demo) accounts.
LIVE_TRADING_ENV = "IB_ACCOUNT_LIVE_TRADING_ENABLED"


def live_trading_enabled() -> bool:
    return os.environ.get(LIVE_TRADING_ENV, "").lower() == "true"


def _is_live_account(account_id: str | None) -> bool:
    # unstamped orders are treated as live
    return not (account_id or "").startswith("D")


class LiveTradingGuard(Gateway):
    """Delegates to inner unless the order belongs to a live account and live trading is off."""

    def __init__(self, inner: Gateway) -> None:
        self.inner = inner
        if live_trading_enabled():
            logger.warning("LiveTradingGuard: LIVE TRADING is ENABLED. Real money at risk.")
        else:
            logger.info(
                "LiveTradingGuard: live trading is disabled; only demo accounts can trade. Set %s=true to allow real orders.",
                LIVE_TRADING_ENV,
            )

    def _check(self, order: Order) -> None:
        if _is_live_account(order.account) and not live_trading_enabled():
            reason = f"Live trading disabled for account {order.account}. Set {LIVE_TRADING_ENV}=true to allow real orders."
            logger.warning("Order blocked: %s", reason)
            raise GatewayError(reason)

    def submit_order(self, order: Order, contract: Contract) -> int:
        self._check(order)
        return self.inner.submit_order(order, contract)

    def modify_order(self, order: Order, contract: Contract | None) -> OrderAck:
        self._check(order)
        return self.inner.modify_order(order, contract)
