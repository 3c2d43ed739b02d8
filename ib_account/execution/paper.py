"""
Paper gateway: accepts orders in-process and simulates fills from market data.

No connection. Assigns local and perm ids, resolves contracts registered with
add_contract, and executes open orders against the latest close from a provided
source (callable symbols -> DataFrame, or dict of symbol -> price).
"""

from __future__ import annotations

import logging
from datetime import datetime
from itertools import count
from typing import Callable

import pandas as pd

from ib_account.contract import Contract, ContractDetails
from ib_account.errors import GatewayError
from ib_account.order import OPEN_STATES, Action, Order, OrderState, OrderType

from ib_account.execution.gateway import Gateway
from ib_account.execution.types import OrderAck

logger = logging.getLogger(__name__)


def _default_market_data(symbols: list[str]) -> pd.DataFrame:
    """Default: no data. Override via constructor for fill simulation."""
    return pd.DataFrame(columns=["symbol", "open", "high", "low", "close", "volume"])


def _prices_to_dataframe(symbols: list[str], prices: dict[str, float]) -> pd.DataFrame:
    """Build a one-row-per-symbol DataFrame with close from prices dict."""
    rows = [{"symbol": s, "open": p, "high": p, "low": p, "close": p, "volume": 0} for s, p in prices.items() if s in symbols]
    return pd.DataFrame(rows) if rows else pd.DataFrame(columns=["symbol", "close"])


def _crosses(order: Order, price: float) -> bool:
    """Would order trade at price?"""
    buy = order.action == Action.BUY
    if order.order_type == OrderType.MARKET:
        return True
    if order.order_type == OrderType.LIMIT and order.limit_price is not None:
        return price <= order.limit_price if buy else price >= order.limit_price
    if order.order_type == OrderType.STOP and order.aux_price is not None:
        return price >= order.aux_price if buy else price <= order.aux_price
    if order.order_type == OrderType.STOP_LIMIT and order.aux_price is not None and order.limit_price is not None:
        # stop trigger and limit must both hold at the same close
        triggered = price >= order.aux_price if buy else price <= order.aux_price
        within_limit = price <= order.limit_price if buy else price >= order.limit_price
        return triggered and within_limit
    return False


class PaperGateway(Gateway):
    """
    In-process gateway. Orders are kept by local id; modify_order replaces the
    kept order. Contracts must be registered (add_contract) to be resolvable and
    to be matched against market data.
    """

    def __init__(
        self,
        next_valid_id: int = 1,
        *,
        market_data_source: Callable[[list[str]], pd.DataFrame] | None = None,
        latest_prices: dict[str, float] | None = None,
    ) -> None:
        self._local_ids = count(next_valid_id)
        self._perm_ids = count(1_000_000)
        self._orders: dict[int, Order] = {}
        self._order_con_ids: dict[int, int] = {}
        self._contracts: dict[int, Contract] = {}
        self._order_log: list[tuple[Order, OrderAck]] = []
        if market_data_source is not None:
            self._market_data_source = market_data_source
        elif latest_prices is not None:
            self._market_data_source = lambda syms: _prices_to_dataframe(syms, latest_prices)
        else:
            self._market_data_source = _default_market_data

    def add_contract(self, contract: Contract, con_id: int, min_tick: float | None = None) -> None:
        """Make contract known under con_id. Its symbol/sec_type/exchange/currency identify it."""
        self._contracts[con_id] = Contract(
            symbol=contract.symbol,
            sec_type=contract.sec_type,
            exchange=contract.exchange,
            currency=contract.currency,
            con_id=con_id,
            min_tick=min_tick,
        )

    def resolve(self, contract: Contract) -> ContractDetails | None:
        """Contract resolver: match on symbol, sec_type, exchange and currency."""
        for con_id, known in self._contracts.items():
            if (known.symbol, known.sec_type, known.exchange, known.currency) == (
                contract.symbol,
                contract.sec_type,
                contract.exchange,
                contract.currency,
            ):
                return ContractDetails(con_id=con_id, min_tick=known.min_tick)
        return None

    def submit_order(self, order: Order, contract: Contract) -> int:
        if not contract.is_resolved:
            raise GatewayError("Contract without con_id cannot be transmitted")
        local_id = next(self._local_ids)
        order.local_id = local_id
        order.perm_id = next(self._perm_ids)
        order.status = OrderState.SUBMITTED
        self._orders[local_id] = order
        self._order_con_ids[local_id] = int(contract.con_id)
        ack = OrderAck(local_id=local_id, status=order.status, message="submitted", timestamp=datetime.now())
        self._order_log.append((order, ack))
        logger.info("Paper order #%s accepted: %s", local_id, order.to_human())
        return local_id

    def modify_order(self, order: Order, contract: Contract | None) -> OrderAck:
        if order.local_id is None or order.local_id not in self._orders:
            raise GatewayError(f"Unknown order: local_id={order.local_id}")
        if self._orders[order.local_id].status not in OPEN_STATES:
            raise GatewayError(f"Order #{order.local_id} is no longer open")
        if contract is not None and contract.is_resolved:
            self._order_con_ids[order.local_id] = int(contract.con_id)
        order.perm_id = order.perm_id or self._orders[order.local_id].perm_id
        order.status = OrderState.SUBMITTED
        self._orders[order.local_id] = order
        ack = OrderAck(local_id=order.local_id, status=order.status, message="modified", timestamp=datetime.now())
        self._order_log.append((order, ack))
        logger.info("Paper order #%s modified: %s", order.local_id, order.to_human())
        return ack

    def get_market_data(self, symbols: list[str]) -> pd.DataFrame:
        """Return market data from the injected source."""
        return self._market_data_source(symbols)

    def process_market_data(self, symbols: list[str]) -> list[Order]:
        """Execute open orders whose price condition is met at the latest close. Returns them."""
        df = self.get_market_data(symbols)
        if df.empty or "close" not in df.columns:
            return []
        executed: list[Order] = []
        for local_id, order in self._orders.items():
            if order.status not in OPEN_STATES:
                continue
            known = self._contracts.get(self._order_con_ids[local_id])
            if known is None or known.symbol not in symbols:
                continue
            if "symbol" in df.columns:
                sub = df[df["symbol"] == known.symbol]
                if sub.empty:
                    continue
                row = sub.iloc[-1]
            else:
                row = df.iloc[-1]
            price = float(row["close"])
            if price <= 0 or not _crosses(order, price):
                continue
            order.status = OrderState.EXECUTED
            ack = OrderAck(local_id=local_id, status=order.status, message=f"filled @ {price}", timestamp=datetime.now())
            self._order_log.append((order, ack))
            logger.info("Paper order #%s executed at %s", local_id, price)
            executed.append(order)
        return executed

    def get_order_log(self) -> list[tuple[Order, OrderAck]]:
        """Return log of all submissions, modifications and fills (for debugging/reporting)."""
        return list(self._order_log)
