"""
Gateway abstraction: the connection that actually transmits orders.

Gateway ABC: submit_order, modify_order. Connection handling, the wire protocol,
retries and timeouts all live behind this interface.
Implementations: PaperGateway (in-process simulation), LiveTradingGuard (wrapper).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ib_account.contract import Contract
from ib_account.order import Order

from ib_account.execution.types import OrderAck


class Gateway(ABC):
    """
    Abstract trading gateway. Calls block until the gateway answers.
    Failures are raised as GatewayError.
    """

    @abstractmethod
    def submit_order(self, order: Order, contract: Contract) -> int:
        """
        Transmit a new order for contract. Returns the local order id assigned
        to it. contract carries only con_id and exchange.
        """
        ...

    @abstractmethod
    def modify_order(self, order: Order, contract: Contract | None) -> OrderAck:
        """Transmit changed fields of an already submitted order."""
        ...
