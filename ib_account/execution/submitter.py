"""
Order submission: attach and resolve the contract, normalize prices, hand the
order to the gateway.

An order without a resolvable contract is refused (logged and recorded), never raised.
Gateway errors propagate unchanged.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ib_account.contract import Contract
from ib_account.errors import GatewayError
from ib_account.order import Order

from ib_account.execution.gateway import Gateway
from ib_account.execution.types import RejectedOrderLog, RejectionReason

logger = logging.getLogger(__name__)


class OrderSubmitter:
    """Places orders for one account through a gateway."""

    def __init__(self, account_id: str, gateway: Gateway | None, rejected_log: list[RejectedOrderLog]) -> None:
        self.account_id = account_id
        self.gateway = gateway
        self._rejected_log = rejected_log

    def place(
        self,
        order: Order,
        contract: Contract | None = None,
        *,
        auto_adjust: bool = True,
    ) -> int | None:
        """
        Submit order and return the gateway's local id, or None if the order has
        no resolvable contract.

        An attached contract takes precedence over the contract argument.
        order.account is stamped in either case.
        """
        if order.contract is None:
            order.contract = contract
        if order.contract is not None and not order.contract.is_resolved:
            order.contract.verify()
        order.account = self.account_id

        c = order.contract
        if c is None or not c.is_resolved:
            logger.error("No contract specified .::. %s", order.to_human())
            self._rejected_log.append(
                RejectedOrderLog(
                    reason=RejectionReason.UNRESOLVED_CONTRACT,
                    timestamp=datetime.now(),
                    order=order,
                    detail="missing contract" if c is None else "con_id unresolved",
                )
            )
            return None

        if self.gateway is None:
            raise GatewayError(f"No gateway attached to account {self.account_id}")
        if auto_adjust:
            order.auto_adjust()
        # con_id and exchange fully qualify a contract
        gateway_contract = Contract(con_id=c.con_id, exchange=c.exchange)
        logger.info("Placing order for account %s: %s", self.account_id, order.to_human())
        local_id = self.gateway.submit_order(order, gateway_contract)
        if local_id is not None:
            order.local_id = local_id
        return local_id
