"""
Order modification: find the order, apply the caller's change, send it to the gateway.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from ib_account.errors import GatewayError
from ib_account.order import Order

from ib_account.execution.gateway import Gateway
from ib_account.execution.index import locate_order
from ib_account.execution.types import OrderAck, RejectedOrderLog, RejectionReason

if TYPE_CHECKING:
    from ib_account.store import RecordStore

logger = logging.getLogger(__name__)

OrderChange = Callable[[Order], Order]


class OrderModifier:
    """Modifies submitted orders of one account through a gateway."""

    def __init__(
        self,
        account_id: str,
        gateway: Gateway | None,
        rejected_log: list[RejectedOrderLog],
        store: RecordStore | None = None,
    ) -> None:
        self.account_id = account_id
        self.gateway = gateway
        self._rejected_log = rejected_log
        self._store = store

    def modify(
        self,
        orders: Iterable[Order],
        *,
        perm_id: Any = None,
        local_id: Any = None,
        order_ref: Any = None,
        order: Any = None,
        change: OrderChange | None = None,
    ) -> OrderAck | None:
        """
        Modify an order given directly (order=) or located in orders by key.

        change receives the order and must return the order to transmit; its
        return value replaces the working order. The transmitted contract is that
        of the returned order; once the gateway accepts it, the returned order
        takes the original's place in the record store. Returns None (logged,
        recorded) when there is no order to modify.
        """
        if order is None:
            order = locate_order(orders, local_id=local_id, perm_id=perm_id, order_ref=order_ref)
        original = order
        if isinstance(order, Order) and change is not None:
            order = change(order)
        if not isinstance(order, Order):
            logger.error("Account %s: no order to modify. Instead: %r", self.account_id, order)
            self._rejected_log.append(
                RejectedOrderLog(
                    reason=RejectionReason.ORDER_NOT_FOUND,
                    timestamp=datetime.now(),
                    detail=f"local_id={local_id} perm_id={perm_id} order_ref={order_ref} got={order!r}",
                )
            )
            return None
        if self.gateway is None:
            raise GatewayError(f"No gateway attached to account {self.account_id}")
        logger.info("Modifying order for account %s: %s", self.account_id, order.to_human())
        ack = self.gateway.modify_order(order, order.contract)
        if order is not original and isinstance(original, Order) and self._store is not None:
            self._store.replace_order(self.account_id, original, order)
        return ack
