"""
Order: an order record as held by an account.

Mutable. The account stamps account/contract on submission; the gateway
assigns local_id, perm_id and status.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ib_account.contract import Contract
from ib_account.tick import adjust_to_tick


class Action(Enum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(Enum):
    MARKET = "MKT"
    LIMIT = "LMT"
    STOP = "STP"
    STOP_LIMIT = "STP LMT"


class OrderState(Enum):
    """Lifecycle status of an order."""

    NEW = "new"
    PENDING_SUBMIT = "pending_submit"
    PRESUBMITTED = "presubmitted"
    SUBMITTED = "submitted"
    EXECUTED = "executed"
    CANCELLED = "cancelled"
    INACTIVE = "inactive"


OPEN_STATES = frozenset({OrderState.SUBMITTED, OrderState.PRESUBMITTED})
FINISHED_STATES = frozenset({OrderState.EXECUTED})


@dataclass(eq=False)
class Order:
    """
    Identified by up to three independent keys: local_id (assigned on submission),
    perm_id (assigned by the gateway) and order_ref (set by the caller; may be a
    numeric string).
    """

    action: Action = Action.BUY
    total_quantity: float = 0.0
    order_type: OrderType = OrderType.MARKET
    limit_price: float | None = None
    aux_price: float | None = None
    local_id: int | None = None
    perm_id: int | None = None
    order_ref: int | str | None = None
    client_id: int | None = None
    status: OrderState = OrderState.NEW
    account: str | None = None
    contract: Contract | None = None

    def auto_adjust(self) -> None:
        """Truncate limit and aux price to the contract's min tick. No-op without one."""
        min_tick = self.contract.min_tick if self.contract is not None else None
        if not min_tick:
            return
        self.limit_price = adjust_to_tick(self.limit_price, min_tick)
        self.aux_price = adjust_to_tick(self.aux_price, min_tick)

    def to_human(self) -> str:
        """One-line description for log messages."""
        what = self.contract.symbol if self.contract is not None and self.contract.symbol else "<no contract>"
        price = ""
        if self.limit_price:
            price += f" @ {self.limit_price}"
        if self.aux_price:
            price += f" / {self.aux_price}"
        return (
            f"<Order: {self.order_type.value} {self.action.value} {self.total_quantity} {what}{price}"
            f" {self.status.value} #{self.local_id}/{self.perm_id} ref={self.order_ref}>"
        )
