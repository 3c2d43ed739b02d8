"""
Execution-layer types: gateway acknowledgement and the rejected-order log.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ib_account.order import Order, OrderState


@dataclass(frozen=True)
class OrderAck:
    """Gateway acknowledgement of a modification. Immutable."""

    local_id: int
    status: OrderState
    message: str | None = None
    timestamp: datetime | None = None


class RejectionReason(Enum):
    """Order-flow conditions the account refuses without raising."""

    UNRESOLVED_CONTRACT = "unresolved_contract"
    ORDER_NOT_FOUND = "order_not_found"


@dataclass
class RejectedOrderLog:
    """One refused place/modify request. order is whatever the caller had in hand."""

    reason: RejectionReason
    timestamp: datetime
    order: Order | None = None
    detail: str | None = None
