"""
Execution layer: order lookup, submission and modification through a gateway.

Gateway interface; paper gateway; live-trading guard.
"""

from ib_account.execution.gateway import Gateway
from ib_account.execution.index import LocalId, OrderRef, PermId, as_int, locate_order, select_key
from ib_account.execution.live import LIVE_TRADING_ENV, LiveTradingGuard
from ib_account.execution.modifier import OrderModifier
from ib_account.execution.paper import PaperGateway
from ib_account.execution.submitter import OrderSubmitter
from ib_account.execution.types import OrderAck, RejectedOrderLog, RejectionReason

__all__ = [
    "Gateway",
    "LIVE_TRADING_ENV",
    "LiveTradingGuard",
    "LocalId",
    "OrderAck",
    "OrderModifier",
    "OrderRef",
    "OrderSubmitter",
    "PaperGateway",
    "PermId",
    "RejectedOrderLog",
    "RejectionReason",
    "as_int",
    "locate_order",
    "select_key",
]
