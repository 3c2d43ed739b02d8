"""
ib-account: brokerage account model and order coordination against a trading gateway.

Locates orders by alternate keys, normalizes prices to tick, and delegates
submission/modification to a Gateway. No wire protocol here.
"""

__version__ = "0.1.0"

from ib_account.contract import Contract, ContractDetails
from ib_account.order import Action, Order, OrderState, OrderType
from ib_account.values import AccountValue, PortfolioValue
from ib_account.store import InMemoryRecordStore, RecordStore
from ib_account.errors import AccountValidationError, GatewayError
from ib_account.account import Account

__all__ = [
    "Account",
    "AccountValidationError",
    "AccountValue",
    "Action",
    "Contract",
    "ContractDetails",
    "GatewayError",
    "InMemoryRecordStore",
    "Order",
    "OrderState",
    "OrderType",
    "PortfolioValue",
    "RecordStore",
]
