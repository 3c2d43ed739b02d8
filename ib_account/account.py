"""
Account: aggregate root for one brokerage account.

Classification (user/advisor, demo/live) comes from the identifier and type tag.
Orders, contracts and values are read from the record store; orders are placed
and modified through the injected gateway.
"""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass, field
from typing import Any

from ib_account.contract import Contract
from ib_account.errors import AccountValidationError
from ib_account.order import FINISHED_STATES, OPEN_STATES, Order
from ib_account.store import InMemoryRecordStore, RecordStore
from ib_account.values import AccountValue, PortfolioValue

from ib_account.execution.gateway import Gateway
from ib_account.execution.index import locate_order
from ib_account.execution.modifier import OrderChange, OrderModifier
from ib_account.execution.submitter import OrderSubmitter
from ib_account.execution.types import OrderAck, RejectedOrderLog

logger = logging.getLogger(__name__)

ACCOUNT_ID_PATTERN = re.compile(r"\AD?[UF]\d{5,8}\Z")


@dataclass(eq=False)
class Account:
    """
    A trading account, e.g. "DU123456" (demo user) or "F7654321" (advisor).

    The identifier is validated on construction and cannot be changed afterwards;
    connected is toggled through mark_connected()/mark_disconnected().
    """

    account: str
    name: str = ""
    account_type: str = "Account"
    connected: bool = False
    gateway: Gateway | None = field(default=None, repr=False)
    store: RecordStore = field(default_factory=InMemoryRecordStore, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.account, str) or not ACCOUNT_ID_PATTERN.match(self.account):
            raise AccountValidationError(f"account should be (X)X00000, got {self.account!r}")
        # guards the order collection across locate / place / modify
        self._lock = threading.RLock()
        self._rejected_log: list[RejectedOrderLog] = []

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "account" and "account" in self.__dict__:
            raise AttributeError("account identifier is immutable")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        return self is other or (isinstance(other, Account) and self.account == other.account)

    def __hash__(self) -> int:
        return hash(self.account)

    # --- Lifecycle ---

    def mark_connected(self) -> None:
        """Set connected and persist."""
        self._set_connected(True)

    def mark_disconnected(self) -> None:
        """Clear connected and persist."""
        self._set_connected(False)

    def _set_connected(self, value: bool) -> None:
        self.connected = value
        self.store.save_account(self)
        logger.debug("Account %s connected=%s", self.account, value)

    # --- Classification ---

    @property
    def is_advisor(self) -> bool:
        return bool(re.search("Advisor", self.account_type or "") or re.match(r"D?F", self.account))

    @property
    def is_user(self) -> bool:
        return bool(re.search("User", self.account_type or "") or re.match(r"D?U", self.account))

    @property
    def is_test_environment(self) -> bool:
        return self.account.startswith("D")

    @property
    def print_type(self) -> str:
        """e.g. "demo_user", "advisor"."""
        return ("demo_" if self.is_test_environment else "") + ("user" if self.is_user else "advisor")

    # --- Owned records ---

    @property
    def orders(self) -> list[Order]:
        return self.store.orders(self.account)

    @property
    def contracts(self) -> list[Contract]:
        return self.store.contracts(self.account)

    @property
    def account_values(self) -> list[AccountValue]:
        return self.store.account_values(self.account)

    @property
    def portfolio_values(self) -> list[PortfolioValue]:
        return self.store.portfolio_values(self.account)

    def open_orders(self) -> list[Order]:
        """Orders with status submitted or presubmitted."""
        return [o for o in self.orders if o.status in OPEN_STATES]

    def finished_orders(self) -> list[Order]:
        """Orders with status executed."""
        return [o for o in self.orders if o.status in FINISHED_STATES]

    def get_rejected_log(self) -> list[RejectedOrderLog]:
        """Return log of refused place/modify requests for debugging and reporting."""
        return list(self._rejected_log)

    # --- Orders ---

    def locate_order(
        self,
        *,
        local_id: Any = None,
        perm_id: Any = None,
        order_ref: Any = None,
    ) -> Order | None:
        """
        Find an order by local_id, perm_id or order_ref. Only the first given key
        (in that order) is used. Returns None if nothing matches.
        """
        with self._lock:
            return locate_order(self.orders, local_id=local_id, perm_id=perm_id, order_ref=order_ref)

    def place_order(
        self,
        order: Order,
        contract: Contract | None = None,
        *,
        auto_adjust: bool = True,
    ) -> int | None:
        """
        Submit order and return its local id.

        The order's own contract overrides contract. An unresolved con_id is
        verified first; if it stays unresolved the order is not submitted and
        None is returned. With auto_adjust, limit/aux prices are truncated to the
        contract's min tick before submission.
        """
        with self._lock:
            submitter = OrderSubmitter(self.account, self.gateway, self._rejected_log)
            local_id = submitter.place(order, contract, auto_adjust=auto_adjust)
            if local_id is not None:
                self.store.add_order(self.account, order)
            return local_id

    def modify_order(
        self,
        *,
        perm_id: Any = None,
        local_id: Any = None,
        order_ref: Any = None,
        order: Order | None = None,
        change: OrderChange | None = None,
    ) -> OrderAck | None:
        """
        Modify an order, given directly or located by key.

        change receives the order and must return the order to transmit, e.g.
        ``account.modify_order(local_id=7, change=lambda o: dataclasses.replace(o, limit_price=10.5))``.
        The returned order replaces the original in the order collection once the
        gateway accepts it. Returns None if no order was found.
        """
        with self._lock:
            modifier = OrderModifier(self.account, self.gateway, self._rejected_log, self.store)
            return modifier.modify(
                self.orders,
                perm_id=perm_id,
                local_id=local_id,
                order_ref=order_ref,
                order=order,
                change=change,
            )
