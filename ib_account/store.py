"""
Record store: persistence of accounts and the records they own.

RecordStore ABC: per-account collections of orders, contracts, account values
and portfolio values, plus saving the account row itself.
InMemoryRecordStore implements it with plain dicts (tests, paper sessions).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from typing import TYPE_CHECKING

from ib_account.contract import Contract
from ib_account.order import Order
from ib_account.values import AccountValue, PortfolioValue

if TYPE_CHECKING:
    from ib_account.account import Account


class RecordStore(ABC):
    """
    Abstract record store. Collections are keyed by account identifier and
    returned as lists the caller may filter freely.
    """

    @abstractmethod
    def save_account(self, account: Account) -> None:
        """Persist the account's own fields (name, type, connected)."""
        ...

    @abstractmethod
    def orders(self, account_id: str) -> list[Order]:
        ...

    @abstractmethod
    def add_order(self, account_id: str, order: Order) -> None:
        ...

    @abstractmethod
    def replace_order(self, account_id: str, old: Order, new: Order) -> None:
        """Put new in old's place. Adds new if old is not stored."""
        ...

    @abstractmethod
    def contracts(self, account_id: str) -> list[Contract]:
        ...

    @abstractmethod
    def account_values(self, account_id: str) -> list[AccountValue]:
        ...

    @abstractmethod
    def portfolio_values(self, account_id: str) -> list[PortfolioValue]:
        ...


class InMemoryRecordStore(RecordStore):
    """Process-local store. Orders are held by reference, so in-place changes are visible."""

    def __init__(self) -> None:
        self._accounts: dict[str, dict[str, object]] = {}
        self._orders: dict[str, list[Order]] = defaultdict(list)
        self._contracts: dict[str, list[Contract]] = defaultdict(list)
        self._account_values: dict[str, list[AccountValue]] = defaultdict(list)
        self._portfolio_values: dict[str, list[PortfolioValue]] = defaultdict(list)

    def save_account(self, account: Account) -> None:
        self._accounts[account.account] = {
            "name": account.name,
            "account_type": account.account_type,
            "connected": account.connected,
        }

    def load_account(self, account_id: str) -> dict[str, object] | None:
        """Saved fields of an account, or None if it was never saved."""
        row = self._accounts.get(account_id)
        return dict(row) if row is not None else None

    def orders(self, account_id: str) -> list[Order]:
        return list(self._orders[account_id])

    def add_order(self, account_id: str, order: Order) -> None:
        if not any(o is order for o in self._orders[account_id]):
            self._orders[account_id].append(order)

    def replace_order(self, account_id: str, old: Order, new: Order) -> None:
        orders = self._orders[account_id]
        for i, o in enumerate(orders):
            if o is old:
                orders[i] = new
                return
        self.add_order(account_id, new)

    def contracts(self, account_id: str) -> list[Contract]:
        return list(self._contracts[account_id])

    def add_contract(self, account_id: str, contract: Contract) -> None:
        self._contracts[account_id].append(contract)

    def account_values(self, account_id: str) -> list[AccountValue]:
        return list(self._account_values[account_id])

    def add_account_value(self, account_id: str, value: AccountValue) -> None:
        self._account_values[account_id].append(value)

    def portfolio_values(self, account_id: str) -> list[PortfolioValue]:
        return list(self._portfolio_values[account_id])

    def add_portfolio_value(self, account_id: str, value: PortfolioValue) -> None:
        self._portfolio_values[account_id].append(value)
