"""
Order lookup by one of three alternate keys.

Only one key is ever used: local_id wins over perm_id, perm_id over order_ref.
Keys and order fields are compared as integers, since order_ref in particular
is often stored as a string.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from decimal import Decimal
from dataclasses import dataclass
from typing import Any, Union

from ib_account.order import Order


def as_int(value: Any) -> int | None:
    """
    Integer value of an id, or None if it has none. None never matches anything.

    Accepts any integral or real number (numpy scalars, Decimal from SQL columns);
    non-integral values truncate, NaN and infinities have no integer value.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, Decimal):
        return int(value) if value.is_finite() else None
    if isinstance(value, numbers.Real):
        f = float(value)
        return int(f) if math.isfinite(f) else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _same(key: Any, field_value: Any) -> bool:
    k = as_int(key)
    return k is not None and k == as_int(field_value)


@dataclass(frozen=True)
class LocalId:
    value: Any

    def matches(self, order: Order) -> bool:
        return _same(self.value, order.local_id)


@dataclass(frozen=True)
class PermId:
    value: Any

    def matches(self, order: Order) -> bool:
        return _same(self.value, order.perm_id)


@dataclass(frozen=True)
class OrderRef:
    value: Any

    def matches(self, order: Order) -> bool:
        return _same(self.value, order.order_ref)


OrderKey = Union[LocalId, PermId, OrderRef]


def select_key(
    local_id: Any = None,
    perm_id: Any = None,
    order_ref: Any = None,
) -> OrderKey | None:
    """First present key in priority order; None if none was given."""
    if _present(local_id):
        return LocalId(local_id)
    if _present(perm_id):
        return PermId(perm_id)
    if _present(order_ref):
        return OrderRef(order_ref)
    return None


def locate_order(
    orders: Iterable[Order],
    *,
    local_id: Any = None,
    perm_id: Any = None,
    order_ref: Any = None,
) -> Order | None:
    """Return the first order matching the selected key, or None."""
    key = select_key(local_id, perm_id, order_ref)
    if key is None:
        return None
    return next((o for o in orders if key.matches(o)), None)
