"""
Contract: a tradeable instrument as the gateway knows it.

con_id and exchange fully qualify a contract to the gateway. The other fields
only serve to resolve con_id when it is not known yet (see verify).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractDetails:
    """What a resolver learns about a contract."""

    con_id: int
    min_tick: float | None = None


class ContractResolver(Protocol):
    """Looks up a contract (e.g. at the gateway). Returns None when nothing matches."""

    def __call__(self, contract: Contract) -> ContractDetails | None:
        ...


@dataclass
class Contract:
    symbol: str | None = None
    sec_type: str = "STK"
    exchange: str = "SMART"
    currency: str = "USD"
    con_id: int | None = None
    min_tick: float | None = None
    resolver: ContractResolver | None = field(default=None, repr=False, compare=False)

    @property
    def is_resolved(self) -> bool:
        """True when con_id is set. None, 0 and blank strings count as unset."""
        if self.con_id is None:
            return False
        if isinstance(self.con_id, str):
            return bool(self.con_id.strip())
        return self.con_id != 0

    def verify(self) -> None:
        """
        Resolve con_id (and min_tick) in place through the resolver.

        Failure is silent: the contract simply stays unresolved, callers check
        is_resolved afterwards.
        """
        if self.resolver is None:
            logger.debug("No resolver attached to %s; cannot verify", self)
            return
        details = self.resolver(self)
        if details is None:
            logger.warning("Contract could not be resolved: %s %s@%s", self.sec_type, self.symbol, self.exchange)
            return
        self.con_id = details.con_id
        if details.min_tick is not None:
            self.min_tick = details.min_tick
