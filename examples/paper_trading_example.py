"""
Paper trading example: place, modify and fill orders on a demo account.

Shows: PaperGateway as contract resolver and gateway, LiveTradingGuard in front
of it, tick adjustment on submission, modification by order_ref, refused orders
in the rejected log, and fills from simulated prices.
"""

from __future__ import annotations

import logging

from ib_account import Account, Action, Contract, Order, OrderType
from ib_account.execution import LiveTradingGuard, PaperGateway


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Simulated latest prices (in real use, feed from market data)
    latest_prices: dict[str, float] = {"AAPL": 151.0}
    paper = PaperGateway(next_valid_id=1, latest_prices=latest_prices)
    paper.add_contract(Contract(symbol="AAPL"), con_id=265598, min_tick=0.01)

    account = Account("DU123456", name="paper", gateway=LiveTradingGuard(paper))
    account.mark_connected()
    print(f"Account {account.account}: {account.print_type}")

    print("--- place_order (limit price is truncated to the 0.01 tick) ---")
    order = Order(action=Action.BUY, total_quantity=100, order_type=OrderType.LIMIT, limit_price=150.017, order_ref="42")
    local_id = account.place_order(order, Contract(symbol="AAPL", resolver=paper.resolve))
    print(f"  local_id={local_id} {order.to_human()}")

    print("\n--- place_order with an unknown contract (refused, not raised) ---")
    refused = account.place_order(Order(total_quantity=1), Contract(symbol="NOPE", resolver=paper.resolve))
    print(f"  local_id={refused}")

    print("\n--- modify_order by order_ref ---")

    def move_limit(o: Order) -> Order:
        o.limit_price = 149.75
        return o

    ack = account.modify_order(order_ref=42, change=move_limit)
    print(f"  ack={ack}")

    print("\n--- market moves below the limit ---")
    latest_prices["AAPL"] = 149.5
    for filled in paper.process_market_data(["AAPL"]):
        print(f"  FILL {filled.to_human()}")
    print(f"  open={len(account.open_orders())} finished={len(account.finished_orders())}")

    print("\n--- Rejected log ---")
    for entry in account.get_rejected_log():
        print(f"  Rejected: reason={entry.reason.value}, detail={entry.detail}")

    print("\n--- Gateway order log ---")
    for o, status in paper.get_order_log():
        print(f"  #{o.local_id} -> {status.message}")


if __name__ == "__main__":
    main()
