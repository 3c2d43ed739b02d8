"""
Tests for ib_account: Account, Order, Contract, tick normalization, record store.
"""

import pytest

from ib_account import (
    Account,
    AccountValidationError,
    AccountValue,
    Action,
    Contract,
    ContractDetails,
    InMemoryRecordStore,
    Order,
    OrderState,
    OrderType,
)
from ib_account.tick import adjust_to_tick


# --- Tick normalization ---


def test_adjust_to_tick_truncates_to_multiple():
    assert adjust_to_tick(2.6, 0.25) == 2.5
    assert adjust_to_tick(100.07, 0.05) == 100.05
    assert adjust_to_tick(150.017, 0.01) == 150.01


def test_adjust_to_tick_leaves_exact_and_empty_prices():
    assert adjust_to_tick(2.5, 0.25) == 2.5
    assert adjust_to_tick(None, 0.25) is None
    assert adjust_to_tick(0.0, 0.25) == 0.0
    assert adjust_to_tick(2.6, None) == 2.6


# --- Contract ---


def test_contract_blank_con_id_is_unresolved():
    assert not Contract(symbol="AAPL").is_resolved
    assert not Contract(symbol="AAPL", con_id=0).is_resolved
    assert not Contract(symbol="AAPL", con_id="").is_resolved
    assert Contract(symbol="AAPL", con_id=265598).is_resolved


def test_contract_verify_uses_resolver():
    seen = []

    def resolver(c):
        seen.append(c.symbol)
        return ContractDetails(con_id=265598, min_tick=0.01)

    c = Contract(symbol="AAPL", resolver=resolver)
    c.verify()
    assert seen == ["AAPL"]
    assert c.con_id == 265598
    assert c.min_tick == 0.01
    assert c.is_resolved


def test_contract_verify_without_match_stays_unresolved():
    c = Contract(symbol="NOPE", resolver=lambda c: None)
    c.verify()
    assert not c.is_resolved
    c2 = Contract(symbol="AAPL")
    c2.verify()
    assert not c2.is_resolved


# --- Order ---


def test_order_defaults():
    o = Order(action=Action.SELL, total_quantity=5.0)
    assert o.status == OrderState.NEW
    assert o.order_type == OrderType.MARKET
    assert o.local_id is None
    assert o.contract is None


def test_order_auto_adjust_uses_contract_min_tick():
    o = Order(
        order_type=OrderType.STOP_LIMIT,
        limit_price=2.6,
        aux_price=2.83,
        contract=Contract(symbol="ES", con_id=1, min_tick=0.25),
    )
    o.auto_adjust()
    assert o.limit_price == 2.5
    assert o.aux_price == 2.75


def test_order_auto_adjust_without_min_tick_is_noop():
    o = Order(order_type=OrderType.LIMIT, limit_price=2.6, contract=Contract(symbol="ES", con_id=1))
    o.auto_adjust()
    assert o.limit_price == 2.6
    Order(limit_price=2.6).auto_adjust()


def test_order_to_human_mentions_symbol_and_ids():
    o = Order(total_quantity=10, local_id=7, order_ref="42", contract=Contract(symbol="SPY"))
    text = o.to_human()
    assert "SPY" in text
    assert "#7" in text
    assert "ref=42" in text
    assert "<no contract>" in Order().to_human()


# --- Account: validation & equality ---


def test_account_rejects_malformed_identifier():
    with pytest.raises(AccountValidationError):
        Account("X000000")
    with pytest.raises(ValueError):
        Account("DU12")
    with pytest.raises(AccountValidationError):
        Account("U123456789")


def test_account_identifier_is_immutable():
    a = Account("U12345")
    with pytest.raises(AttributeError):
        a.account = "U54321"
    a.name = "renamed"
    assert a.name == "renamed"


def test_account_equality_by_identifier():
    a = Account("DU123456", name="one")
    assert a == a
    assert a == Account("DU123456", name="other")
    assert a != Account("DU654321")
    assert a != "DU123456"
    assert len({a, Account("DU123456")}) == 1


# --- Account: classification ---


def test_demo_user_account():
    a = Account("DU123456")
    assert a.is_test_environment
    assert a.is_user
    assert not a.is_advisor
    assert a.print_type == "demo_user"


def test_advisor_account_without_type_tag():
    a = Account("F7654321")
    assert a.is_advisor
    assert not a.is_user
    assert not a.is_test_environment
    assert a.print_type == "advisor"


def test_type_tag_overrides_identifier_marker():
    a = Account("DF12345", account_type="User")
    assert a.is_user
    assert a.is_advisor
    assert a.print_type == "demo_user"
    b = Account("U12345", account_type="Advisor")
    assert b.is_advisor


# --- Account: lifecycle & owned records ---


def test_connected_and_disconnected_persist():
    store = InMemoryRecordStore()
    a = Account("U12345", name="main", store=store)
    assert store.load_account("U12345") is None
    a.mark_connected()
    assert a.connected
    assert store.load_account("U12345")["connected"] is True
    a.mark_disconnected()
    assert not a.connected
    assert store.load_account("U12345") == {"name": "main", "account_type": "Account", "connected": False}


def test_open_and_finished_orders_filter_by_status():
    store = InMemoryRecordStore()
    a = Account("DU123456", store=store)
    submitted = Order(status=OrderState.SUBMITTED)
    presubmitted = Order(status=OrderState.PRESUBMITTED)
    executed = Order(status=OrderState.EXECUTED)
    cancelled = Order(status=OrderState.CANCELLED)
    for o in (submitted, presubmitted, executed, cancelled):
        store.add_order("DU123456", o)
    assert a.open_orders() == [submitted, presubmitted]
    assert a.finished_orders() == [executed]


def test_owned_records_are_keyed_by_account():
    store = InMemoryRecordStore()
    a = Account("U12345", store=store)
    b = Account("U54321", store=store)
    store.add_account_value("U12345", AccountValue(key="NetLiquidation", value="1000", currency="USD"))
    store.add_contract("U54321", Contract(symbol="SPY", con_id=756733))
    assert [v.key for v in a.account_values] == ["NetLiquidation"]
    assert b.account_values == []
    assert [c.symbol for c in b.contracts] == ["SPY"]
    assert a.contracts == []
    assert a.portfolio_values == []


def test_store_add_order_ignores_duplicates():
    store = InMemoryRecordStore()
    o = Order()
    store.add_order("U12345", o)
    store.add_order("U12345", o)
    assert store.orders("U12345") == [o]
