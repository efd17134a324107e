"""Integration tests for the CreateOrder use case.

Uses in-memory fakes, no network.
"""

import logging

import pytest

from ordertrack.application.create_order import CreateOrderHandler
from ordertrack.application.dto import OrderItemSpec
from ordertrack.application.session_context import SessionContext
from ordertrack.domain.exceptions import (
    AuthenticationError,
    BackendError,
    PartialWriteError,
    ValidationError,
)
from ordertrack.domain.model.status import OrderStatus, PaymentMode
from tests.fakes import FakeAuthGateway, FakeOrderRepository, signed_in_context

SPECS = [
    OrderItemSpec("Chicken Biryani", "1.5", "180"),
    OrderItemSpec("Egg Biryani", "2", "130"),
]


def _setup(**repo_kwargs) -> tuple[CreateOrderHandler, FakeOrderRepository]:
    order_repo = FakeOrderRepository(**repo_kwargs)
    return CreateOrderHandler(order_repo), order_repo


class TestCreateOrderHappyPath:

    def test_creates_order_with_correct_totals(self):
        handler, _ = _setup()
        dto = handler.handle(
            signed_in_context(),
            "Ravi",
            "9876543210",
            SPECS,
            payment_mode=PaymentMode.CASH,
            advance_payment="200",
        )
        assert dto.total == "₹530"
        assert dto.advance_paid == "₹200"
        assert dto.balance_due == "₹330"
        assert dto.payment_status == "Partially Paid"
        assert dto.order_status == "Pending"
        assert dto.payment_mode == "Cash"
        assert [i.line_total for i in dto.items] == ["₹270", "₹260"]

    def test_persists_order_and_items_under_shop(self):
        handler, order_repo = _setup()
        dto = handler.handle(signed_in_context("shop-9"), "Ravi", "9876543210", SPECS)
        saved = order_repo.get_by_id(dto.id, "shop-9")
        assert saved is not None
        assert saved.shop_id == "shop-9"
        assert dto.id in order_repo.items_saved
        assert order_repo.get_by_id(dto.id, "shop-1") is None

    def test_blank_rows_are_dropped(self):
        handler, order_repo = _setup()
        dto = handler.handle(
            signed_in_context(),
            "Ravi",
            "9876543210",
            [OrderItemSpec("  ", "1", "100"), *SPECS, OrderItemSpec("", "", "")],
        )
        assert len(dto.items) == 2

    def test_initial_status_cooking(self):
        handler, _ = _setup()
        dto = handler.handle(
            signed_in_context(), "Ravi", "9876543210", SPECS, order_status=OrderStatus.COOKING
        )
        assert dto.order_status == "Cooking"


class TestCreateMenuOrder:

    def test_menu_price_is_rounded(self):
        handler, _ = _setup()
        dto = handler.handle_menu_item(
            signed_in_context(), "Asha", "9123456789", "Mutton Biryani", "1.25"
        )
        assert dto.total == "₹313"
        assert dto.payment_status == "Unpaid"
        assert len(dto.items) == 1


class TestCreateOrderValidation:

    def test_only_blank_rows_rejected_before_any_write(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle(signed_in_context(), "Ravi", "9876543210", [OrderItemSpec("", "1", "1")])
        assert order_repo.list_for_shop("shop-1") == []

    def test_bad_quantity_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(signed_in_context(), "Ravi", "9876543210", [OrderItemSpec("Raita", "0", "30")])

    def test_signed_out_rejected(self):
        handler, _ = _setup()
        with pytest.raises(AuthenticationError):
            handler.handle(SessionContext(FakeAuthGateway()), "Ravi", "9876543210", SPECS)


class TestCreateOrderRollback:

    def test_failed_items_delete_the_order(self, caplog):
        handler, order_repo = _setup(fail_items=True)
        with caplog.at_level(logging.ERROR):
            with pytest.raises(BackendError, match="Failed to create order") as info:
                handler.handle(signed_in_context(), "Ravi", "9876543210", SPECS)

        assert not isinstance(info.value, PartialWriteError)
        assert order_repo.list_for_shop("shop-1") == []
        assert "failed to save" in caplog.text

    def test_failed_rollback_reports_orphan(self):
        handler, order_repo = _setup(fail_items=True, fail_delete=True)
        with pytest.raises(PartialWriteError) as info:
            handler.handle(signed_in_context(), "Ravi", "9876543210", SPECS)

        assert info.value.order_id == "order-1"
        assert len(order_repo.list_for_shop("shop-1")) == 1
