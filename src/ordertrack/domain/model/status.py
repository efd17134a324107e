"""Enumerations shared by the order model and the pricing engine."""

from __future__ import annotations

from enum import Enum


class OrderStatus(Enum):
    """Kitchen workflow states, in their usual order.

    The sequence is advisory: staff may jump to any state to correct
    mistakes, and ``COMPLETED`` can be reopened.
    """

    PENDING = "Pending"
    COOKING = "Cooking"
    READY = "Ready"
    COMPLETED = "Completed"


# Statuses a brand new order may start in.
INITIAL_STATUSES = (OrderStatus.PENDING, OrderStatus.COOKING)


class PaymentStatus(Enum):
    UNPAID = "Unpaid"
    PARTIALLY_PAID = "Partially Paid"
    PAID = "Paid"


class PaymentMode(Enum):
    CASH = "Cash"
    UPI = "UPI"
    CARD = "Card"


class OrderType(Enum):
    DINE_IN = "Dine-in"
    TAKEAWAY = "Takeaway"
    DELIVERY = "Delivery"
