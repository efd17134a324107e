"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ordertrack.application.create_order import CreateOrderHandler
from ordertrack.application.delete_order import DeleteOrderHandler
from ordertrack.application.dto import OrderItemSpec
from ordertrack.application.list_orders import ListOrdersHandler
from ordertrack.application.receipt import ReceiptHandler, telephone_link
from ordertrack.application.show_order import ShowOrderHandler
from ordertrack.application.toggle_order_status import ToggleOrderStatusHandler
from ordertrack.application.update_order import UpdateOrderHandler
from ordertrack.domain.exceptions import DomainException
from ordertrack.domain.model.menu import BIRYANI_MENU
from ordertrack.domain.model.status import (
    INITIAL_STATUSES,
    OrderStatus,
    OrderType,
    PaymentMode,
)
from ordertrack.infrastructure.bootstrap import order_repository, settings, shop_repository
from ordertrack.infrastructure.cli.common import display_order, open_context

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus])
_INITIAL_STATUS_CHOICE = click.Choice([s.value for s in INITIAL_STATUSES])
_MODE_CHOICE = click.Choice([m.value for m in PaymentMode])
_TYPE_CHOICE = click.Choice([t.value for t in OrderType])


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'Chicken Biryani:1.5:180,Raita:2:30' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for row in raw.split(","):
        row = row.strip()
        if not row:
            continue
        parts = row.rsplit(":", 2)
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{row}'. Expected 'Product:Quantity:UnitPrice'."
            )
        name, qty, price = (p.strip() for p in parts)
        specs.append(OrderItemSpec(product_name=name, quantity=qty, unit_price=price))
    return specs


def _optional(enum_cls, value):
    return enum_cls(value) if value else None


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--mobile", required=True, help="10 digit mobile number.")
@click.option("--items", required=True, help="Items as 'Product:Qty:Price,Product:Qty:Price'.")
@click.option("--status", default=OrderStatus.PENDING.value, type=_INITIAL_STATUS_CHOICE, show_default=True)
@click.option("--payment-mode", default=None, type=_MODE_CHOICE)
@click.option("--advance", default="0", show_default=True, help="Advance amount received.")
@click.option("--type", "order_type", default=None, type=_TYPE_CHOICE)
def order_create(
    customer: str,
    mobile: str,
    items: str,
    status: str,
    payment_mode: str | None,
    advance: str,
    order_type: str | None,
) -> None:
    """Create a new order from line items."""
    specs = _parse_items(items)
    handler = CreateOrderHandler(order_repo=order_repository(), tz=settings().tz)

    with open_context() as context:
        try:
            dto = handler.handle(
                context,
                customer_name=customer,
                mobile_number=mobile,
                item_specs=specs,
                order_status=OrderStatus(status),
                payment_mode=_optional(PaymentMode, payment_mode),
                advance_payment=advance,
                order_type=_optional(OrderType, order_type),
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Order created successfully! Order #{dto.order_number}")
    click.echo()
    display_order(dto)


@click.command("create-menu")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--mobile", required=True, help="10 digit mobile number.")
@click.option(
    "--item",
    "item_name",
    required=True,
    type=click.Choice([m.name for m in BIRYANI_MENU.list_all()]),
    help="Menu item.",
)
@click.option("--quantity", required=True, help="Quantity in kg, e.g. 1.25.")
@click.option("--status", default=OrderStatus.PENDING.value, type=_INITIAL_STATUS_CHOICE, show_default=True)
@click.option("--payment-mode", default=None, type=_MODE_CHOICE)
@click.option("--advance", default="0", show_default=True, help="Advance amount received.")
@click.option("--type", "order_type", default=None, type=_TYPE_CHOICE)
def order_create_menu(
    customer: str,
    mobile: str,
    item_name: str,
    quantity: str,
    status: str,
    payment_mode: str | None,
    advance: str,
    order_type: str | None,
) -> None:
    """Create a single-item order priced from the menu."""
    handler = CreateOrderHandler(order_repo=order_repository(), tz=settings().tz)

    with open_context() as context:
        try:
            dto = handler.handle_menu_item(
                context,
                customer_name=customer,
                mobile_number=mobile,
                item_name=item_name,
                quantity=quantity,
                order_status=OrderStatus(status),
                payment_mode=_optional(PaymentMode, payment_mode),
                advance_payment=advance,
                order_type=_optional(OrderType, order_type),
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Order created successfully! Order #{dto.order_number}")
    click.echo()
    display_order(dto)


@click.command("list")
@click.option("--search", default=None, help="Name, phone or order number.")
@click.option("--date", "on_date", default=None, type=click.DateTime(formats=["%Y-%m-%d"]))
def order_list(search: str | None, on_date) -> None:
    """List the shop's orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository(), tz=settings().tz)

    with open_context() as context:
        try:
            orders = handler.handle(
                context,
                search=search,
                on_date=on_date.date() if on_date else None,
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"{len(orders)} ORDERS FOUND")
    if not orders:
        return

    click.echo(
        f"{'Order':<14} {'Customer':<18} {'Mobile':<11} {'Status':<10} "
        f"{'Total':>10} {'Due':>10}  {'Created'}"
    )
    click.echo("-" * 100)
    for o in orders:
        click.echo(
            f"{o.order_number:<14} {o.customer_name[:18]:<18} {o.mobile_number:<11} "
            f"{o.order_status:<10} {o.total:>10} {o.balance_due:>10}  {o.created_at}"
        )
        summary = ", ".join(f"{i.product_name} (x{i.quantity})" for i in o.items[:3])
        if len(o.items) > 3:
            summary += f" +{len(o.items) - 3} more"
        click.echo(f"{'':<14} {summary or 'No items'}")


@click.command("show")
@click.option("--id", "reference", required=True, help="Order id or order number.")
def order_show(reference: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(), tz=settings().tz)

    with open_context() as context:
        try:
            dto = handler.handle(context, reference)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    display_order(dto)


@click.command("update")
@click.option("--id", "reference", required=True, help="Order id or order number.")
@click.option("--status", default=None, type=_STATUS_CHOICE)
@click.option("--payment-mode", default=None, type=_MODE_CHOICE)
@click.option("--advance", default=None, help="Total amount received so far.")
@click.option("--mobile", default=None, help="New 10 digit mobile number.")
def order_update(
    reference: str,
    status: str | None,
    payment_mode: str | None,
    advance: str | None,
    mobile: str | None,
) -> None:
    """Edit status, payment or contact details of an order."""
    handler = UpdateOrderHandler(order_repo=order_repository(), tz=settings().tz)

    with open_context() as context:
        try:
            dto = handler.handle(
                context,
                reference,
                order_status=_optional(OrderStatus, status),
                payment_mode=_optional(PaymentMode, payment_mode),
                advance_payment=advance,
                mobile_number=mobile,
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} updated.")
    display_order(dto)


@click.command("toggle")
@click.option("--id", "reference", required=True, help="Order id or order number.")
def order_toggle(reference: str) -> None:
    """Mark an order Completed, or reopen a completed one as Pending."""
    handler = ToggleOrderStatusHandler(order_repo=order_repository(), tz=settings().tz)

    with open_context() as context:
        try:
            dto = handler.handle(context, reference)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} is now {dto.order_status}.")


@click.command("delete")
@click.option("--id", "reference", required=True, help="Order id or order number.")
@click.confirmation_option(
    prompt="ARE YOU SURE? This will permanently delete this order."
)
def order_delete(reference: str) -> None:
    """Permanently delete an order."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    with open_context() as context:
        try:
            order_number = handler.handle(context, reference, confirmed=True)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Order {order_number} deleted.")


def _receipt(reference: str):
    handler = ReceiptHandler(
        order_repo=order_repository(),
        shop_repo=shop_repository(),
        country_code=settings().country_code,
    )
    with open_context() as context:
        try:
            return handler.handle(context, reference)
        except DomainException as exc:
            raise click.ClickException(str(exc))


@click.command("receipt")
@click.option("--id", "reference", required=True, help="Order id or order number.")
@click.option("--print-only", is_flag=True, default=False, help="Print instead of opening WhatsApp.")
def order_receipt(reference: str, print_only: bool) -> None:
    """Send the digital receipt over WhatsApp."""
    receipt = _receipt(reference)
    click.echo(receipt.text)
    click.echo()
    if print_only:
        click.echo(receipt.whatsapp_url)
    else:
        click.launch(receipt.whatsapp_url)


@click.command("call")
@click.option("--id", "reference", required=True, help="Order id or order number.")
@click.option("--print-only", is_flag=True, default=False, help="Print instead of dialing.")
def order_call(reference: str, print_only: bool) -> None:
    """Call the customer of an order."""
    handler = ShowOrderHandler(order_repo=order_repository(), tz=settings().tz)

    with open_context() as context:
        try:
            dto = handler.handle(context, reference)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    url = telephone_link(dto.mobile_number)
    if print_only:
        click.echo(url)
    else:
        click.launch(url)
