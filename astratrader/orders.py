"""The trade orders screen: active and completed orders with their details."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from . import colors
from .colors import Color
from .style_utils import ALL_SIDES, Block, Line, Span, Style


class OrderType(Enum):
    """Whether an order buys or sells."""

    BUY = "Buy"
    SELL = "Sell"

    @property
    def color(self) -> Color:
        return colors.INFO if self is OrderType.BUY else colors.SUCCESS


class OrderStatus(Enum):
    """The state of a trade order."""

    ACTIVE = "Active"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    FAILED = "Failed"
    EXPIRED = "Expired"

    @property
    def color(self) -> Color:
        return _STATUS_COLORS[self]


_STATUS_COLORS = {
    OrderStatus.ACTIVE: colors.PRIMARY,
    OrderStatus.COMPLETED: colors.SUCCESS,
    OrderStatus.CANCELLED: colors.WARNING,
    OrderStatus.FAILED: colors.DANGER,
    OrderStatus.EXPIRED: colors.DIM,
}

_E = TypeVar("_E", OrderType, OrderStatus)

_TAB_TITLES = ("Active Orders", "Completed Orders")


def _coerce(kind: type[_E], value: Any) -> _E:
    if isinstance(value, kind):
        return value
    return kind(getattr(value, "value", value))


def _header(active_view: bool) -> Block:
    title = Line([Span("Trade Orders Management", Style(fg=colors.PRIMARY, bold=True))])
    selected = 0 if active_view else 1
    tab_spans = []
    for index, name in enumerate(_TAB_TITLES):
        if index:
            tab_spans.append(Span("|"))
        if index == selected:
            tab_spans.append(Span(name, Style(fg=colors.PRIMARY, bold=True)))
        else:
            tab_spans.append(Span(name, Style(fg=colors.DIM)))
    return Block(
        borders=ALL_SIDES,
        border_style=Style(fg=colors.PRIMARY),
        lines=(title, Line(tab_spans)),
    )


def _order_line(order: Any, selected: bool) -> Line:
    order_type = _coerce(OrderType, order.order_type)
    status = _coerce(OrderStatus, order.status)
    style = Style(fg=colors.PRIMARY, bold=True) if selected else Style(fg=colors.DEFAULT_TEXT)
    return Line([
        Span(f"{order_type.value.upper():<5}", Style(fg=order_type.color)),
        Span(" | "),
        Span(f"{order.item_name:<15}", style),
        Span(" | "),
        Span(f"Qty: {order.quantity:<5}", style),
        Span(" | "),
        Span(f"Price: {order.target_price:<7}", style),
        Span(" | "),
        Span(f"{status.value.upper():<10}", Style(fg=status.color)),
    ])


def _orders_block(orders: list[Any], selected_index: int | None, active_view: bool) -> Block:
    if orders:
        lines = [_order_line(order, selected_index == i) for i, order in enumerate(orders)]
    else:
        lines = [Line([Span("No orders found", Style(fg=colors.DIM))])]
    return Block(
        title=Line([Span(_TAB_TITLES[0] if active_view else _TAB_TITLES[1])]),
        borders=ALL_SIDES,
        border_style=Style(fg=colors.DIM),
        lines=tuple(lines),
    )


def _detail_lines(order: Any) -> list[Line]:
    order_type = _coerce(OrderType, order.order_type)
    status = _coerce(OrderStatus, order.status)
    label = Style(fg=colors.DIM)
    text = Style(fg=colors.DEFAULT_TEXT)
    return [
        Line([
            Span("Type: ", label),
            Span(order_type.value, Style(fg=order_type.color)),
            Span("  |  "),
            Span("Status: ", label),
            Span(status.value, Style(fg=status.color)),
        ]),
        Line([Span("Item: ", label), Span(order.item_name, text)]),
        Line([
            Span("Quantity: ", label),
            Span(str(order.quantity), text),
            Span("  |  "),
            Span("Target Price: ", label),
            Span(str(order.target_price), text),
        ]),
        Line([Span("Total Value: ", label), Span(str(order.quantity * order.target_price), text)]),
        Line([Span("Notes: ", label), Span(order.notes, text)]),
    ]


def _details_block(orders: list[Any], selected_index: int | None) -> Block:
    if selected_index is not None and 0 <= selected_index < len(orders):
        lines = _detail_lines(orders[selected_index])
    else:
        lines = [Line([Span("No order selected", Style(fg=colors.DIM))])]
    return Block(
        title=Line([Span("Order Details")]),
        borders=ALL_SIDES,
        border_style=Style(fg=colors.DIM),
        lines=tuple(lines),
    )


def _controls_block(active_view: bool) -> Block:
    key = Style(fg=colors.PRIMARY)
    spans = [Span("↑/↓", key), Span(": Navigate  ")]
    if active_view:
        spans += [
            Span("[B]", key), Span("uy  "),
            Span("[S]", key), Span("ell  "),
            Span("[C]", key), Span("ancel  "),
            Span("[Tab]", key), Span(": Show Completed  "),
        ]
    else:
        spans += [Span("[Tab]", key), Span(": Show Active  ")]
    spans += [Span("[M]", key), Span("enu")]
    return Block(
        title=Line([Span("Controls")]),
        borders=ALL_SIDES,
        border_style=Style(fg=colors.DIM),
        lines=(Line(spans),),
    )


def draw_orders_screen(game: Any) -> tuple[Block, Block, Block, Block]:
    """Return the header with tabs, the order list, the order details and the controls."""
    active_view = bool(game.orders_view_active)
    trading = game.trading_system
    if active_view:
        orders = list(trading.get_active_orders(game.player))
    else:
        orders = list(trading.get_completed_orders(game.player))
    selected_index = trading.get_selected_order_index()
    return (
        _header(active_view),
        _orders_block(orders, selected_index, active_view),
        _details_block(orders, selected_index),
        _controls_block(active_view),
    )