"""Order summary rendering helpers."""

from __future__ import annotations

from rich.text import Text

from cupcake.models import OrderUiState


def format_quantity(quantity: int) -> str:
    if quantity == 1:
        return "1 cupcake"
    return f"{quantity} cupcakes"


def summary_rows(state: OrderUiState) -> list[tuple[str, str]]:
    """Label/value pairs shown in an order summary."""
    return [
        ("Quantity", format_quantity(state.quantity)),
        ("Flavor", state.flavor),
        ("Pickup date", state.date),
    ]


def format_order_summary(state: OrderUiState) -> Text:
    """Render the order as styled lines followed by the subtotal."""
    text = Text()
    for label, value in summary_rows(state):
        text.append(f"{label.upper()}\n", style="dim")
        text.append(f"{value}\n", style="bold")
    text.append(f"Subtotal {state.price}", style="bold")
    if state.same_day_pickup:
        text.append(" (same day)", style="italic")
    return text


def order_share_text(state: OrderUiState) -> str:
    """Plain-text body used when sharing a finished order."""
    lines = [f"{label}: {value}" for label, value in summary_rows(state)]
    lines.append(f"Total: {state.price}")
    return "\n".join(lines) + "\n\nThank you!"
