"""Editable static flavor menu and quantity presets."""

from __future__ import annotations

FLAVORS: list[str] = [
    "Vanilla",
    "Chocolate",
    "Red Velvet",
    "Salted Caramel",
    "Coffee",
]

QUANTITY_OPTIONS: dict[str, int] = {
    "one_cupcake": 1,
    "six_cupcakes": 6,
    "twelve_cupcakes": 12,
}

ORDER_SHARE_SUBJECT = "New Cupcake Order"
