"""Domain models for the cupcake order flow."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OrderUiState:
    """Snapshot of one cupcake order.

    ``price`` is always derived from ``quantity`` and ``date``; it is never
    set on its own.
    """

    quantity: int = 0
    flavor: str = ""
    date: str = ""
    price: str = ""
    pickup_options: tuple[str, ...] = field(default_factory=tuple)

    @property
    def same_day_pickup(self) -> bool:
        return bool(self.pickup_options) and self.date == self.pickup_options[0]
