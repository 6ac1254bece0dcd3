"""Observable state holder for one cupcake order."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Callable

from cupcake.debug_log import log_debug
from cupcake.models import OrderUiState
from cupcake.pricing import CurrencyFormatter, calculate_price, default_currency_format, pickup_options

StateListener = Callable[[OrderUiState], None]


@dataclass(eq=False)
class _Subscription:
    listener: StateListener
    # Version of the last snapshot this listener has already received.
    seen_version: int


class OrderState:
    """
    Holds the quantity, flavor and pickup date of a cupcake order and keeps
    the price in step with them.

    Observers register with ``subscribe`` and receive the current snapshot
    right away, then every new snapshot in the order mutations were applied.
    A listener that mutates the order while being notified has its update
    queued behind the one being delivered. If listeners raise, every
    subscriber still gets every snapshot and the first error is raised once
    the queue is drained.
    """

    def __init__(
        self,
        today: Callable[[], date] = date.today,
        format_currency: CurrencyFormatter = default_currency_format,
    ) -> None:
        self._today = today
        self._format_currency = format_currency
        self._subscriptions: list[_Subscription] = []
        self._pending: list[tuple[int, OrderUiState]] = []
        self._dispatching = False
        self._version = 0
        self._state = self._new_order()
        log_debug(f"order_init options={list(self._state.pickup_options)!r} price={self._state.price!r}")

    @property
    def ui_state(self) -> OrderUiState:
        return self._state

    def current_state(self) -> OrderUiState:
        """Return the current immutable order snapshot."""
        return self._state

    def pickup_options(self) -> tuple[str, ...]:
        return self._state.pickup_options

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Deliver the current snapshot to ``listener``, then register it.

        If that first delivery raises, the listener is not registered.
        Returns a callable that unregisters it.
        """
        subscription = _Subscription(listener, self._version)
        listener(self._state)
        self._subscriptions.append(subscription)
        log_debug(f"subscribe listeners={len(self._subscriptions)}")

        def unsubscribe() -> None:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)
                log_debug(f"unsubscribe listeners={len(self._subscriptions)}")

        return unsubscribe

    def set_quantity(self, number_cupcakes: int) -> None:
        """Set the number of cupcakes and recompute the price."""
        if isinstance(number_cupcakes, bool) or not isinstance(number_cupcakes, int):
            raise TypeError("quantity must be an integer")
        if number_cupcakes < 0:
            raise ValueError("quantity must not be negative")

        log_debug(f"set_quantity quantity={number_cupcakes}")
        self._update(
            lambda current: replace(
                current,
                quantity=number_cupcakes,
                price=self._price_for(number_cupcakes, current.date, current.pickup_options),
            )
        )

    def set_flavor(self, desired_flavor: str) -> None:
        """Set the flavor for the whole order. Only one flavor per order."""
        log_debug(f"set_flavor flavor={desired_flavor!r}")
        self._update(lambda current: replace(current, flavor=desired_flavor))

    def set_date(self, pickup_date: str) -> None:
        """Set the pickup date and recompute the price."""
        log_debug(f"set_date date={pickup_date!r}")
        self._update(
            lambda current: replace(
                current,
                date=pickup_date,
                price=self._price_for(current.quantity, pickup_date, current.pickup_options),
            )
        )

    def reset_order(self) -> None:
        """Replace the order with a fresh default one and new pickup options."""
        fresh = self._new_order()
        log_debug(f"reset_order options={list(fresh.pickup_options)!r}")
        self._update(lambda _current: fresh)

    def _new_order(self) -> OrderUiState:
        options = pickup_options(self._today())
        return OrderUiState(pickup_options=options, price=self._price_for(0, "", options))

    def _price_for(self, quantity: int, pickup_date: str, options: tuple[str, ...]) -> str:
        return calculate_price(quantity, pickup_date, options, self._format_currency)

    def _update(self, transform: Callable[[OrderUiState], OrderUiState]) -> None:
        new_state = transform(self._state)
        if new_state == self._state:
            return
        self._version += 1
        self._state = new_state
        self._pending.append((self._version, new_state))
        if self._dispatching:
            return

        self._dispatching = True
        first_error: Exception | None = None
        try:
            while self._pending:
                version, snapshot = self._pending.pop(0)
                for subscription in list(self._subscriptions):
                    if subscription not in self._subscriptions:
                        continue
                    if subscription.seen_version >= version:
                        continue
                    subscription.seen_version = version
                    try:
                        subscription.listener(snapshot)
                    except Exception as exc:
                        log_debug(f"listener_failed version={version} error={exc!r}")
                        if first_error is None:
                            first_error = exc
        finally:
            self._dispatching = False
        if first_error is not None:
            raise first_error
