"""Price derivation and pickup-date helpers."""

from __future__ import annotations

import locale
from contextlib import contextmanager
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, Iterator, Sequence

from cupcake.config import (
    FALLBACK_CURRENCY_SYMBOL,
    PICKUP_OPTION_COUNT,
    PRICE_FOR_SAME_DAY_PICKUP,
    PRICE_PER_CUPCAKE,
)

CurrencyFormatter = Callable[[Decimal], str]


@contextmanager
def environment_locale(category: int) -> Iterator[None]:
    """
    Switch ``category`` to the locale named by the environment
    (LC_ALL, then LC_<category>, then LANG) and restore it on exit.

    CPython leaves everything but LC_CTYPE at ``C`` until ``setlocale`` is
    called. An environment locale that is not installed keeps the current one.
    """
    previous = locale.setlocale(category)
    try:
        locale.setlocale(category, "")
        switched = True
    except locale.Error:
        switched = False
    try:
        yield
    finally:
        if switched:
            locale.setlocale(category, previous)


def format_pickup_label(day: date) -> str:
    """Format a pickup day as ``<weekday> <month> <day>``, e.g. ``Fri Oct 16``."""
    with environment_locale(locale.LC_TIME):
        return f"{day:%a %b} {day.day}"


def pickup_options(start: date, count: int = PICKUP_OPTION_COUNT) -> tuple[str, ...]:
    """Return ``count`` consecutive pickup labels starting at ``start``."""
    return tuple(format_pickup_label(start + timedelta(days=offset)) for offset in range(count))


def default_currency_format(amount: Decimal) -> str:
    """
    Format ``amount`` with the environment's monetary locale.

    The C/POSIX locale has no currency symbol, so it falls back to
    FALLBACK_CURRENCY_SYMBOL with two decimals.
    """
    with environment_locale(locale.LC_MONETARY):
        if locale.localeconv().get("currency_symbol"):
            return locale.currency(amount, grouping=True)
    return f"{FALLBACK_CURRENCY_SYMBOL}{amount:,.2f}"


def calculate_amount(quantity: int, pickup_date: str, options: Sequence[str]) -> Decimal:
    """Return the unformatted total for ``quantity`` cupcakes picked up on ``pickup_date``."""
    amount = quantity * PRICE_PER_CUPCAKE
    if options and pickup_date == options[0]:
        amount += PRICE_FOR_SAME_DAY_PICKUP
    return amount


def calculate_price(
    quantity: int,
    pickup_date: str,
    options: Sequence[str],
    format_currency: CurrencyFormatter = default_currency_format,
) -> str:
    """Return the formatted total; same-day pickup (option 0) adds the surcharge."""
    return format_currency(calculate_amount(quantity, pickup_date, options))
