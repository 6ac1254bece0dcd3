from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from cupcake.config import DEBUG_LOG_PATH_ENV
from cupcake.order_state import OrderState


class FakeClock:
    """Callable clock whose current day can be moved by tests."""

    def __init__(self, today: date) -> None:
        self.today = today

    def __call__(self) -> date:
        return self.today


def usd(amount: Decimal) -> str:
    return f"${amount:,.2f}"


@pytest.fixture(autouse=True)
def c_locale(monkeypatch):
    # Labels and currency follow the environment locale; pin it.
    monkeypatch.setenv("LC_ALL", "C")


@pytest.fixture(autouse=True)
def debug_log_path(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setenv(DEBUG_LOG_PATH_ENV, str(path))
    return path


@pytest.fixture
def clock() -> FakeClock:
    # A Friday.
    return FakeClock(date(2026, 10, 16))


@pytest.fixture
def order(clock) -> OrderState:
    return OrderState(today=clock, format_currency=usd)
