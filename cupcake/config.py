"""Runtime configuration defaults for pricing and debug logging."""

from __future__ import annotations

from decimal import Decimal

PRICE_PER_CUPCAKE = Decimal("2.00")
PRICE_FOR_SAME_DAY_PICKUP = Decimal("3.00")

PICKUP_OPTION_COUNT = 4

# Used when the process locale has no currency symbol (C/POSIX).
FALLBACK_CURRENCY_SYMBOL = "$"

DEBUG_LOG_PATH = "/tmp/cupcake-debug.log"
DEBUG_LOG_PATH_ENV = "CUPCAKE_DEBUG_LOG_PATH"
