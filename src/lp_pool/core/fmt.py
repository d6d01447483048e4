"""
Formatting helpers and the global Decimal context (non-core arithmetic).

Core arithmetic uses integer units. Decimal here is only for display
(e.g., tests, logs, the demo script).
"""

from decimal import Decimal, getcontext

from .exc import AmountDomainError
from .constants import UNIT_QUANTUM
from .amounts import Percentage


# ---------------------------------------------------------------------------
# Global Decimal precision (formatting only)
# ---------------------------------------------------------------------------

#: Default global precision (number of significant digits) for Decimal-based
#: formatting. This does not affect core arithmetic which uses integers, nor
#: the caller-amount conversion, which runs in its own exact local context.
DEFAULT_DECIMAL_PRECISION: int = 28
getcontext().prec = DEFAULT_DECIMAL_PRECISION


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_dec(x: Decimal, places: int = 6) -> str:
    """Format a Decimal with a fixed number of fractional digits.

    The output is stable for logs and tests, e.g.:
      Decimal('1')        -> '1.000000'
      Decimal('8.9406')   -> '8.940600'
    """
    return format(x, f".{places}f")


def fmt_percent(p: Percentage, places: int = 4) -> str:
    """Format a Percentage as a natural percent string, e.g. '0.9000%'."""
    if not isinstance(p, Percentage):
        raise AmountDomainError("fmt_percent(): expected Percentage")
    return f"{fmt_dec(p.as_percent(), places)}%"


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "UNIT_QUANTUM",
    "fmt_dec",
    "fmt_percent",
]
