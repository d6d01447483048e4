"""
LP Pool Core Constants (integer domain)
=======================================

Only fixed-point integer constants live here. Formatting helpers that rely on
Decimal are kept in `fmt.py`.
"""

# NOTE: Every stored quantity (reserves, supply, price, fee rates) is an integer
# count of 1/SCALE units. Decimal quanta below are for I/O and display only.

from decimal import Decimal

# ---------------------------------------------------------------------------
# Fixed-point grid
# ---------------------------------------------------------------------------

#: Number of fixed-point units per natural unit (token, share, price, 100%).
SCALE: int = 1_000_000

#: Squared scale; the denominator of a product of two scaled integers.
SCALE_SQ: int = SCALE * SCALE

#: Percentage bounds in units (0% .. 100% of one).
PERCENT_MIN_UNITS: int = 0
PERCENT_MAX_UNITS: int = SCALE


# ---------------------------------------------------------------------------
# Decimal quanta for display/IO quantisation (formatting helpers)
# ---------------------------------------------------------------------------

# Minimum quantisation step for any fixed-point value (1 unit = 1e-6).
UNIT_QUANTUM: Decimal = Decimal("1e-6")

# Natural percent expressed in fraction-of-one (1% = 0.01).
PERCENT: Decimal = Decimal("0.01")


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "SCALE",
    "SCALE_SQ",
    "PERCENT_MIN_UNITS",
    "PERCENT_MAX_UNITS",
    "UNIT_QUANTUM",
    "PERCENT",
]
