"""
LP Pool Core
============

Unified exports for integer-domain primitives and utilities.
All ledger arithmetic works on integer unit counts at a 1/SCALE grid.
Decimal helpers are provided *only* for I/O bridging and formatting.

Core exposes the fixed-point amount types (TokenAmount, StakedTokenAmount,
LpTokenAmount, Price, Percentage) as public API.
"""

# NOTE:
#   The `core` package defines the integer-domain primitives used by the pool
#   ledger and the fee strategies. Real numbers are converted once, at the
#   boundary: truncation on the way in, exact Decimal/float on the way out.

# Integer-domain constants
from .constants import (
    SCALE,
    SCALE_SQ,
    PERCENT_MIN_UNITS,
    PERCENT_MAX_UNITS,
)

# Decimal quanta (formatting helpers)
from .constants import (
    UNIT_QUANTUM,
    PERCENT,
)

# Amount primitives and bridges
from .amounts import (
    DecimalLike,
    FixedPoint,
    TokenAmount,
    StakedTokenAmount,
    LpTokenAmount,
    Price,
    Percentage,
    Amount,
    to_decimal,
    units_from_real_down,
    real_from_units,
    float_from_units,
    mul_div_down,
    mul_div_nearest,
)

# Decimal formatting helpers (non-core arithmetic)
from .fmt import (
    DEFAULT_DECIMAL_PRECISION,
    fmt_dec,
    fmt_percent,
)

# Core datatypes
from .datatypes import (
    PoolConfig,
    PoolSnapshot,
    SwapReceipt,
)

# Core exceptions
from .exc import (
    PoolError,
    InvalidInputError,
    InsufficientLiquidityError,
    AmountDomainError,
    InvariantViolation,
)

__all__ = [
    # constants
    "SCALE",
    "SCALE_SQ",
    "PERCENT_MIN_UNITS",
    "PERCENT_MAX_UNITS",
    "UNIT_QUANTUM",
    "PERCENT",
    # amounts
    "DecimalLike",
    "FixedPoint",
    "TokenAmount",
    "StakedTokenAmount",
    "LpTokenAmount",
    "Price",
    "Percentage",
    "Amount",
    "to_decimal",
    "units_from_real_down",
    "real_from_units",
    "float_from_units",
    "mul_div_down",
    "mul_div_nearest",
    # fmt
    "DEFAULT_DECIMAL_PRECISION",
    "fmt_dec",
    "fmt_percent",
    # datatypes
    "PoolConfig",
    "PoolSnapshot",
    "SwapReceipt",
    # exceptions
    "PoolError",
    "InvalidInputError",
    "InsufficientLiquidityError",
    "AmountDomainError",
    "InvariantViolation",
]
