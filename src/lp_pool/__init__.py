# Top-level API for lp_pool (integer-domain).
"""
Top-level API for lp_pool (integer-domain).

This module exposes the stable interface of the staked-token/base-token pool:
  - LpPool: the pool ledger (add/remove liquidity, swap)
  - Fee samplers: injected strategies choosing the swap fee inside the band

Core data types are integer fixed-point at a 1/SCALE grid; real numbers are
accepted and returned only at the boundary.
"""

from __future__ import annotations


# Stable surface
from .pool import LpPool
from .fees import (
    FeeQuote,
    FeeSampler,
    UniformFeeSampler,
    UnitDrawFeeSampler,
    FixedFeeSampler,
    UtilizationFeeCurve,
    make_fee_sampler,
)

# Core data types
from .core import (
    SCALE,
    TokenAmount,
    StakedTokenAmount,
    LpTokenAmount,
    Price,
    Percentage,
    PoolConfig,
    PoolSnapshot,
    SwapReceipt,
    PoolError,
    InvalidInputError,
    InsufficientLiquidityError,
    InvariantViolation,
)

__all__ = [
    # ledger
    "LpPool",
    # fee selection
    "FeeQuote",
    "FeeSampler",
    "UniformFeeSampler",
    "UnitDrawFeeSampler",
    "FixedFeeSampler",
    "UtilizationFeeCurve",
    "make_fee_sampler",
    # core integer-domain types
    "SCALE",
    "TokenAmount",
    "StakedTokenAmount",
    "LpTokenAmount",
    "Price",
    "Percentage",
    "PoolConfig",
    "PoolSnapshot",
    "SwapReceipt",
    # errors
    "PoolError",
    "InvalidInputError",
    "InsufficientLiquidityError",
    "InvariantViolation",
]
