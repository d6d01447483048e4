"""
Core datatypes used by the pool ledger.

These datatypes are intentionally minimal and immutable so that ledger logic
and fee strategies can remain deterministic and testable.

Notes:
- All quantities are fixed-point primitives from `amounts` (integer units).
- `PoolConfig` carries the parameters fixed at construction; the mutable
  reserves live on the ledger itself and are exposed through `PoolSnapshot`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .amounts import (
    DecimalLike,
    TokenAmount,
    StakedTokenAmount,
    LpTokenAmount,
    Price,
    Percentage,
    is_finite_real,
    units_from_real_down,
)
from .constants import PERCENT_MAX_UNITS
from .exc import InvalidInputError


# ---------------------------------------------------------------------------
# Pool configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PoolConfig:
    """Immutable pool parameters.

    Fields:
    - price: staked→base exchange rate applied to every swap.
    - min_fee / max_fee: inclusive fee band; min_fee <= max_fee is enforced.
    - liquidity_target: reference base-reserve level for the utilization
      fee curve. Inert for the default (uniform) fee sampler.
    """

    price: Price
    min_fee: Percentage
    max_fee: Percentage
    liquidity_target: TokenAmount

    def __post_init__(self):
        for name, expected in (
            ("price", Price),
            ("min_fee", Percentage),
            ("max_fee", Percentage),
            ("liquidity_target", TokenAmount),
        ):
            if not isinstance(getattr(self, name), expected):
                raise InvalidInputError(f"{name} must be a {expected.__name__}")
        if self.min_fee > self.max_fee:
            raise InvalidInputError(
                f"min_fee must not exceed max_fee: {self.min_fee} > {self.max_fee}"
            )

    @classmethod
    def from_reals(
        cls,
        price: DecimalLike,
        min_fee: DecimalLike,
        max_fee: DecimalLike,
        liquidity_target: DecimalLike,
    ) -> "PoolConfig":
        """Build a config from natural-scale reals; fees are fractions of one."""
        units = {}
        for name, x in (
            ("price", price),
            ("min_fee", min_fee),
            ("max_fee", max_fee),
            ("liquidity_target", liquidity_target),
        ):
            if not is_finite_real(x):
                raise InvalidInputError(f"{name} must be a finite number, got {x!r}")
            u = units_from_real_down(x)
            if u < 0:
                raise InvalidInputError(f"{name} must be non-negative, got {x!r}")
            units[name] = u
        for name in ("min_fee", "max_fee"):
            if units[name] > PERCENT_MAX_UNITS:
                raise InvalidInputError(f"{name} must be a fraction in [0, 1], got {units[name]} units")
        return cls(
            price=Price(units["price"]),
            min_fee=Percentage(units["min_fee"]),
            max_fee=Percentage(units["max_fee"]),
            liquidity_target=TokenAmount(units["liquidity_target"]),
        )


# ---------------------------------------------------------------------------
# Snapshots and receipts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PoolSnapshot:
    """Point-in-time view of the ledger (reserves + fixed parameters)."""

    config: PoolConfig
    base_reserve: TokenAmount
    staked_reserve: StakedTokenAmount
    lp_supply: LpTokenAmount

    def is_empty(self) -> bool:
        return self.lp_supply.is_zero() and self.base_reserve.is_zero() and self.staked_reserve.is_zero()

    def as_dict(self) -> Dict[str, float]:
        """Natural-scale floats, for tables and printing."""
        return {
            "base_reserve": self.base_reserve.to_float(),
            "staked_reserve": self.staked_reserve.to_float(),
            "lp_supply": self.lp_supply.to_float(),
            "price": self.config.price.to_float(),
            "liquidity_target": self.config.liquidity_target.to_float(),
        }


@dataclass(frozen=True)
class SwapReceipt:
    """A single executed swap.

    `gross_out` is the payout before the fee and `net_out` what the trader
    received; both are rounded to the nearest unit.
    """

    staked_in: StakedTokenAmount
    fee: Percentage
    gross_out: TokenAmount
    net_out: TokenAmount

    def fee_paid(self) -> TokenAmount:
        return self.gross_out - self.net_out


__all__ = [
    "PoolConfig",
    "PoolSnapshot",
    "SwapReceipt",
]
