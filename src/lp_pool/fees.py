"""
Swap fee selection strategies (integer domain).

The ledger never draws randomness itself: every swap asks an injected
`FeeSampler` for a rate inside the pool's closed fee band. Strategies:

  - UniformFeeSampler: uniform over the unit grid of [min_fee, max_fee].
    This is the default and ignores pool utilization entirely.
  - UnitDrawFeeSampler: maps an injected draw u in [0, 1] onto the band.
  - FixedFeeSampler: always the same rate (deterministic tests, scans).
  - UtilizationFeeCurve: deterministic curve anchored on the liquidity
    target; the fee rises linearly to max_fee as the post-swap base reserve
    falls below the target.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from decimal import ROUND_HALF_UP
from typing import Callable, Dict, Optional, Protocol

from .core import (
    DecimalLike,
    Percentage,
    TokenAmount,
    mul_div_down,
    to_decimal,
)
from .core.exc import AmountDomainError

# --- Debug utilities (toggleable) ---
DEBUG_FEES = False

def _dbg(msg: str) -> None:
    if DEBUG_FEES:
        print(f"[FEES] {msg}")


@dataclass(frozen=True)
class FeeQuote:
    """Everything a fee strategy may look at for one swap.

    - min_fee / max_fee: the pool's inclusive band.
    - base_reserve: base reserve before the swap.
    - liquidity_target: the configured utilization baseline.
    - gross_out: payout before fee for the requested staked amount.
    """

    min_fee: Percentage
    max_fee: Percentage
    base_reserve: TokenAmount
    liquidity_target: TokenAmount
    gross_out: TokenAmount

    def span(self) -> int:
        """Band width in units."""
        return self.max_fee.value - self.min_fee.value

    def contains(self, fee: Percentage) -> bool:
        return self.min_fee <= fee <= self.max_fee


class FeeSampler(Protocol):
    """Single capability: pick a fee rate in [quote.min_fee, quote.max_fee]."""

    def pick(self, quote: FeeQuote) -> Percentage:
        ...


class UniformFeeSampler:
    """Uniform draw over the integer unit grid of the closed band."""

    def __init__(self, rng: Optional[random.Random] = None, *, seed: Optional[int] = None) -> None:
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self._rng = rng if rng is not None else random.Random(seed)

    def pick(self, quote: FeeQuote) -> Percentage:
        fee = Percentage(self._rng.randint(quote.min_fee.value, quote.max_fee.value))
        _dbg(f"uniform pick={fee.value} in [{quote.min_fee.value}, {quote.max_fee.value}]")
        return fee


class UnitDrawFeeSampler:
    """Place the fee at `min + round(u * (max - min))` for an injected draw u."""

    def __init__(self, draw: Callable[[], DecimalLike]) -> None:
        self._draw = draw

    def pick(self, quote: FeeQuote) -> Percentage:
        u = to_decimal(self._draw())
        if not u.is_finite() or u < 0 or u > 1:
            raise AmountDomainError(f"fee draw must lie in [0, 1], got {u}")
        offset = int((u * quote.span()).to_integral_value(rounding=ROUND_HALF_UP))
        _dbg(f"unit draw u={u} -> offset={offset}")
        return Percentage(quote.min_fee.value + offset)


class FixedFeeSampler:
    """Always answer the same rate; the ledger still checks it against the band."""

    def __init__(self, fee) -> None:
        self.fee = fee if isinstance(fee, Percentage) else Percentage.from_fraction(fee)

    def pick(self, quote: FeeQuote) -> Percentage:
        return self.fee


class UtilizationFeeCurve:
    """Monotonic fee curve centred on the liquidity target.

    remaining = max(base_reserve - gross_out, 0)
      remaining >= target (or target == 0)  ->  min_fee
      otherwise  ->  max_fee - (max_fee - min_fee) * remaining / target  (floor)
    """

    def pick(self, quote: FeeQuote) -> Percentage:
        target = quote.liquidity_target.value
        remaining = max(quote.base_reserve.value - quote.gross_out.value, 0)
        if target == 0 or remaining >= target:
            return quote.min_fee
        discount = mul_div_down(quote.span(), remaining, target)
        fee = Percentage(quote.max_fee.value - discount)
        _dbg(f"curve remaining={remaining} target={target} -> fee={fee.value}")
        return fee


SAMPLER_NAMES = ("uniform", "utilization")


def make_fee_sampler(name: str, *, seed: Optional[int] = None) -> FeeSampler:
    """Factory used by scripts (`--fee-mode`)."""
    factories: Dict[str, Callable[[], FeeSampler]] = {
        "uniform": lambda: UniformFeeSampler(seed=seed),
        "utilization": UtilizationFeeCurve,
    }
    try:
        return factories[name]()
    except KeyError:
        raise ValueError(f"unknown fee mode {name!r}; expected one of {SAMPLER_NAMES}") from None


__all__ = [
    "FeeQuote",
    "FeeSampler",
    "UniformFeeSampler",
    "UnitDrawFeeSampler",
    "FixedFeeSampler",
    "UtilizationFeeCurve",
    "SAMPLER_NAMES",
    "make_fee_sampler",
]
