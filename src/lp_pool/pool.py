"""
Single-sided staked-token/base-token pool ledger (**accounting math only**).

Liquidity providers deposit base token and receive LP shares; traders swap
staked token for base token at a fixed price minus a fee picked from the
pool's fee band. Three ledgers are kept consistent:

  - base_reserve   (TokenAmount)        paid out on swaps and withdrawals
  - staked_reserve (StakedTokenAmount)  accrued from swaps, paid out on withdrawal
  - lp_supply      (LpTokenAmount)      joint claim on both reserves

Rounding: caller amounts are truncated onto the unit grid, mints and
proportional withdrawals truncate, swap payouts round to the nearest unit.
Every operation validates and computes before it mutates, so a raised error
leaves the ledger untouched.
"""
from __future__ import annotations

import threading
from typing import Optional, Tuple

from .core import (
    SCALE,
    SCALE_SQ,
    DecimalLike,
    TokenAmount,
    StakedTokenAmount,
    LpTokenAmount,
    Price,
    Percentage,
    PoolConfig,
    PoolSnapshot,
    SwapReceipt,
    mul_div_down,
    mul_div_nearest,
    units_from_real_down,
)
from .core.amounts import is_finite_real
from .core.exc import InvalidInputError, InsufficientLiquidityError, InvariantViolation
from .fees import FeeQuote, FeeSampler, UniformFeeSampler

# --- Debug utilities (toggleable) ---
DEBUG_POOL = False

def _dbg(msg: str) -> None:
    if DEBUG_POOL:
        print(f"[POOL] {msg}")


def _positive_units(x: DecimalLike, name: str) -> int:
    """Truncate a caller amount onto the unit grid; reject anything <= 0 units."""
    if not is_finite_real(x):
        raise InvalidInputError(f"{name} must be a finite number, got {x!r}")
    u = units_from_real_down(x)
    if u <= 0:
        raise InvalidInputError(f"{name} must be > 0 after scaling, got {x!r}")
    return u


class LpPool:
    """Pool ledger with add/remove liquidity and staked→base swaps.

    Orientation: swaps take staked token IN and pay base token OUT.
    The mint ratio on deposits only looks at base_reserve, so shares minted at
    different times hold different effective claims on staked_reserve.
    """

    def __init__(self, config: PoolConfig, *, fee_sampler: Optional[FeeSampler] = None) -> None:
        if not isinstance(config, PoolConfig):
            raise InvalidInputError("LpPool expects a PoolConfig")
        self._config = config
        self._fee_sampler: FeeSampler = fee_sampler if fee_sampler is not None else UniformFeeSampler()
        self._base = TokenAmount.zero()
        self._staked = StakedTokenAmount.zero()
        self._lp = LpTokenAmount.zero()
        self._last_swap: Optional[SwapReceipt] = None
        # Operations read-then-write the same reserves; serialise callers.
        # Re-entrant so a fee sampler may read the pool it is pricing for.
        self._lock = threading.RLock()

    @classmethod
    def init(cls,
             price: DecimalLike,
             min_fee: DecimalLike,
             max_fee: DecimalLike,
             liquidity_target: DecimalLike,
             *,
             fee_sampler: Optional[FeeSampler] = None) -> "LpPool":
        """Create an empty pool from natural-scale reals (fees as fractions of one)."""
        config = PoolConfig.from_reals(price, min_fee, max_fee, liquidity_target)
        _dbg(f"init price={config.price.value} fees=[{config.min_fee.value}, {config.max_fee.value}] "
             f"target={config.liquidity_target.value}")
        return cls(config, fee_sampler=fee_sampler)

    # --- Read-only views ---
    @property
    def config(self) -> PoolConfig:
        return self._config

    @property
    def price(self) -> Price:
        return self._config.price

    @property
    def min_fee(self) -> Percentage:
        return self._config.min_fee

    @property
    def max_fee(self) -> Percentage:
        return self._config.max_fee

    @property
    def liquidity_target(self) -> TokenAmount:
        return self._config.liquidity_target

    @property
    def fee_sampler(self) -> FeeSampler:
        return self._fee_sampler

    @property
    def base_reserve(self) -> TokenAmount:
        with self._lock:
            return self._base

    @property
    def staked_reserve(self) -> StakedTokenAmount:
        with self._lock:
            return self._staked

    @property
    def lp_supply(self) -> LpTokenAmount:
        with self._lock:
            return self._lp

    @property
    def last_swap(self) -> Optional[SwapReceipt]:
        """Receipt of the most recent successful swap (None before the first)."""
        with self._lock:
            return self._last_swap

    def snapshot(self) -> PoolSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def _snapshot_locked(self) -> PoolSnapshot:
        return PoolSnapshot(
            config=self._config,
            base_reserve=self._base,
            staked_reserve=self._staked,
            lp_supply=self._lp,
        )

    # --- Invariants ---
    def check_invariants(self) -> None:
        """Raise InvariantViolation if the reserve tuple is inconsistent."""
        with self._lock:
            self._check_invariants_locked()

    def _check_invariants_locked(self) -> None:
        backed = not (self._base.is_zero() and self._staked.is_zero())
        if self._lp.is_zero() and backed:
            raise InvariantViolation(
                f"reserves without LP supply: base={self._base.value}, staked={self._staked.value}"
            )
        if not self._lp.is_zero() and not backed:
            raise InvariantViolation(f"LP supply {self._lp.value} has no backing reserves")

    # --- Liquidity ---
    def _mint_for(self, deposit: TokenAmount) -> LpTokenAmount:
        """LP shares for a base deposit: 1:1 on an empty pool, else pro rata on base_reserve."""
        if self._lp.is_zero():
            return LpTokenAmount(deposit.value)
        if self._base.is_zero():
            raise InsufficientLiquidityError(
                deposit, self._base, reason="no base reserve to price new LP shares"
            )
        minted = LpTokenAmount(mul_div_down(deposit.value, self._lp.value, self._base.value))
        if minted.is_zero():
            raise InvalidInputError(f"deposit of {deposit} base mints no LP shares")
        return minted

    def add_liquidity(self, amount: DecimalLike) -> float:
        """Deposit base token; return the LP shares minted (natural scale).

        The first deposit mints 1:1. Later deposits mint
        floor(amount * lp_supply / base_reserve). Raises InvalidInputError if
        amount is not > 0 after truncation to the unit grid, or if it is so
        small that it would mint zero shares. Raises InsufficientLiquidityError
        when LP shares exist but base_reserve has been drained to zero.
        """
        deposit = TokenAmount(_positive_units(amount, "amount"))
        with self._lock:
            minted = self._mint_for(deposit)
            self._base = self._base + deposit
            self._lp = self._lp + minted
            self._check_invariants_locked()
            _dbg(f"add_liquidity deposit={deposit.value} minted={minted.value} "
                 f"base={self._base.value} lp={self._lp.value}")
        return minted.to_float()

    def remove_liquidity(self, lp_amount: DecimalLike) -> Tuple[float, float]:
        """Burn LP shares; return (base, staked) paid out (natural scale)."""
        with self._lock:
            if not is_finite_real(lp_amount):
                raise InsufficientLiquidityError(lp_amount, self._lp, reason="non-finite LP amount")
            units = units_from_real_down(lp_amount)
            if units <= 0:
                raise InsufficientLiquidityError(lp_amount, self._lp, reason="LP amount must be > 0")
            if units > self._lp.value:
                raise InsufficientLiquidityError(LpTokenAmount(units), self._lp)
            burn = LpTokenAmount(units)
            out_base = self._base.mul_div_down(burn.value, self._lp.value)
            out_staked = self._staked.mul_div_down(burn.value, self._lp.value)
            new_base = self._base - out_base
            new_staked = self._staked - out_staked
            new_lp = self._lp - burn
            self._base, self._staked, self._lp = new_base, new_staked, new_lp
            self._check_invariants_locked()
            _dbg(f"remove_liquidity burn={burn.value} out_base={out_base.value} "
                 f"out_staked={out_staked.value} lp={self._lp.value}")
        return out_base.to_float(), out_staked.to_float()

    # --- Swap ---
    def swap(self, staked_amount: DecimalLike) -> float:
        """Swap staked token IN for base token OUT; return base received (natural scale).

        net = staked * price * (1 - fee), computed as one integer product over
        SCALE**2 and rounded to the nearest unit.

        The fee sampler is called with the lock held and before any mutation;
        it may read this pool (the lock is re-entrant) but must not modify it.
        """
        staked_in = StakedTokenAmount(_positive_units(staked_amount, "staked_amount"))
        with self._lock:
            price = self._config.price.value
            gross = TokenAmount(mul_div_nearest(staked_in.value, price, SCALE))
            if self._lp.is_zero():
                raise InsufficientLiquidityError(gross, self._base, reason="pool is empty")
            quote = FeeQuote(
                min_fee=self._config.min_fee,
                max_fee=self._config.max_fee,
                base_reserve=self._base,
                liquidity_target=self._config.liquidity_target,
                gross_out=gross,
            )
            fee = self._fee_sampler.pick(quote)
            if not isinstance(fee, Percentage) or not quote.contains(fee):
                raise InvariantViolation(
                    f"fee sampler returned {fee!r} outside [{quote.min_fee.value}, {quote.max_fee.value}]"
                )
            net = TokenAmount(mul_div_nearest(staked_in.value * price, fee.complement().value, SCALE_SQ))
            if net > self._base:
                raise InsufficientLiquidityError(net, self._base)
            self._base = self._base - net
            self._staked = self._staked + staked_in
            self._last_swap = SwapReceipt(staked_in=staked_in, fee=fee, gross_out=gross, net_out=net)
            self._check_invariants_locked()
            _dbg(f"swap staked_in={staked_in.value} fee={fee.value} gross={gross.value} net={net.value} "
                 f"base={self._base.value} staked={self._staked.value}")
        return net.to_float()

    def __repr__(self) -> str:
        snap = self.snapshot()
        return (f"LpPool(price={snap.config.price}, base_reserve={snap.base_reserve}, "
                f"staked_reserve={snap.staked_reserve}, lp_supply={snap.lp_supply})")


__all__ = ["LpPool"]
