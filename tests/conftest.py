from __future__ import annotations
from decimal import Decimal
from typing import Callable, Optional

import pytest

# Import project primitives
from lp_pool import LpPool
from lp_pool.core import PoolConfig, PoolSnapshot
from lp_pool.fees import FeeSampler, FixedFeeSampler, UniformFeeSampler


# -----------------------------
# Test helpers (pure functions)
# -----------------------------

REF_PRICE = Decimal("1.5")
REF_MIN_FEE = Decimal("0.009")   # 0.9%
REF_MAX_FEE = Decimal("0.09")    # 9%
REF_TARGET = Decimal("90")


def units(x) -> int:
    """Natural amount -> integer units (test-side, exact for literals)."""
    return int(Decimal(str(x)) * 1_000_000)


def state_tuple(pool: LpPool):
    """(base, staked, lp) in units; used to assert 'no state change'."""
    snap: PoolSnapshot = pool.snapshot()
    return (snap.base_reserve.value, snap.staked_reserve.value, snap.lp_supply.value)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def reference_config() -> PoolConfig:
    return PoolConfig.from_reals(REF_PRICE, REF_MIN_FEE, REF_MAX_FEE, REF_TARGET)


@pytest.fixture()
def zero_fee_config() -> PoolConfig:
    # price 1, fee band [0, 9%]; lets tests drain or size reserves exactly
    return PoolConfig.from_reals(1, 0, REF_MAX_FEE, REF_TARGET)


@pytest.fixture()
def make_pool(reference_config) -> Callable[..., LpPool]:
    def _make(*, config: Optional[PoolConfig] = None, sampler: Optional[FeeSampler] = None,
              fee=None, deposit=None) -> LpPool:
        if sampler is None and fee is not None:
            sampler = FixedFeeSampler(fee)
        pool = LpPool(config or reference_config, fee_sampler=sampler)
        if deposit is not None:
            pool.add_liquidity(deposit)
        return pool
    return _make


@pytest.fixture()
def funded_pool(make_pool) -> LpPool:
    """Reference pool, 100 base deposited, fee pinned at the 0.9% minimum."""
    return make_pool(fee=REF_MIN_FEE, deposit=100)


@pytest.fixture()
def seeded_sampler() -> UniformFeeSampler:
    return UniformFeeSampler(seed=20240101)
