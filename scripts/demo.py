"""Reference demo: one pool, one LP, two traders.

Scenario (natural units, fees as percent):
S1) init(price=1.5, fee band 0.9%..9%, liquidity target 90)
S2) add_liquidity(100)      → bootstrap mint 1:1
S3) swap(6)                 → base paid out at 1.5 minus a fee in the band
S4) add_liquidity(10)       → mint pro rata on the shrunken base reserve
S5) swap(30)
S6) remove_liquidity(109.9991)
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional

from lp_pool import LpPool, InsufficientLiquidityError, InvalidInputError
from lp_pool.core import Percentage, fmt_dec, fmt_percent
from lp_pool.fees import SAMPLER_NAMES, make_fee_sampler

# ---------- pretty printers ----------

def print_state(pool: LpPool) -> None:
    snap = pool.snapshot()
    print(f"  pool: base={fmt_dec(snap.base_reserve.to_decimal())} "
          f"staked={fmt_dec(snap.staked_reserve.to_decimal())} "
          f"lp={fmt_dec(snap.lp_supply.to_decimal())}")


def print_step(title: str, result, pool: LpPool, *, compact: bool = False) -> None:
    print(f"\n=== {title} ===")
    print(f"- result: {result}")
    if not compact:
        receipt = pool.last_swap
        if receipt is not None and title.startswith("swap"):
            print(f"  fee={fmt_percent(receipt.fee)} gross={fmt_dec(receipt.gross_out.to_decimal())} "
                  f"net={fmt_dec(receipt.net_out.to_decimal())} fee_paid={fmt_dec(receipt.fee_paid().to_decimal())}")
        print_state(pool)


# ---------- scenario runner ----------

def run_reference(*, fee_mode: str = "uniform", seed: Optional[int] = None, compact: bool = False) -> LpPool:
    min_fee = Percentage.from_percent("0.9")
    max_fee = Percentage.from_percent("9.0")
    pool = LpPool.init(
        1.5,
        min_fee.to_decimal(),
        max_fee.to_decimal(),
        90.0,
        fee_sampler=make_fee_sampler(fee_mode, seed=seed),
    )
    print("=" * 80)
    print(f"Scenario: reference pool | fee_mode={fee_mode} seed={seed}")
    print(f"  price={pool.price} fees=[{fmt_percent(pool.min_fee)}, {fmt_percent(pool.max_fee)}] "
          f"target={pool.liquidity_target}")

    print_step("add_liquidity(100)", pool.add_liquidity(100.0), pool, compact=compact)
    print_step("swap(6)", pool.swap(6.0), pool, compact=compact)
    print_step("add_liquidity(10)", pool.add_liquidity(10.0), pool, compact=compact)
    print_step("swap(30)", pool.swap(30.0), pool, compact=compact)
    print_step("remove_liquidity(109.9991)", pool.remove_liquidity(109.9991), pool, compact=compact)
    return pool


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Replay the reference LP pool scenario.")
    p.add_argument("--fee-mode", choices=SAMPLER_NAMES, default="uniform", help="Fee selection strategy")
    p.add_argument("--seed", type=int, default=None, help="Seed for the uniform fee sampler")
    p.add_argument("--compact", action="store_true", help="Only print operation results")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        run_reference(fee_mode=args.fee_mode, seed=args.seed, compact=args.compact)
    except (InvalidInputError, InsufficientLiquidityError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
