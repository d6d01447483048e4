"""Swap-size scan: base received vs staked size under each fee regime.

For every size q (step, 2*step, ...) a fresh pool is funded with `--reserve`
base and a single swap(q) is executed under:
  - Min-Fee   : FixedFeeSampler(min_fee)
  - Max-Fee   : FixedFeeSampler(max_fee)
  - Utilization: UtilizationFeeCurve (liquidity target = `--target`)
The scan stops once no regime can fill q. Rows are collected in a pandas
DataFrame; `--plot` draws effective price curves with seaborn.
"""
from __future__ import annotations

import argparse
from decimal import Decimal
from typing import Callable, Dict, List, Optional

import pandas as pd

from lp_pool import LpPool, InsufficientLiquidityError
from lp_pool.core import PoolConfig
from lp_pool.fees import FeeSampler, FixedFeeSampler, UtilizationFeeCurve


def _regimes(config: PoolConfig) -> Dict[str, Callable[[], FeeSampler]]:
    return {
        "Min-Fee": lambda: FixedFeeSampler(config.min_fee),
        "Max-Fee": lambda: FixedFeeSampler(config.max_fee),
        "Utilization": UtilizationFeeCurve,
    }


def scan(config: PoolConfig, *, reserve: Decimal, step: Decimal, max_rows: int = 1000) -> pd.DataFrame:
    records: List[dict] = []
    q = step
    for _ in range(max_rows):
        filled_any = False
        for mode, factory in _regimes(config).items():
            pool = LpPool(config, fee_sampler=factory())
            pool.add_liquidity(reserve)
            try:
                received = pool.swap(q)
            except InsufficientLiquidityError:
                continue
            filled_any = True
            receipt = pool.last_swap
            records.append({
                "q": float(q),
                "mode": mode,
                "received": received,
                "avg_price": received / float(q),
                "fee_pct": float(receipt.fee.as_percent()),
                "base_left": pool.base_reserve.to_float(),
            })
        if not filled_any:
            break
        q += step
    return pd.DataFrame.from_records(records, columns=["q", "mode", "received", "avg_price", "fee_pct", "base_left"])


def plot(df: pd.DataFrame, config: PoolConfig, out: Optional[str] = None) -> None:
    import matplotlib.pyplot as plt
    import seaborn as sns

    sns.set(style="whitegrid")
    fig, ax = plt.subplots(figsize=(8, 5))
    sns.lineplot(data=df, x="q", y="avg_price", hue="mode", ax=ax)
    ax.set_xlabel("Swap Size (staked)")
    ax.set_ylabel("Effective Price (base per staked)")
    ax.set_title("Effective Price by Fee Regime")
    ax.axhline(config.price.to_float(), color="grey", linestyle="--", linewidth=1.0)
    ax.legend(loc="lower left")
    plt.tight_layout()
    if out:
        fig.savefig(out)
        print(f"Plot saved to: {out}")
    else:
        plt.show()


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Scan swap sizes against a freshly funded pool.")
    p.add_argument("--price", default="1.5")
    p.add_argument("--min-fee", default="0.009", help="Fraction of one")
    p.add_argument("--max-fee", default="0.09", help="Fraction of one")
    p.add_argument("--target", default="90", help="Liquidity target (base)")
    p.add_argument("--reserve", default="100", help="Initial base deposit")
    p.add_argument("--step", default="5", help="Swap size increment (staked)")
    p.add_argument("--plot", action="store_true")
    p.add_argument("--out", default=None, help="Save the plot instead of showing it")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = PoolConfig.from_reals(args.price, args.min_fee, args.max_fee, args.target)
    df = scan(config, reserve=Decimal(args.reserve), step=Decimal(args.step))
    print("\nSwap scan summary")
    print(df.to_string(index=False))
    if args.plot and not df.empty:
        plot(df, config, out=args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
