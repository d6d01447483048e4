"""
Amount primitives: fixed-point integer units at a 1/SCALE grid.

- TokenAmount / StakedTokenAmount / LpTokenAmount: non-negative unit counts of
  base token, staked token and LP shares.
- Price: staked→base exchange rate in units (1.5 is stored as 1_500_000).
- Percentage: fraction of one in units (0.9% is 9_000, 90% is 900_000).
- Non-negative domain: negative values are rejected at construction.
- Rounding semantics: IN from the caller is truncated, payouts from
  proportional shares are truncated, swap payouts round to the nearest unit.

Decimal is used only at the I/O boundary (real numbers in, floats out);
ledger arithmetic never leaves the integer domain.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_DOWN, localcontext
from typing import Union

from .constants import SCALE, PERCENT, PERCENT_MAX_UNITS, UNIT_QUANTUM

# Import core exceptions
from .exc import AmountDomainError, InvariantViolation

# Debug printing control
DEBUG_AMOUNTS = False

def _dbg(msg: str) -> None:
    if DEBUG_AMOUNTS:
        print(msg)


# ----------------------------
# Integer rounding helpers (centralised)
# ----------------------------

def _floor_div(a: int, b: int) -> int:
    if a < 0 or b <= 0:
        raise AmountDomainError("_floor_div expects a>=0 and b>0")
    return a // b


def mul_div_down(a: int, b: int, den: int) -> int:
    """Return floor(a * b / den) on non-negative integers."""
    if a < 0 or b < 0:
        raise AmountDomainError(f"mul_div_down expects non-negative factors: a={a}, b={b}")
    return _floor_div(a * b, den)


def mul_div_nearest(a: int, b: int, den: int) -> int:
    """Return a * b / den rounded to the nearest integer, halves rounding up."""
    if a < 0 or b < 0:
        raise AmountDomainError(f"mul_div_nearest expects non-negative factors: a={a}, b={b}")
    if den <= 0:
        raise AmountDomainError("mul_div_nearest expects den>0")
    q, r = divmod(a * b, den)
    if 2 * r >= den:
        q += 1
    _dbg(f"mul_div_nearest: a={a}, b={b}, den={den} -> q={q} (r={r})")
    return q


# ----------------------------
# Decimal bridges (I/O only)
# ----------------------------

# Local helpers for Decimal use
DecimalLike = Union[Decimal, int, float, str]

def to_decimal(x: DecimalLike) -> Decimal:
    """Normalise numeric-like input to Decimal (I/O boundary only).

    Floats go through `str` so that `109.9991` is read as written rather than
    as its nearest binary approximation.
    """
    if isinstance(x, Decimal):
        return x
    if isinstance(x, bool) or not isinstance(x, (int, float, str)):
        raise AmountDomainError(f"unsupported numeric input: {x!r}")
    try:
        return Decimal(str(x))
    except InvalidOperation:
        raise AmountDomainError(f"not a number: {x!r}") from None


def is_finite_real(x: DecimalLike) -> bool:
    """Return True if x parses to a finite Decimal."""
    try:
        return to_decimal(x).is_finite()
    except AmountDomainError:
        return False


def units_from_real_down(x: DecimalLike) -> int:
    """IN-path: scale a real number to units, truncating toward zero.

    Exact for any number of significant digits: the global Decimal precision
    never rounds the input before truncation.
    May return a negative int for negative input; callers validate the sign.
    """
    d = to_decimal(x)
    if not d.is_finite():
        raise AmountDomainError(f"units_from_real_down: non-finite input {x!r}")
    # exact regardless of the ambient context: room for every input digit plus the grid
    _, digits, exp = d.as_tuple()
    with localcontext() as ctx:
        ctx.prec = len(digits) + abs(exp) + 7
        q = d.quantize(UNIT_QUANTUM, rounding=ROUND_DOWN)
        return int(q * SCALE)


def real_from_units(u: int) -> Decimal:
    """Return the exact Decimal value of a unit count (I/O/display only)."""
    if isinstance(u, bool) or not isinstance(u, int):
        raise AmountDomainError("real_from_units: units must be int")
    return Decimal(u) * UNIT_QUANTUM


def float_from_units(u: int) -> float:
    """Return the natural-scale float handed back to callers."""
    return float(real_from_units(u))


# ----------------------------
# Fixed-point primitives
# ----------------------------

@dataclass(frozen=True, order=True)
class FixedPoint:
    """Non-negative integer count of 1/SCALE units.

    Arithmetic is restricted to operands of the same concrete type, so a
    StakedTokenAmount can never be added to a TokenAmount by accident.
    """
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise AmountDomainError(
                f"{type(self).__name__} expects integer units, got {self.value!r}"
            )
        if self.value < 0:
            raise AmountDomainError(f"{type(self).__name__} must be >= 0 units")

    # ------------- constructors -------------

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def from_real(cls, x: DecimalLike):
        """Bridge from a real number, truncating to the unit grid."""
        return cls(units_from_real_down(x))

    # ------------- conversions -------------

    def to_decimal(self) -> Decimal:
        return real_from_units(self.value)

    def to_float(self) -> float:
        return float_from_units(self.value)

    def __str__(self) -> str:
        return f"{self.to_decimal()}"

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.value == 0

    # ------------- arithmetic (integer domain) -------------

    def _check_operand(self, other: "FixedPoint") -> None:
        if type(other) is not type(self):
            raise AmountDomainError(
                f"{type(self).__name__} arithmetic requires {type(self).__name__} operands, "
                f"got {type(other).__name__}"
            )

    def __add__(self, other):
        self._check_operand(other)
        return type(self)(self.value + other.value)

    def __sub__(self, other):
        self._check_operand(other)
        if self.value < other.value:
            raise InvariantViolation(
                f"{type(self).__name__} subtraction underflow: {self.value} - {other.value}"
            )
        return type(self)(self.value - other.value)

    def mul_div_down(self, num: int, den: int):
        """Scale by num/den, truncating; keeps the concrete type."""
        return type(self)(mul_div_down(self.value, num, den))


@dataclass(frozen=True, order=True)
class TokenAmount(FixedPoint):
    """Base-token amount in units."""


@dataclass(frozen=True, order=True)
class StakedTokenAmount(FixedPoint):
    """Staked-token amount in units."""


@dataclass(frozen=True, order=True)
class LpTokenAmount(FixedPoint):
    """LP-share amount in units."""


@dataclass(frozen=True, order=True)
class Price(FixedPoint):
    """Staked→base exchange rate in units (base per staked)."""


@dataclass(frozen=True, order=True)
class Percentage(FixedPoint):
    """Fraction of one in units, bounded to [0, SCALE]."""

    def __post_init__(self):
        super().__post_init__()
        if self.value > PERCENT_MAX_UNITS:
            raise AmountDomainError(f"Percentage must be <= {PERCENT_MAX_UNITS} units (100%)")

    @classmethod
    def from_fraction(cls, x: DecimalLike) -> "Percentage":
        """0.009 -> 0.9%."""
        return cls(units_from_real_down(x))

    @classmethod
    def from_percent(cls, p: DecimalLike) -> "Percentage":
        """0.9 -> 0.9%."""
        return cls(units_from_real_down(to_decimal(p) * PERCENT))

    def complement(self) -> "Percentage":
        """Return (1 - self), e.g. the share kept after a fee."""
        return Percentage(SCALE - self.value)

    def as_percent(self) -> Decimal:
        return self.to_decimal() / PERCENT


# Unified amount type alias for signatures
Amount = Union[TokenAmount, StakedTokenAmount, LpTokenAmount]


__all__ = [
    "DecimalLike",
    "to_decimal",
    "is_finite_real",
    "units_from_real_down",
    "real_from_units",
    "float_from_units",
    "mul_div_down",
    "mul_div_nearest",
    "FixedPoint",
    "TokenAmount",
    "StakedTokenAmount",
    "LpTokenAmount",
    "Price",
    "Percentage",
    "Amount",
]
