import pytest
from decimal import Decimal

from lp_pool.core.amounts import (
    TokenAmount,
    StakedTokenAmount,
    LpTokenAmount,
    Price,
    Percentage,
    units_from_real_down,
    real_from_units,
    float_from_units,
    mul_div_down,
    mul_div_nearest,
    to_decimal,
)
from lp_pool.core.constants import SCALE
from lp_pool.core.exc import AmountDomainError, InvariantViolation


# -----------------------------
# Boundary bridges
# -----------------------------

@pytest.mark.parametrize(
    "x,expected",
    [
        (1.5, 1_500_000),
        (100.0, 100_000_000),
        (109.9991, 109_999_100),   # read as written, not as its binary neighbour
        ("2.5", 2_500_000),
        (Decimal("0.0000019"), 1),
        (0.0000009, 0),            # truncates below one unit
        (7, 7_000_000),
        (-1.2, -1_200_000),
    ],
)
def test_units_from_real_down(x, expected):
    print(f"[units_from_real_down] {x!r} -> expect {expected}")
    assert units_from_real_down(x) == expected


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), "-inf", "abc", True, None, [1]])
def test_units_from_real_rejects_non_numbers(bad):
    print(f"[units_from_real_down-invalid] {bad!r} -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        units_from_real_down(bad)


@pytest.mark.parametrize(
    "x,expected",
    [
        ("0.99999999999999999999999999999", 999_999),          # 29 significant digits
        ("-0.99999999999999999999999999999", -999_999),
        ("123456789012345678901234.9999999", 123456789012345678901234_999_999),
        (Decimal("1E+30"), 10**36),
        ("1.999999999999999999999999999999999999999", 1_999_999),
    ],
)
def test_units_from_real_down_never_rounds_up_on_long_inputs(x, expected):
    print(f"[units_from_real_down-precision] {x!r} -> expect {expected}")
    assert units_from_real_down(x) == expected


def test_deposit_with_long_input_is_truncated(reference_config):
    from lp_pool import LpPool

    pool = LpPool(reference_config)
    minted = pool.add_liquidity("0.99999999999999999999999999999")
    print(f"[units_from_real_down-deposit] minted={minted} base={pool.base_reserve.value}")
    assert pool.base_reserve.value == 999_999
    assert pool.lp_supply.value == 999_999


def test_to_decimal_passthrough_and_float_text():
    d = Decimal("1.25")
    assert to_decimal(d) is d
    assert to_decimal(0.1) == Decimal("0.1")


def test_units_to_real_views():
    print("[real_from_units] 1 unit -> 0.000001; 100e6 units -> 100.0")
    assert real_from_units(1) == Decimal("0.000001")
    assert float_from_units(100_000_000) == 100.0
    assert float_from_units(8_919_000) == 8.919
    with pytest.raises(AmountDomainError):
        real_from_units(1.0)


# -----------------------------
# Rounding helpers
# -----------------------------

@pytest.mark.parametrize(
    "a,b,den,down,nearest",
    [
        (7, 1, 2, 3, 4),      # 3.5 -> floor 3, nearest (half up) 4
        (4, 1, 10, 0, 0),     # 0.4
        (5, 1, 10, 0, 1),     # 0.5 -> half up
        (15, 1, 10, 1, 2),    # 1.5
        (3, 1, 3, 1, 1),      # exact
        (0, 5, 7, 0, 0),
    ],
)
def test_mul_div_rounding(a, b, den, down, nearest):
    print(f"[mul_div] {a}*{b}/{den}: down={down}, nearest={nearest}")
    assert mul_div_down(a, b, den) == down
    assert mul_div_nearest(a, b, den) == nearest


def test_mul_div_rejects_negative_and_zero_den():
    with pytest.raises(AmountDomainError):
        mul_div_down(-1, 2, 3)
    with pytest.raises(AmountDomainError):
        mul_div_nearest(1, -2, 3)
    with pytest.raises(AmountDomainError):
        mul_div_nearest(1, 2, 0)
    with pytest.raises(AmountDomainError):
        mul_div_down(1, 2, 0)


# -----------------------------
# Fixed-point primitives
# -----------------------------

@pytest.mark.parametrize("cls", [TokenAmount, StakedTokenAmount, LpTokenAmount, Price, Percentage])
@pytest.mark.parametrize("bad", [-1, 1.5, True, "10"])
def test_fixed_point_rejects_invalid_units(cls, bad):
    print(f"[{cls.__name__}] units={bad!r} -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        cls(bad)


def test_from_real_truncates():
    assert TokenAmount.from_real(100.0) == TokenAmount(100_000_000)
    assert Price.from_real("1.5").value == 1_500_000
    assert LpTokenAmount.from_real(Decimal("0.0000015")).value == 1
    with pytest.raises(AmountDomainError):
        TokenAmount.from_real(-1)


def test_addition_same_type_is_exact():
    a = TokenAmount(1_200_000)
    b = TokenAmount(3_400_000)
    c = a + b
    print("[add] 1.2 + 3.4 ->", c)
    assert c == TokenAmount(4_600_000)
    assert c.to_decimal() == Decimal("4.6")
    assert isinstance(c, TokenAmount)


def test_subtraction_underflow_raises():
    print("[sub-underflow] 10 - 11 units, expect InvariantViolation (no negative reserves)")
    with pytest.raises(InvariantViolation):
        _ = StakedTokenAmount(10) - StakedTokenAmount(11)
    assert (StakedTokenAmount(11) - StakedTokenAmount(11)).is_zero()


def test_mixed_type_arithmetic_rejected():
    print("[mixed-types] TokenAmount + StakedTokenAmount -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        _ = TokenAmount(1) + StakedTokenAmount(1)
    with pytest.raises(AmountDomainError):
        _ = LpTokenAmount(5) - TokenAmount(1)


def test_ordering_within_and_across_types():
    assert TokenAmount(1) < TokenAmount(2)
    assert Percentage(9_000) <= Percentage(9_000)
    assert TokenAmount(1) != StakedTokenAmount(1)
    with pytest.raises(TypeError):
        _ = TokenAmount(1) < StakedTokenAmount(2)


def test_mul_div_down_keeps_type():
    r = StakedTokenAmount(6_000_000).mul_div_down(25, 100)
    assert r == StakedTokenAmount(1_500_000)
    assert isinstance(r, StakedTokenAmount)


def test_str_is_natural_scale():
    assert str(TokenAmount(1_500_000)) == "1.500000"


# -----------------------------
# Percentage
# -----------------------------

def test_percentage_constructors():
    print("[percentage] 0.9% == from_percent(0.9) == from_fraction(0.009) == 9000 units")
    assert Percentage.from_percent("0.9").value == 9_000
    assert Percentage.from_percent(9.0).value == 90_000
    assert Percentage.from_fraction(0.009).value == 9_000
    assert Percentage.from_fraction(1).value == SCALE
    assert Percentage(9_000).as_percent() == Decimal("0.9")


def test_percentage_bounds_and_complement():
    with pytest.raises(AmountDomainError):
        Percentage(SCALE + 1)
    with pytest.raises(AmountDomainError):
        Percentage.from_fraction("1.5")
    assert Percentage(9_000).complement() == Percentage(991_000)
    assert Percentage(0).complement() == Percentage(SCALE)
