"""
Core exception types for lp_pool.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "PoolError",
    "InvalidInputError",
    "InsufficientLiquidityError",
    "AmountDomainError",
    "InvariantViolation",
]


class PoolError(Exception):
    """Base class for caller-recoverable pool errors."""
    pass


class InvalidInputError(PoolError):
    """Raised when a strictly positive amount (or a valid parameter) was required."""
    pass


class InsufficientLiquidityError(PoolError):
    """Raised when a withdrawal or swap payout exceeds the pool's backing.

    Attributes
    ----------
    requested : Any
        The requested amount, for context. A fixed-point object whenever the
        amount maps onto the unit grid as a non-negative value; otherwise
        (non-finite or non-positive input) the raw caller value.
    available : Any
        The amount the pool could back at the time of the call.
    """

    def __init__(self, requested, available, *, reason=None):
        msg = f"Requested {requested} exceeds available liquidity={available}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.requested = requested
        self.available = available
        self.reason = reason


class AmountDomainError(ValueError):
    """Raised when inputs violate the non-negative fixed-point domain."""
    pass


class InvariantViolation(Exception):
    """Raised when arithmetic or guards would break ledger invariants."""
    pass
