"""Immutable snapshot of a constant-product pool in one trade direction."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidPoolConfig


UINT256_MAX = 2**256 - 1
BPS_DENOMINATOR = 10_000


def _require_int(name: str, value: object) -> int:
    # bool is an int subclass, but True/False are never meaningful balances
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPoolConfig(f"{name} must be an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class PoolState:
    """Reserves of the input/output tokens plus the proportional trading fee.

    ``fee_numerator / fee_denominator`` is the share of every input amount
    retained by the pool. Instances are never mutated; committing a trade
    produces a new state.
    """

    reserve_in: int
    reserve_out: int
    fee_numerator: int
    fee_denominator: int

    def __post_init__(self) -> None:
        reserve_in = _require_int("reserve_in", self.reserve_in)
        reserve_out = _require_int("reserve_out", self.reserve_out)
        fee_numerator = _require_int("fee_numerator", self.fee_numerator)
        fee_denominator = _require_int("fee_denominator", self.fee_denominator)

        for name, reserve in (("reserve_in", reserve_in), ("reserve_out", reserve_out)):
            if reserve < 0:
                raise InvalidPoolConfig(f"{name} must be non-negative, got {reserve}")
            if reserve > UINT256_MAX:
                raise InvalidPoolConfig(f"{name} does not fit in 256 bits")
        if fee_denominator <= 0:
            raise InvalidPoolConfig("fee_denominator must be positive")
        if fee_denominator > UINT256_MAX:
            raise InvalidPoolConfig("fee_denominator does not fit in 256 bits")
        if not 0 <= fee_numerator < fee_denominator:
            raise InvalidPoolConfig(
                f"fee_numerator must satisfy 0 <= {fee_numerator} < {fee_denominator}"
            )

    @classmethod
    def from_fee_bps(cls, reserve_in: int, reserve_out: int, fee_bps: int = 30) -> "PoolState":
        """Build a state whose fee is expressed in basis points (30 = 0.30%)."""
        return cls(reserve_in, reserve_out, fee_bps, BPS_DENOMINATOR)

    @property
    def fee_multiplier(self) -> int:
        return self.fee_denominator - self.fee_numerator

    @property
    def is_liquid(self) -> bool:
        return self.reserve_in > 0 and self.reserve_out > 0

    @property
    def invariant(self) -> int:
        """The constant product ``k`` of the two reserves."""
        return self.reserve_in * self.reserve_out

    def flipped(self) -> "PoolState":
        """Return the same pool seen from the opposite trade direction."""
        return PoolState(self.reserve_out, self.reserve_in, self.fee_numerator, self.fee_denominator)


def new_pool_state(
    reserve_in: int,
    reserve_out: int,
    fee_numerator: int,
    fee_denominator: int,
) -> PoolState:
    """Construct a validated pool state, raising ``InvalidPoolConfig`` on bad input."""
    return PoolState(reserve_in, reserve_out, fee_numerator, fee_denominator)
