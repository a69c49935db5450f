"""Constant-product (x*y=k) quote engine.

Every function here is pure: it takes a ``PoolState`` explicitly and either
returns a value or raises one of the errors in ``pricing.errors``. Amounts
follow 256-bit token semantics and intermediates are held to 512 bits, the
width needed for a product of two 256-bit values. Anything wider raises
``ArithmeticOverflow`` instead of being truncated.

Rounding always favours the pool:
- forward quotes floor the output;
- reverse quotes floor the exact inverse and add one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, localcontext

from .errors import (
    ArithmeticOverflow,
    IlliquidPool,
    InsufficientLiquidity,
    InvalidAmount,
    InvariantViolation,
)
from .pool import BPS_DENOMINATOR, UINT256_MAX, PoolState


logger = logging.getLogger(__name__)

UINT512_MAX = 2**512 - 1
PRICE_PRECISION = 80


@dataclass(frozen=True, slots=True)
class SwapResult:
    amount_in: int
    amount_out: int
    state: PoolState


def _checked_amount(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidAmount(f"{name} must be non-negative, got {value}")
    if value > UINT256_MAX:
        raise ArithmeticOverflow(f"{name} does not fit in 256 bits")
    return value


def _mul(a: int, b: int) -> int:
    product = a * b
    if product > UINT512_MAX:
        raise ArithmeticOverflow(f"intermediate product exceeds 512 bits ({a} * {b})")
    return product


def _add(a: int, b: int) -> int:
    total = a + b
    if total > UINT512_MAX:
        raise ArithmeticOverflow(f"intermediate sum exceeds 512 bits ({a} + {b})")
    return total


def _require_liquidity(state: PoolState) -> None:
    if not state.is_liquid:
        raise IlliquidPool(
            f"cannot quote against reserves ({state.reserve_in}, {state.reserve_out})"
        )


def quote_forward(state: PoolState, amount_in: int) -> int:
    """Return the output amount the pool pays for ``amount_in``.

    The fee is taken from the input side::

        amount_in_net = amount_in * (fee_denominator - fee_numerator)
        amount_out = amount_in_net * reserve_out
                     // (reserve_in * fee_denominator + amount_in_net)

    The result is always strictly below ``reserve_out``.
    """
    amount_in = _checked_amount("amount_in", amount_in)
    _require_liquidity(state)
    if amount_in == 0:
        return 0

    amount_in_net = _mul(amount_in, state.fee_multiplier)
    numerator = _mul(amount_in_net, state.reserve_out)
    denominator = _add(_mul(state.reserve_in, state.fee_denominator), amount_in_net)
    amount_out = numerator // denominator
    logger.debug("quote_forward in=%d out=%d", amount_in, amount_out)
    return amount_out


def quote_reverse(state: PoolState, amount_out: int) -> int:
    """Return the input amount required to receive at least ``amount_out``.

    Raises ``InsufficientLiquidity`` when ``amount_out`` would drain the
    output reserve and ``ArithmeticOverflow`` when the required input does
    not fit in 256 bits. Feeding the result back into ``quote_forward``
    never yields less than ``amount_out``.
    """
    amount_out = _checked_amount("amount_out", amount_out)
    _require_liquidity(state)
    if amount_out >= state.reserve_out:
        raise InsufficientLiquidity(
            f"requested {amount_out} but the output reserve holds {state.reserve_out}"
        )
    if amount_out == 0:
        return 0

    numerator = _mul(_mul(state.reserve_in, amount_out), state.fee_denominator)
    denominator = _mul(state.reserve_out - amount_out, state.fee_multiplier)
    amount_in = numerator // denominator + 1
    if amount_in > UINT256_MAX:
        raise ArithmeticOverflow(
            f"input required for {amount_out} out does not fit in 256 bits"
        )
    logger.debug("quote_reverse out=%d in=%d", amount_out, amount_in)
    return amount_in


def commit(state: PoolState, amount_in: int, amount_out: int) -> PoolState:
    """Apply a completed trade and return the resulting pool state.

    ``amount_out`` may be anything up to the forward quote for ``amount_in``;
    asking for more than the formula allows raises ``InvariantViolation``.
    The given ``state`` is left untouched.

    Raises ``InvariantViolation`` for trades the formula cannot produce and
    ``ArithmeticOverflow`` when an amount, an intermediate of the forward
    quote or the new ``reserve_in`` does not fit its integer width.
    """
    amount_in = _checked_amount("amount_in", amount_in)
    amount_out = _checked_amount("amount_out", amount_out)
    try:
        producible = quote_forward(state, amount_in)
    except IlliquidPool as exc:
        raise InvariantViolation(f"cannot commit a trade against an illiquid pool: {exc}") from exc
    if amount_out > producible:
        raise InvariantViolation(
            f"trade ({amount_in} in, {amount_out} out) exceeds the formula output {producible}"
        )

    reserve_in = state.reserve_in + amount_in
    if reserve_in > UINT256_MAX:
        raise ArithmeticOverflow("reserve_in would exceed 256 bits after commit")
    new_state = PoolState(
        reserve_in,
        state.reserve_out - amount_out,
        state.fee_numerator,
        state.fee_denominator,
    )
    logger.debug(
        "commit in=%d out=%d reserves=(%d, %d)",
        amount_in,
        amount_out,
        new_state.reserve_in,
        new_state.reserve_out,
    )
    return new_state


def swap(state: PoolState, amount_in: int) -> SwapResult:
    """Quote ``amount_in`` forward and commit the trade."""
    amount_out = quote_forward(state, amount_in)
    return SwapResult(amount_in, amount_out, commit(state, amount_in, amount_out))


def swap_exact_out(state: PoolState, amount_out: int) -> SwapResult:
    """Quote the input for ``amount_out`` and commit the trade."""
    amount_in = quote_reverse(state, amount_out)
    return SwapResult(amount_in, amount_out, commit(state, amount_in, amount_out))


def spot_price(state: PoolState) -> Decimal:
    """Marginal output per unit of input, ignoring fees. For display only."""
    _require_liquidity(state)
    with localcontext() as ctx:
        ctx.prec = PRICE_PRECISION
        return Decimal(state.reserve_out) / Decimal(state.reserve_in)


def execution_price(state: PoolState, amount_in: int) -> Decimal:
    """Average output per unit of input actually received for ``amount_in``."""
    if _checked_amount("amount_in", amount_in) == 0:
        raise InvalidAmount("execution price is undefined for a zero input")
    amount_out = quote_forward(state, amount_in)
    with localcontext() as ctx:
        ctx.prec = PRICE_PRECISION
        return Decimal(amount_out) / Decimal(amount_in)


def price_impact(state: PoolState, amount_in: int) -> Decimal:
    """Relative shortfall of the execution price against the spot price (0.01 = 1%)."""
    if _checked_amount("amount_in", amount_in) == 0:
        _require_liquidity(state)
        return Decimal(0)
    spot = spot_price(state)
    executed = execution_price(state, amount_in)
    with localcontext() as ctx:
        ctx.prec = PRICE_PRECISION
        return Decimal(1) - executed / spot


def min_amount_out(amount_out: int, slippage_bps: int) -> int:
    """Lowest acceptable output once ``slippage_bps`` of tolerance is applied."""
    amount_out = _checked_amount("amount_out", amount_out)
    if isinstance(slippage_bps, bool) or not isinstance(slippage_bps, int):
        raise InvalidAmount("slippage_bps must be an integer")
    if not 0 <= slippage_bps <= BPS_DENOMINATOR:
        raise InvalidAmount(f"slippage_bps must be within [0, {BPS_DENOMINATOR}], got {slippage_bps}")
    return amount_out * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR
