"""Constant-product pool quote engine."""

from .engine import (
    SwapResult,
    commit,
    execution_price,
    min_amount_out,
    price_impact,
    quote_forward,
    quote_reverse,
    spot_price,
    swap,
    swap_exact_out,
)
from .errors import (
    ArithmeticOverflow,
    IlliquidPool,
    InsufficientLiquidity,
    InvalidAmount,
    InvalidPoolConfig,
    InvariantViolation,
    QuoteEngineError,
)
from .pool import UINT256_MAX, PoolState, new_pool_state

__all__ = [
    "ArithmeticOverflow",
    "IlliquidPool",
    "InsufficientLiquidity",
    "InvalidAmount",
    "InvalidPoolConfig",
    "InvariantViolation",
    "PoolState",
    "QuoteEngineError",
    "SwapResult",
    "UINT256_MAX",
    "commit",
    "execution_price",
    "min_amount_out",
    "new_pool_state",
    "price_impact",
    "quote_forward",
    "quote_reverse",
    "spot_price",
    "swap",
    "swap_exact_out",
]
