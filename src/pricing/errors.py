"""Error taxonomy for the pool quote engine."""

from __future__ import annotations


class QuoteEngineError(Exception):
    """Base class for every error raised by the quote engine."""


class InvalidPoolConfig(QuoteEngineError):
    """Reserve or fee parameters are malformed."""


class InvalidAmount(InvalidPoolConfig):
    """A trade amount is negative or not an integer."""


class IlliquidPool(QuoteEngineError):
    """One or both reserves are zero, so the pool cannot price a trade."""


class InsufficientLiquidity(QuoteEngineError):
    """The requested output meets or exceeds the available output reserve."""


class ArithmeticOverflow(QuoteEngineError):
    """A value or intermediate product exceeds the supported integer width."""


class InvariantViolation(QuoteEngineError):
    """A committed trade could not have been produced by the pool formula."""
