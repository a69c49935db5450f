"""Command-line interface for quoting against a static pool snapshot."""

from __future__ import annotations

import argparse
from typing import Sequence

from common import Settings, configure_logging
from pricing import (
    PoolState,
    QuoteEngineError,
    min_amount_out,
    new_pool_state,
    price_impact,
    quote_forward,
    quote_reverse,
)
from .simulation import simulate_swaps
from .transcript import write_transcript


def create_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="cpquote constant-product pool quotes")
    parser.add_argument(
        "--env-file",
        action="append",
        default=None,
        help="Path to a .env file to read before executing commands. Can be provided multiple times.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    pool_parser = argparse.ArgumentParser(add_help=False)
    pool_parser.add_argument("--reserve-in", type=int, required=True, help="Reserve of the token sold")
    pool_parser.add_argument("--reserve-out", type=int, required=True, help="Reserve of the token bought")
    pool_parser.add_argument(
        "--fee-numerator",
        type=int,
        default=None,
        help="Fee numerator (default: CPQUOTE_FEE_NUMERATOR or 30)",
    )
    pool_parser.add_argument(
        "--fee-denominator",
        type=int,
        default=None,
        help="Fee denominator (default: CPQUOTE_FEE_DENOMINATOR or 10000)",
    )

    forward_parser = subparsers.add_parser(
        "forward",
        parents=[pool_parser],
        help="Quote the output received for an exact input",
    )
    forward_parser.add_argument("--amount-in", type=int, required=True, help="Exact input amount")
    forward_parser.add_argument(
        "--slippage-bps",
        type=int,
        default=None,
        help="Slippage tolerance used for the minimum output (default: CPQUOTE_SLIPPAGE_BPS or 50)",
    )
    forward_parser.set_defaults(handler=_handle_forward)

    reverse_parser = subparsers.add_parser(
        "reverse",
        parents=[pool_parser],
        help="Quote the input required for an exact output",
    )
    reverse_parser.add_argument("--amount-out", type=int, required=True, help="Desired output amount")
    reverse_parser.set_defaults(handler=_handle_reverse)

    simulate_parser = subparsers.add_parser(
        "simulate",
        parents=[pool_parser],
        help="Apply a sequence of swaps, committing each one before the next",
    )
    simulate_parser.add_argument(
        "--amount-in",
        type=int,
        action="append",
        required=True,
        help="Input amount of one swap. Repeat for chained swaps.",
    )
    simulate_parser.add_argument("--transcript", help="Write the run to this JSON file")
    simulate_parser.add_argument(
        "--save-transcript",
        action="store_true",
        help="Write the run to the configured transcripts directory",
    )
    simulate_parser.set_defaults(handler=_handle_simulate)

    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Entry point for handling CLI execution."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env(env_files=args.env_file)
    configure_logging(settings.log_level)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.error("No handler configured for the provided command")
    try:
        return handler(args, settings)
    except QuoteEngineError as exc:
        print(f"Error: {type(exc).__name__}: {exc}")
        return 1


def _build_pool(args: argparse.Namespace, settings: Settings) -> PoolState:
    fee_numerator = args.fee_numerator if args.fee_numerator is not None else settings.fee_numerator
    fee_denominator = args.fee_denominator if args.fee_denominator is not None else settings.fee_denominator
    return new_pool_state(args.reserve_in, args.reserve_out, fee_numerator, fee_denominator)


def _handle_forward(args: argparse.Namespace, settings: Settings) -> int:
    """Print the forward quote, its price impact and the slippage-bounded minimum."""
    state = _build_pool(args, settings)
    amount_out = quote_forward(state, args.amount_in)
    impact = price_impact(state, args.amount_in)
    slippage_bps = args.slippage_bps if args.slippage_bps is not None else settings.slippage_bps
    print(f"amount_out: {amount_out}")
    print(f"price_impact: {impact:.6%}")
    print(f"min_amount_out ({slippage_bps} bps): {min_amount_out(amount_out, slippage_bps)}")
    return 0


def _handle_reverse(args: argparse.Namespace, settings: Settings) -> int:
    state = _build_pool(args, settings)
    amount_in = quote_reverse(state, args.amount_out)
    print(f"amount_in: {amount_in}")
    return 0


def _handle_simulate(args: argparse.Namespace, settings: Settings) -> int:
    """Run chained swaps and print the pool after each one."""
    state = _build_pool(args, settings)
    steps = simulate_swaps(state, args.amount_in)
    print("Simulation Steps:")
    for step in steps:
        print(
            " | ".join(
                [
                    f"[{step.index}] in={step.amount_in}",
                    f"out={step.amount_out}",
                    f"impact={step.price_impact:.6%}",
                    f"reserves=({step.state.reserve_in}, {step.state.reserve_out})",
                ]
            )
        )
    if args.transcript or args.save_transcript:
        path = write_transcript(state, steps, settings, output_path=args.transcript)
        print(f"Transcript written to {path}")
    return 0
