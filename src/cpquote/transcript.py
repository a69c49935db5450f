"""Utilities for persisting simulation transcripts."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from common import Settings
from pricing import PoolState

from .simulation import SimulationStep


def write_transcript(
    initial: PoolState,
    steps: Sequence[SimulationStep],
    settings: Settings,
    *,
    output_path: str | Path | None = None,
    metadata: dict[str, str] | None = None,
) -> Path:
    """Persist a simulation transcript to disk and return the file path.

    Integers are written as decimal strings so 256-bit values survive
    readers that parse JSON numbers as doubles.
    """
    written_at = datetime.now(timezone.utc)
    destination = Path(output_path) if output_path else _default_path(settings, written_at)
    destination.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "timestamp": written_at.isoformat(),
        "environment": settings.environment,
        "metadata": metadata or {},
        "initial": _pool_payload(initial),
        "steps": [
            {
                "index": step.index,
                "amount_in": str(step.amount_in),
                "amount_out": str(step.amount_out),
                "price_impact": str(step.price_impact),
                "pool": _pool_payload(step.state),
            }
            for step in steps
        ],
    }

    destination.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return destination


def _pool_payload(state: PoolState) -> dict[str, str]:
    return {
        "reserve_in": str(state.reserve_in),
        "reserve_out": str(state.reserve_out),
        "fee_numerator": str(state.fee_numerator),
        "fee_denominator": str(state.fee_denominator),
    }


def _default_path(settings: Settings, written_at: datetime) -> Path:
    # one file per run; runs within the same second share a name
    stamp = written_at.strftime("%Y%m%dT%H%M%SZ")
    return settings.transcripts_dir / f"simulation_{settings.environment}_{stamp}.json"
